"""
Command-line argument parser for Chatmands.
"""

import argparse

from .. import __version__
from ..commands.types import AuthorityLevel


def _authority(value: str) -> AuthorityLevel:
    try:
        return AuthorityLevel.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chatmands",
        description="Chatmands - chat command grammar and dispatch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chatmands --console                          # Type commands as the host
  chatmands --parse "!hello World"             # Dispatch one message and exit
  chatmands --parse "!reload" --authority broadcaster
  chatmands --check-config chatmands.yaml      # Validate a config file
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Chatmands {__version__}"
    )

    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    mode_group = parser.add_mutually_exclusive_group()

    mode_group.add_argument(
        "--console",
        action="store_true",
        help="Read commands from stdin with host authority"
    )

    mode_group.add_argument(
        "--parse",
        type=str,
        metavar="TEXT",
        help="Dispatch a single message and print the resulting actions"
    )

    mode_group.add_argument(
        "--check-config",
        type=str,
        metavar="PATH",
        help="Validate a configuration file and exit"
    )

    parser.add_argument(
        "--authority",
        type=_authority,
        default=AuthorityLevel.VIEWER,
        metavar="LEVEL",
        help="Caller authority for --parse (viewer, subscriber, moderator, broadcaster, host)"
    )

    return parser


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    return create_parser().parse_args(argv)
