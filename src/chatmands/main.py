"""
Main entry point for the Chatmands CLI application.
"""

import sys

from .cli import handle_cli_command, parse_args


def main(argv=None) -> int:
    """
    Main entry point for the Chatmands application.

    This function serves as the entry point when the package is installed
    and called via the 'chatmands' console script.
    """
    args = parse_args(argv)
    return handle_cli_command(args)


if __name__ == "__main__":
    sys.exit(main())
