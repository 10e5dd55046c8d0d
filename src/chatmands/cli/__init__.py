"""
CLI module for Chatmands.

Argument parsing lives in ``commands``, the actual work in ``handlers``.
"""

from .commands import create_parser, parse_args
from .handlers import handle_cli_command

__all__ = ["create_parser", "parse_args", "handle_cli_command"]
