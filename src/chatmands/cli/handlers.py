"""
CLI command handlers for Chatmands.
"""

import sys
import time
from typing import Callable, Optional, TextIO

from ..bot import ChatBot
from ..commands import AuthorityLevel, CommandCall
from ..config import ConfigurationError, load_config, validate_config_file
from ..utils import get_logger, log_shutdown, log_startup, setup_logging


def handle_cli_command(
    args,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    clock: Callable[[], float] = time.monotonic,
) -> int:
    """
    Handle CLI commands based on parsed arguments.

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.check_config:
        return _handle_check_config(args, stdout)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config, verbose=args.verbose)
    bot = ChatBot(config, config_path=args.config)

    if args.parse is not None:
        return _handle_parse(bot, args, stdout)

    return _handle_console(bot, args, stdin, stdout, clock)


def _handle_check_config(args, stdout: TextIO) -> int:
    is_valid, error = validate_config_file(args.check_config)
    if is_valid:
        print(f"✅ {args.check_config} is valid", file=stdout)
        return 0
    print(f"❌ {error}", file=stdout)
    return 1


def _handle_parse(bot: ChatBot, args, stdout: TextIO) -> int:
    """Dispatch one message and print the actions without executing them."""
    actions = bot.registry.dispatch(CommandCall(args.parse, args.authority))
    if not actions:
        print("no actions", file=stdout)
    for action in actions:
        print(repr(action), file=stdout)
    return 0


def _handle_console(bot: ChatBot, args, stdin: TextIO, stdout: TextIO, clock) -> int:
    """Read lines as the host until EOF; time between lines feeds the cooldowns."""
    logger = get_logger(__name__)
    log_startup(args.config)

    last_tick = clock()
    try:
        for line in stdin:
            now = clock()
            bot.update(now - last_tick)
            last_tick = now

            message = line.rstrip("\n")
            if not message.strip():
                continue
            logger.debug(f"Host: {message!r}")
            for reply in bot.handle_message(message, AuthorityLevel.HOST):
                print(reply, file=stdout)
    except KeyboardInterrupt:
        pass

    log_shutdown()
    return 0
