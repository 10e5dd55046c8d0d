"""
Command dispatch for Chatmands.

A ``CommandRegistry`` holds command trees. Each tree pairs a grammar with an
authority threshold and a cooldown; dispatching a ``CommandCall`` returns the
actions of every tree that accepted it.

Usage:
    from chatmands.commands import AuthorityLevel, CommandCall, CommandRegistry

    registry = CommandRegistry()
    registry.update(delta_time)  # once per tick
    actions = registry.dispatch(CommandCall("!hello World", AuthorityLevel.VIEWER))
"""

from .types import AuthorityLevel, CommandCall

from .actions import (
    Action,
    Say,
    ReloadConfig,
    CommandAction,
    ReloadConfigCommand,
    SayCommand,
    HelloCommand,
    ByeCommand,
    GoodNightCommand,
    verify_args,
)

from .exceptions import (
    CommandParseError,
    GrammarMismatch,
    CallError,
    Unauthorized,
    OnCooldown,
    ArgsError,
    NotEnoughArguments,
    TooManyArguments,
)

from .tree import CommandTree
from .registry import CommandRegistry, COMMAND_PREFIX, builtin_commands, configured_commands

__all__ = [
    "AuthorityLevel",
    "CommandCall",

    # Actions and markers
    "Action",
    "Say",
    "ReloadConfig",
    "CommandAction",
    "ReloadConfigCommand",
    "SayCommand",
    "HelloCommand",
    "ByeCommand",
    "GoodNightCommand",
    "verify_args",

    # Errors
    "CommandParseError",
    "GrammarMismatch",
    "CallError",
    "Unauthorized",
    "OnCooldown",
    "ArgsError",
    "NotEnoughArguments",
    "TooManyArguments",

    # Trees and registry
    "CommandTree",
    "CommandRegistry",
    "COMMAND_PREFIX",
    "builtin_commands",
    "configured_commands",
]
