"""
The set of commands a bot answers to.

Built-in commands live for the whole process. Commands from the
configuration file are rebuilt from scratch on every reload.
"""

from typing import Iterator, List, Optional

from ..config.models import CommandsConfig
from ..grammar import CommandBuilder
from ..utils.logging import get_logger
from .actions import (
    Action,
    ByeCommand,
    GoodNightCommand,
    HelloCommand,
    ReloadConfigCommand,
    SayCommand,
)
from .exceptions import ArgsError, CommandParseError
from .tree import CommandTree
from .types import AuthorityLevel, CommandCall

#: Prefix put in front of configured command names.
COMMAND_PREFIX = "!"

GREETING_COOLDOWN = 30.0


def builtin_commands() -> List[CommandTree]:
    """The hardcoded command trees, in dispatch order."""
    system = [
        CommandTree(
            CommandBuilder().literal(["!reload"]).finalize(True, ReloadConfigCommand()),
            authority_level=AuthorityLevel.BROADCASTER,
        ),
    ]

    greetings = [
        CommandTree(
            CommandBuilder().literal([command]).word().finalize(True, action),
            cooldown=GREETING_COOLDOWN,
        )
        for command, action in [
            ("!hello", HelloCommand()),
            ("!bye", ByeCommand()),
            ("!gn", GoodNightCommand()),
        ]
    ]

    return system + greetings


def configured_commands(config: CommandsConfig) -> List[CommandTree]:
    """One ``!name`` -> fixed response tree per configured command."""
    return [
        CommandTree(
            CommandBuilder()
            .literal([f"{COMMAND_PREFIX}{name}"])
            .finalize(True, SayCommand(response)),
            cooldown=config.cooldown,
        )
        for name, response in config.responses.items()
    ]


class CommandRegistry:
    """Dispatches calls to every known command tree.

    Not thread safe: one tick loop owns the registry, anything else has to
    go through a lock around the whole object.
    """

    def __init__(
        self,
        config: Optional[CommandsConfig] = None,
        hardcoded: Optional[List[CommandTree]] = None,
    ):
        self.logger = get_logger(__name__)
        self.hardcoded: List[CommandTree] = builtin_commands() if hardcoded is None else list(hardcoded)
        self.configured: List[CommandTree] = []
        self.reload(config or CommandsConfig())

    def trees(self) -> Iterator[CommandTree]:
        """All trees in dispatch order: configured first, then built-in."""
        yield from self.configured
        yield from self.hardcoded

    def reload(self, config: CommandsConfig) -> None:
        """Replace the configured commands wholesale."""
        self.configured = configured_commands(config)
        self.logger.info(
            f"Loaded {len(self.configured)} configured commands (cooldown {config.cooldown}s)"
        )

    def update(self, delta_time: float) -> None:
        """Advance the cooldowns of every tree."""
        for tree in self.trees():
            tree.update(delta_time)

    def dispatch(self, call: CommandCall) -> List[Action]:
        """Collect the actions of every tree accepting ``call``.

        Several trees may fire for the same input. No match at all simply
        yields an empty list.
        """
        actions = []
        for tree in self.trees():
            try:
                actions.append(tree.parse(call))
            except CommandParseError as e:
                if not e.matched:
                    continue
                self._log_rejection(tree, call, e)
        return actions

    def _log_rejection(self, tree: CommandTree, call: CommandCall, error: CommandParseError) -> None:
        # an arity mismatch in a built-in tree is an authoring bug, not user error
        if isinstance(error, ArgsError) and any(tree is hardcoded for hardcoded in self.hardcoded):
            self.logger.warning(
                f"Built-in command has inconsistent arity: {error}\n"
                f"  for call: {call!r}\n  for command: {tree!r}"
            )
            return
        reason = "Action could not be formed" if isinstance(error, ArgsError) else "Command rejected"
        self.logger.debug(
            f"{reason}: {error}\n"
            f"  for call: {call!r}\n  for command: {tree!r}"
        )
