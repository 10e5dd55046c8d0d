"""
A single command: grammar, authority threshold and per-argument cooldowns.
"""

from typing import Dict, Tuple

from ..grammar import CommandNode, ParseError
from .actions import Action, CommandAction
from .exceptions import GrammarMismatch, OnCooldown, Unauthorized
from .types import AuthorityLevel, CommandCall


class CommandTree:
    """One grammar root plus the rules deciding whether a match may fire.

    Cooldowns are tracked per tuple of captured arguments, so ``!hello Alice``
    and ``!hello Bob`` cool down independently.
    """

    def __init__(
        self,
        root: CommandNode[CommandAction],
        authority_level: AuthorityLevel = AuthorityLevel.VIEWER,
        cooldown: float = 0.0,
    ):
        root.validate()
        self.root = root
        self.authority_level = AuthorityLevel(authority_level)
        self.cooldown = self._check_cooldown(cooldown)
        # remaining seconds per argument tuple
        self.cooldown_timers: Dict[Tuple[str, ...], float] = {}

    @staticmethod
    def _check_cooldown(cooldown: float) -> float:
        cooldown = float(cooldown)
        if cooldown < 0:
            raise ValueError(f"Cooldown must not be negative, got {cooldown}")
        return cooldown

    def with_cooldown(self, cooldown: float) -> "CommandTree":
        self.cooldown = self._check_cooldown(cooldown)
        return self

    def with_authority(self, level: AuthorityLevel) -> "CommandTree":
        self.authority_level = AuthorityLevel(level)
        return self

    def update(self, delta_time: float) -> None:
        """Advance all cooldown timers and drop the expired ones."""
        for arguments in list(self.cooldown_timers):
            remaining = self.cooldown_timers[arguments] - delta_time
            if remaining > 0:
                self.cooldown_timers[arguments] = remaining
            else:
                del self.cooldown_timers[arguments]

    def parse(self, call: CommandCall) -> Action:
        """Turn ``call`` into an action.

        Raises:
            GrammarMismatch: The message is not this command
            Unauthorized: The caller may not use this command
            OnCooldown: The same arguments were accepted too recently
            ArgsError: The grammar and the marker disagree on arity
        """
        try:
            parsed = self.root.parse(call.message)
        except ParseError as e:
            raise GrammarMismatch(e) from e

        # authority comes first so a refused caller never touches the timers
        if call.authority < self.authority_level:
            raise Unauthorized(self.authority_level, call.authority)

        key = tuple(parsed.arguments)
        if key in self.cooldown_timers:
            raise OnCooldown(key, self.cooldown_timers[key])

        self.cooldown_timers[key] = self.cooldown

        return parsed.value.into_action(parsed.arguments)

    def __repr__(self) -> str:
        return (
            f"CommandTree(root={self.root!r}, authority_level={self.authority_level!s}, "
            f"cooldown={self.cooldown}, cooldown_timers={self.cooldown_timers!r})"
        )
