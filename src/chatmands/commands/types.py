"""
Shared types for command dispatch.
"""

from dataclasses import dataclass
from enum import IntEnum


class AuthorityLevel(IntEnum):
    """Caller privilege tiers, ordered from least to most trusted."""

    VIEWER = 0
    SUBSCRIBER = 1
    MODERATOR = 2
    BROADCASTER = 3
    HOST = 4  # the machine running the bot

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "AuthorityLevel":
        """Look a level up by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown authority level {name!r}, expected one of: "
                + ", ".join(str(level) for level in cls)
            ) from None


@dataclass(frozen=True)
class CommandCall:
    """One dispatch request: raw message text and who sent it."""

    message: str
    authority: AuthorityLevel = AuthorityLevel.VIEWER
