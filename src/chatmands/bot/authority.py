"""
Mapping from chat platform role badges to authority levels.

Kept apart from the command core: the registry only ever sees an
``AuthorityLevel``, never platform data.
"""

from typing import Iterable

from ..commands.types import AuthorityLevel

BADGE_AUTHORITY = {
    "subscriber": AuthorityLevel.SUBSCRIBER,
    "moderator": AuthorityLevel.MODERATOR,
    "broadcaster": AuthorityLevel.BROADCASTER,
}


def authority_from_badge(badge: str) -> AuthorityLevel:
    return BADGE_AUTHORITY.get(badge.strip().lower(), AuthorityLevel.VIEWER)


def authority_from_badges(badges: Iterable[str]) -> AuthorityLevel:
    """Highest level granted by any badge, VIEWER without badges."""
    return max(
        (authority_from_badge(badge) for badge in badges),
        default=AuthorityLevel.VIEWER,
    )
