"""
Host application pieces around the command core.
"""

from .authority import authority_from_badge, authority_from_badges
from .model import ChatBot

__all__ = ["ChatBot", "authority_from_badge", "authority_from_badges"]
