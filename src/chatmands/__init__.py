"""
Chatmands - a command grammar engine for chat bots.

Free-text chat messages are matched against grammar trees, gated by caller
authority and per-argument cooldowns, and turned into actions.
"""

__version__ = "0.1.0"
