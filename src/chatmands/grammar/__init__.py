"""
Command grammar engine for Chatmands.

Grammar trees turn free-text chat input into a marker value plus the
arguments captured on the way down the tree.

Usage:
    from chatmands.grammar import CommandBuilder

    tree = CommandBuilder().literal(["!hello"]).word().finalize(True, "hello")
    parsed = tree.parse("!hello Alice")
    parsed.arguments  # ["Alice"]
"""

from .tree import (
    ArgumentChoiceNode,
    ArgumentNode,
    ArgumentType,
    CommandNode,
    FinalNode,
    LiteralNode,
    ParseError,
    ParsedCommand,
)

from .builder import CommandBuilder, command

__all__ = [
    "ArgumentChoiceNode",
    "ArgumentNode",
    "ArgumentType",
    "CommandNode",
    "FinalNode",
    "LiteralNode",
    "ParseError",
    "ParsedCommand",
    "CommandBuilder",
    "command",
]
