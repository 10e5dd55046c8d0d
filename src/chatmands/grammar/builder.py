"""
Fluent construction of grammar trees.

Most chat commands are narrow: a prefix, maybe an argument or two and a
terminal. ``CommandBuilder`` lets them be written as a chain instead of
nested constructors::

    CommandBuilder().literal(["!hello"]).word().finalize(True, HelloCommand())

When several commands share a prefix, ``split`` attaches ready-made
subtrees under the last node of the chain.
"""

from typing import Generic, Iterable, List, TypeVar

from .tree import (
    ArgumentChoiceNode,
    ArgumentNode,
    ArgumentType,
    CommandNode,
    FinalNode,
    LiteralNode,
)

T = TypeVar("T")

_ARGUMENT_PLACEHOLDERS = {
    "{word}": ArgumentType.WORD,
    "{line}": ArgumentType.LINE,
    "{tail}": ArgumentType.TAIL,
}


class CommandBuilder(Generic[T]):
    """Accumulates wrapper nodes and folds them into a single tree."""

    def __init__(self):
        self._nodes: List[CommandNode[T]] = []

    def literal(self, literals: Iterable[str]) -> "CommandBuilder[T]":
        """Add a node accepting any of the given literals."""
        if isinstance(literals, str):
            literals = [literals]
        self._nodes.append(LiteralNode(list(literals)))
        return self

    def argument(self, argument_type: ArgumentType) -> "CommandBuilder[T]":
        self._nodes.append(ArgumentNode(argument_type))
        return self

    def word(self) -> "CommandBuilder[T]":
        """Add a single-word argument."""
        return self.argument(ArgumentType.WORD)

    def line(self) -> "CommandBuilder[T]":
        """Add an argument running to the end of the line."""
        return self.argument(ArgumentType.LINE)

    def tail(self) -> "CommandBuilder[T]":
        """Add an argument taking the rest of the message."""
        return self.argument(ArgumentType.TAIL)

    def choice(self, choices: Iterable[str]) -> "CommandBuilder[T]":
        """Add a node accepting one of ``choices`` and capturing it."""
        if isinstance(choices, str):
            choices = [choices]
        self._nodes.append(ArgumentChoiceNode(list(choices)))
        return self

    def finalize(self, expects_empty_message: bool, value: T) -> CommandNode[T]:
        """Close the chain with a final node and return the root."""
        return self._fold(FinalNode(expects_empty_message, value))

    def split(self, children: Iterable[CommandNode[T]]) -> CommandNode[T]:
        """Attach ``children`` under the last added node and return the root.

        Calling this on an empty builder is a programming error.
        """
        if not self._nodes:
            raise RuntimeError("Expected at least one node in the builder")
        last = self._nodes.pop()
        last.children.extend(children)
        return self._fold(last)

    def _fold(self, innermost: CommandNode[T]) -> CommandNode[T]:
        # right fold: the last added node wraps the terminal, the first one is the root
        node = innermost
        for parent in reversed(self._nodes):
            parent.children.append(node)
            node = parent
        self._nodes = []
        return node

    @classmethod
    def from_pattern(cls, pattern: str) -> "CommandBuilder[T]":
        """Build a chain from a compact pattern string.

        Tokens are separated by whitespace:

        - ``a,b`` literal set
        - ``a|b`` argument choice
        - ``{word}``, ``{line}``, ``{tail}`` arguments
        - anything else is a single literal
        """
        builder = cls()
        for token in pattern.split():
            if token in _ARGUMENT_PLACEHOLDERS:
                builder.argument(_ARGUMENT_PLACEHOLDERS[token])
            elif "|" in token:
                builder.choice([choice for choice in token.split("|") if choice])
            else:
                builder.literal([literal for literal in token.split(",") if literal])
        return builder


def command(pattern: str, value: T, expects_empty_message: bool = True) -> CommandNode[T]:
    """Shorthand for ``CommandBuilder.from_pattern(pattern).finalize(...)``."""
    return CommandBuilder.from_pattern(pattern).finalize(expects_empty_message, value)
