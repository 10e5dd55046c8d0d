"""
Grammar tree nodes and the backtracking matcher.

A command grammar is a tree of nodes. Each node consumes a piece of the
message (a literal prefix, a free-form argument or one of a set of choices)
and hands the rest to its children, tried in declaration order. The first
child that succeeds wins. Leaves are ``FinalNode`` instances carrying an
opaque marker value that is returned together with the captured arguments.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..utils.error_handling import ChatmandsError

T = TypeVar("T")


class ParseError(ChatmandsError):
    """The message does not fit the grammar.

    Not a failure as such: it only means "this input is not this command".
    ``parsed`` holds the arguments captured before the mismatch.
    """

    def __init__(self, message: str, parsed: Optional[List[str]] = None):
        super().__init__(message, details={"parsed": list(parsed or [])})
        self.parsed = list(parsed or [])

    def __str__(self) -> str:
        return f"Parse error: {self.message}"


class ArgumentType(Enum):
    """How a free-form argument is extracted from the message."""

    WORD = "Word"
    LINE = "Line"
    TAIL = "Tail"

    def __str__(self) -> str:
        return self.value

    def extract(self, message: str) -> Optional[str]:
        """Return the token at the start of ``message``, or None."""
        remainder = message.lstrip()
        if not remainder:
            return None
        if self is ArgumentType.WORD:
            return remainder.split(None, 1)[0]
        if self is ArgumentType.LINE:
            # only "\n" ends a line; a "\r" before it belongs to the break
            line = remainder.split("\n", 1)[0]
            if line.endswith("\r"):
                line = line[:-1]
            return line.rstrip()
        return remainder.rstrip()


@dataclass(frozen=True)
class ParsedCommand(Generic[T]):
    """Successful match: the marker value and the captured arguments."""

    value: T
    arguments: List[str] = field(default_factory=list)


class CommandNode(Generic[T]):
    """Base class for all grammar nodes."""

    def parse(self, message: str) -> ParsedCommand[T]:
        """Match ``message`` against this tree.

        Raises:
            ParseError: If the message does not fit the grammar
        """
        return self._parse(message, ())

    def _parse(self, message: str, arguments: Tuple[str, ...]) -> ParsedCommand[T]:
        raise NotImplementedError

    @property
    def children(self) -> Optional[List["CommandNode[T]"]]:
        """Child list, or None for terminal nodes."""
        return None

    def iter_nodes(self) -> Iterator["CommandNode[T]"]:
        """Walk the tree depth-first, this node first."""
        yield self
        for child in self.children or ():
            yield from child.iter_nodes()

    def validate(self) -> None:
        """Raise ValueError if a non-final node has no children."""
        for node in self.iter_nodes():
            if node.children is not None and not node.children:
                raise ValueError(f"Dangling branch in command tree: {node!r}")


def _match_prefix(options: List[str], message: str) -> Optional[str]:
    for option in options:
        if message.startswith(option):
            return option
    return None


def _expected_one_of(options: List[str], message: str, arguments: Tuple[str, ...]) -> ParseError:
    return ParseError(
        f"Expected one of: {', '.join(options)}. Found: \"{message}\"",
        parsed=list(arguments),
    )


class _BranchNode(CommandNode[T]):
    """Shared child handling for the non-terminal nodes."""

    child_nodes: List[CommandNode[T]]

    @property
    def children(self) -> List[CommandNode[T]]:
        return self.child_nodes

    def _parse_children(self, message: str, arguments: Tuple[str, ...]) -> ParsedCommand[T]:
        for child in self.child_nodes:
            try:
                return child._parse(message, arguments)
            except ParseError:
                continue
        raise ParseError("No inner nodes matched", parsed=list(arguments))


def _non_empty(values: Iterable[str], what: str) -> List[str]:
    values = [str(value) for value in values]
    if not values:
        raise ValueError(f"{what} must not be empty")
    return values


@dataclass
class LiteralNode(_BranchNode[T]):
    """Matches one of a fixed set of prefixes; nothing is captured."""

    literals: List[str]
    child_nodes: List[CommandNode[T]] = field(default_factory=list)

    def __post_init__(self):
        self.literals = _non_empty(self.literals, "Literal set")

    def _parse(self, message: str, arguments: Tuple[str, ...]) -> ParsedCommand[T]:
        literal = _match_prefix(self.literals, message)
        if literal is None:
            raise _expected_one_of(self.literals, message, arguments)
        return self._parse_children(message[len(literal):].strip(), arguments)


@dataclass
class ArgumentNode(_BranchNode[T]):
    """Captures a free-form token of the given kind."""

    argument_type: ArgumentType
    child_nodes: List[CommandNode[T]] = field(default_factory=list)

    def _parse(self, message: str, arguments: Tuple[str, ...]) -> ParsedCommand[T]:
        token = self.argument_type.extract(message)
        if token is None:
            raise ParseError(f"Expected a {self.argument_type} argument", parsed=list(arguments))
        remainder = message.lstrip()[len(token):].strip()
        return self._parse_children(remainder, arguments + (token,))


@dataclass
class ArgumentChoiceNode(_BranchNode[T]):
    """Matches one of a fixed set of prefixes and captures the match."""

    choices: List[str]
    child_nodes: List[CommandNode[T]] = field(default_factory=list)

    def __post_init__(self):
        self.choices = _non_empty(self.choices, "Choice set")

    def _parse(self, message: str, arguments: Tuple[str, ...]) -> ParsedCommand[T]:
        choice = _match_prefix(self.choices, message)
        if choice is None:
            raise _expected_one_of(self.choices, message, arguments)
        return self._parse_children(message[len(choice):].strip(), arguments + (choice,))


@dataclass
class FinalNode(CommandNode[T]):
    """Terminal node carrying the marker value.

    With ``expects_empty_message`` set the node only matches when nothing but
    whitespace is left of the message.
    """

    expects_empty_message: bool
    value: T

    def _parse(self, message: str, arguments: Tuple[str, ...]) -> ParsedCommand[T]:
        if self.expects_empty_message and message.strip():
            raise ParseError(
                f"Did not expect any more arguments, found: {message!r}",
                parsed=list(arguments),
            )
        return ParsedCommand(value=copy.copy(self.value), arguments=list(arguments))
