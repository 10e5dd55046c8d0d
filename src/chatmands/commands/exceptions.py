"""
Command tree exceptions.

``CommandTree.parse`` raises one of these when a call does not turn into an
action. ``GrammarMismatch`` is the common case ("this input is not this
command"); the rest mean the input matched but was rejected.
"""

from typing import Any, Dict

from ..grammar import ParseError
from ..utils.error_handling import ChatmandsError


class CommandParseError(ChatmandsError):
    """Base exception for calls rejected by a command tree."""

    #: Whether the input matched the grammar before being rejected.
    matched = True

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["matched"] = self.matched
        return data


class GrammarMismatch(CommandParseError):
    """The message does not fit the tree's grammar."""

    matched = False

    def __init__(self, parse_error: ParseError):
        super().__init__(
            parse_error.message,
            details={"parsed": parse_error.parsed},
        )
        self.parse_error = parse_error


class CallError(CommandParseError):
    """The call was refused for the caller or for the moment."""
    pass


class Unauthorized(CallError):
    """The caller's authority is below the tree's threshold."""

    def __init__(self, required, actual):
        super().__init__(
            "Unauthorized",
            details={"required": str(required), "actual": str(actual)},
        )
        self.required = required
        self.actual = actual


class OnCooldown(CallError):
    """The same arguments were accepted too recently."""

    def __init__(self, arguments, remaining: float):
        super().__init__(
            "Command is on cooldown",
            details={"arguments": list(arguments), "remaining": remaining},
        )
        self.arguments = tuple(arguments)
        self.remaining = remaining


class ArgsError(CommandParseError):
    """The captured arguments do not fit the marker's arity."""

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message, details={"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual


class NotEnoughArguments(ArgsError):
    def __init__(self, expected: int, actual: int):
        super().__init__("Not enough arguments", expected, actual)


class TooManyArguments(ArgsError):
    def __init__(self, expected: int, actual: int):
        super().__init__("Too many arguments", expected, actual)
