"""
Action markers and the domain actions they turn into.

Grammar trees carry a ``CommandAction`` marker in their final node. Once a
call is accepted, the marker and the captured arguments are converted into an
``Action`` for the host application to execute. Arguments are referred to in
the docs as ``$0`` for the first one, ``$1`` for the second and so on.
"""

from dataclasses import dataclass
from typing import List, Sequence

from .exceptions import NotEnoughArguments, TooManyArguments


@dataclass(frozen=True)
class Action:
    """Something the host application should do."""


@dataclass(frozen=True)
class Say(Action):
    """Send ``message`` to chat."""

    message: str


@dataclass(frozen=True)
class ReloadConfig(Action):
    """Reload the configuration file."""


def verify_args(arguments: Sequence[str], count: int, exact: bool = True) -> None:
    """Check the argument count.

    Raises:
        NotEnoughArguments: Fewer than ``count`` arguments
        TooManyArguments: More than ``count`` arguments while ``exact`` is set
    """
    if len(arguments) < count:
        raise NotEnoughArguments(count, len(arguments))
    if exact and len(arguments) > count:
        raise TooManyArguments(count, len(arguments))


@dataclass(frozen=True)
class CommandAction:
    """Marker stored in a final grammar node."""

    #: Exact number of arguments the marker consumes.
    arity = 0

    def into_action(self, arguments: List[str]) -> Action:
        verify_args(arguments, self.arity)
        return self._build(list(arguments))

    def _build(self, arguments: List[str]) -> Action:
        raise NotImplementedError


@dataclass(frozen=True)
class ReloadConfigCommand(CommandAction):
    """Reload the configuration file."""

    def _build(self, arguments: List[str]) -> Action:
        return ReloadConfig()


@dataclass(frozen=True)
class SayCommand(CommandAction):
    """Reply with a fixed response."""

    response: str

    def _build(self, arguments: List[str]) -> Action:
        return Say(self.response)


@dataclass(frozen=True)
class _GreetingCommand(CommandAction):
    arity = 1
    template = "{name}"

    def _build(self, arguments: List[str]) -> Action:
        return Say(self.template.format(name=arguments[0]))


@dataclass(frozen=True)
class HelloCommand(_GreetingCommand):
    """Say hello to $0."""

    template = "Hi, {name} ^^"


@dataclass(frozen=True)
class ByeCommand(_GreetingCommand):
    """Say bye to $0."""

    template = "cya, {name}!"


@dataclass(frozen=True)
class GoodNightCommand(_GreetingCommand):
    """Say good night to $0."""

    template = "Good night, {name} ^^"
