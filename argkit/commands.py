"""Base classes for subcommands."""

from __future__ import annotations

import abc
from typing import Any, Callable, Optional, Sequence

from .builder import ParserBuilder


class Command(abc.ABC):
    """A subcommand of an application.

    A subclass defines its arguments by adding them to the builder passed to
    its constructor, and does its work in :meth:`run`. A subclass may define
    class attributes ``name`` and ``description`` to set how it is listed.
    """

    def __init__(self, builder: Optional[ParserBuilder] = None) -> None:
        pass

    @abc.abstractmethod
    def run(self) -> int:
        """Run the command after its arguments were parsed; returns an exit code."""


class CommandWithCustomParsing(Command):
    """A subcommand that parses its own arguments.

    Such a command is created without a builder and receives its raw
    arguments in :meth:`parse`.
    """

    def __init__(self) -> None:
        super().__init__(None)

    @abc.abstractmethod
    def parse(self, args: Sequence[str], manager: Any, usage: Any) -> bool:
        """Parse ``args``; returns True when parsing succeeded."""


class VersionCommand(Command):
    """A command that shows version information by calling a function."""

    def __init__(self, builder: Optional[ParserBuilder], function: Callable[[], Any]) -> None:
        super().__init__(builder)
        self._function = function

    def run(self) -> int:
        self._function()
        return 0