"""Descriptions of registered subcommands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .builder import ParserBuilder
from .commands import Command, CommandWithCustomParsing

Creator = Callable[[Optional[ParserBuilder]], Command]


def _class_text(command_type: type, attribute: str) -> Optional[str]:
    """A string from a class attribute, or from calling it if it is callable."""
    value: Any = getattr(command_type, attribute, None)
    if callable(value):
        value = value()
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class CommandInfo:
    """The name, description and factory of a subcommand."""

    name: str
    description: str
    creator: Creator
    use_custom_argument_parsing: bool = False

    @classmethod
    def from_type(
        cls,
        command_type: type,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "CommandInfo":
        """Describe ``command_type``, a subclass of :class:`Command`.

        When ``name`` is empty it comes from the class's ``name`` attribute,
        or else the class name; an empty ``description`` comes from the
        class's ``description`` attribute, or else stays empty.
        """
        if not isinstance(command_type, type) or not issubclass(command_type, Command):
            raise TypeError("command_type must be a subclass of Command")

        if not name:
            name = _class_text(command_type, "name") or command_type.__name__
        if not description:
            description = _class_text(command_type, "description") or ""

        if issubclass(command_type, CommandWithCustomParsing):
            def create_custom(builder: Optional[ParserBuilder]) -> Command:
                return command_type()

            return cls(name, description, create_custom, True)

        def create_with_builder(builder: Optional[ParserBuilder]) -> Command:
            return command_type(builder)

        return cls(name, description, create_with_builder)

    def create(self, builder: ParserBuilder) -> Optional[Command]:
        """Create the command, letting it add its arguments to ``builder``.

        Returns None if the command parses its own arguments.
        """
        if self.use_custom_argument_parsing:
            return None
        return self.creator(builder)

    def create_custom_parsing(self) -> Optional[CommandWithCustomParsing]:
        """Create a command that parses its own arguments.

        Returns None if the command does not use custom parsing.
        """
        if not self.use_custom_argument_parsing:
            return None
        return self.creator(None)