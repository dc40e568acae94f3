"""Registration, creation and invocation of subcommands."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, Sequence, TextIO

from .builder import ParserBuilder
from .commands import Command, VersionCommand
from .info import CommandInfo
from .naming import name_key
from .result import UsageHelpRequest

ConfigureFunction = Callable[[ParserBuilder], Any]
VersionFunction = Callable[[], Any]


class _ConsoleUsageWriter:
    """Writes errors, parser usage and the command list to the console."""

    def __init__(self, output: Optional[TextIO] = None, error_output: Optional[TextIO] = None):
        self.output = output if output is not None else sys.stdout
        self.error_output = error_output if error_output is not None else sys.stderr

    def write_error(self, message: str) -> None:
        print(message, file=self.error_output)

    def write_parser_usage(self, parser: Any, request: UsageHelpRequest) -> None:
        parser.write_usage(None, request)

    def write_command_list_usage(self, manager: "CommandManager") -> None:
        out = self.output
        if manager.description:
            print(manager.description, file=out)
            print(file=out)
        print(f"Usage: {manager.application_name} <command> [arguments]", file=out)
        print(file=out)
        print("The following commands are available:", file=out)
        print(file=out)
        for info in manager.commands():
            print(f"    {info.name}", file=out)
            if info.description:
                print(f"        {info.description}", file=out)
            print(file=out)
        if manager.common_help_argument:
            print(
                f"Run '{manager.application_name} <command> {manager.common_help_argument}' "
                "for more information about a command.",
                file=out,
            )


class CommandManager:
    """Keeps the subcommands of an application and creates and runs them.

    Command names, and by default the argument names of each command, are
    compared without regard to case unless ``case_sensitive`` is set.
    """

    version_command_name = "version"
    version_command_description = "Displays version information."

    def __init__(
        self,
        application_name: str,
        case_sensitive: bool = False,
        description: str = "",
        common_help_argument: str = "",
    ) -> None:
        self.application_name = application_name
        self.case_sensitive = case_sensitive
        self.description = description
        # Name of a help argument shared by all commands, including its prefix.
        self.common_help_argument = common_help_argument
        self._commands: dict[str, CommandInfo] = {}
        self._configure_function: Optional[ConfigureFunction] = None

    def _key(self, name: str) -> str:
        return name_key(name, self.case_sensitive)

    def _register(self, info: CommandInfo) -> None:
        key = self._key(info.name)
        if key in self._commands:
            raise ValueError("Duplicate command name")
        self._commands[key] = info

    def configure_parser(self, function: Optional[ConfigureFunction]) -> "CommandManager":
        """Set a function applied to every command's parser builder."""
        self._configure_function = function
        return self

    def add_command(
        self,
        command_type: type,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "CommandManager":
        """Register a command class; name and description default to the class's own."""
        self._register(CommandInfo.from_type(command_type, name, description))
        return self

    def add_version_command(self, function: VersionFunction) -> "CommandManager":
        """Register the standard version command, which calls ``function``."""

        def create(builder: Optional[ParserBuilder]) -> Command:
            return VersionCommand(builder, function)

        self._register(
            CommandInfo(self.version_command_name, self.version_command_description, create)
        )
        return self

    def commands(self) -> Iterator[CommandInfo]:
        """All registered commands, ordered by name."""
        return iter([self._commands[key] for key in sorted(self._commands)])

    def get_command(self, name: str) -> Optional[CommandInfo]:
        """The command with this name, or None."""
        return self._commands.get(self._key(name))

    def create_command(self, args: Sequence[str], usage: Any = None) -> Optional[Command]:
        """Create a command from ``args``, whose first item is the command name.

        Returns None, after writing usage help or errors, when no command was
        given, it is unknown, or its arguments could not be parsed.
        """
        if not args:
            self.write_usage(usage)
            return None
        return self.create_named_command(args[0], args[1:], usage)

    def create_named_command(
        self, name: str, args: Sequence[str], usage: Any = None
    ) -> Optional[Command]:
        """Create the command ``name`` and parse ``args`` for it."""
        info = self.get_command(name)
        if info is None:
            self.write_usage(usage)
            return None

        args = list(args)
        if info.use_custom_argument_parsing:
            command = info.create_custom_parsing()
            if not command.parse(args, self, usage):
                return None
            return command

        builder = self.create_parser_builder(info)
        command = info.create(builder)
        parser = builder.build()
        writer = usage if usage is not None else _ConsoleUsageWriter()
        if not parser.parse(args, writer):
            return None
        return command

    def run_command(self, args: Sequence[str], usage: Any = None) -> Optional[int]:
        """Create a command from ``args`` and run it; None if it was not created."""
        command = self.create_command(args, usage)
        return None if command is None else command.run()

    def run_named_command(
        self, name: str, args: Sequence[str], usage: Any = None
    ) -> Optional[int]:
        """Create the command ``name`` and run it; None if it was not created."""
        command = self.create_named_command(name, args, usage)
        return None if command is None else command.run()

    def write_usage(self, usage: Any = None) -> None:
        """Write usage help listing the available commands."""
        writer = usage if usage is not None else _ConsoleUsageWriter()
        writer.write_command_list_usage(self)

    def create_parser_builder(self, command: CommandInfo) -> ParserBuilder:
        """A builder named after the application and command, with this manager's settings."""
        builder = ParserBuilder(
            f"{self.application_name} {command.name}",
            case_sensitive=self.case_sensitive,
            description=command.description,
        )
        if self._configure_function is not None:
            self._configure_function(builder)
        return builder