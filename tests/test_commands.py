import pytest

from argkit.argument import Argument
from argkit.builder import ParserBuilder
from argkit.commands import Command, CommandWithCustomParsing, VersionCommand
from argkit.result import ParseError


class Command1(Command):
    def run(self):
        return 0


class Command2(Command):
    name = "AnotherCommand"
    description = "This is a very long description that probably needs to be wrapped."

    def __init__(self, builder):
        super().__init__(builder)
        self._value = Argument(name="Value", value_type=int, required=True)
        builder.add_argument(self._value)

    def run(self):
        return self._value.value


class CustomParsingCommand(CommandWithCustomParsing):
    def __init__(self):
        super().__init__()
        self.value = ""

    def parse(self, args, manager, usage):
        assert len(args) == 1
        self.value = args[0]
        return True

    def run(self):
        return 0


def test_simple_command_runs():
    assert Command1(ParserBuilder("app Command1")).run() == 0


def test_command_with_argument_returns_value():
    builder = ParserBuilder("app AnotherCommand")
    command = Command2(builder)
    parser = builder.build()
    assert parser.parse(["-Value", "5"])
    assert command.run() == 5


def test_command_with_missing_required_argument():
    builder = ParserBuilder("app AnotherCommand")
    Command2(builder)
    result = builder.build().parse([])
    assert result.error is ParseError.MISSING_REQUIRED_ARGUMENT
    assert result.argument_name == "Value"


def test_custom_parsing_command():
    args = ["Test"]
    # A parser without positional arguments rejects what the custom command accepts.
    rejected = ParserBuilder("app custom").build().parse(args)
    assert rejected.error is ParseError.TOO_MANY_ARGUMENTS

    command = CustomParsingCommand()
    assert command.parse(args, None, None) is True
    assert command.value == "Test"
    assert command.run() == 0


def test_abstract_command_cannot_be_created():
    with pytest.raises(TypeError):
        Command()


def test_abstract_custom_parsing_command_cannot_be_created():
    with pytest.raises(TypeError):
        CommandWithCustomParsing()


def test_version_command_calls_function():
    calls = []
    command = VersionCommand(ParserBuilder("app version"), lambda: calls.append("shown"))
    assert command.run() == 0
    assert calls == ["shown"]