"""Parsing of command line arguments into argument values."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, TextIO

from .argument import ActionArgument, Argument
from .naming import (
    get_default_prefixes,
    name_key,
    sort_prefixes,
    split_once,
    strip_prefix,
)
from .parsing_mode import ParsingMode
from .result import (
    OnParsedAction,
    ParseError,
    ParseResult,
    SetValueResult,
    UsageHelpRequest,
)

OnParsedCallback = Callable[[Argument, Optional[str]], Optional[OnParsedAction]]


@dataclass
class ParserOptions:
    """Settings that control how a parser interprets a command line."""

    command_name: str = ""
    description: str = ""
    prefixes: list[str] = field(default_factory=get_default_prefixes)
    long_prefix: str = "--"
    mode: ParsingMode = ParsingMode.DEFAULT
    argument_value_separator: str = ":"
    show_usage_on_error: UsageHelpRequest = UsageHelpRequest.FULL
    allow_white_space_separator: bool = True
    allow_duplicate_arguments: bool = False
    case_sensitive: bool = False
    automatic_help_argument: bool = True
    help_name: str = "Help"
    help_short_name: str = "?"
    help_description: str = "Displays this help message."


def _automatic_help_handler(value: Any, parser: Any) -> bool:
    return True


class _PlainUsageWriter:
    """Writes errors and a plain usage summary to the console."""

    def __init__(self, output: Optional[TextIO] = None, error_output: Optional[TextIO] = None):
        self.output = output if output is not None else sys.stdout
        self.error_output = error_output if error_output is not None else sys.stderr

    def write_error(self, message: str) -> None:
        print(message, file=self.error_output)

    def write_parser_usage(self, parser: "CommandLineParser", request: UsageHelpRequest) -> None:
        if request is UsageHelpRequest.NONE:
            return
        full = request is UsageHelpRequest.FULL
        if full and parser.description:
            print(parser.description, file=self.output)
            print(file=self.output)
        syntax = " ".join(self._syntax(parser, argument) for argument in parser.arguments())
        print(f"Usage: {parser.command_name} {syntax}".rstrip(), file=self.output)
        if full:
            print(file=self.output)
            for argument in parser.arguments():
                print(f"    {self._names(parser, argument)}", file=self.output)
                if argument.description:
                    print(f"        {argument.description}", file=self.output)

    @staticmethod
    def _names(parser: "CommandLineParser", argument: Argument) -> str:
        short_prefix = parser.prefixes[0] if parser.prefixes else ""
        if parser.mode is ParsingMode.LONG_SHORT:
            names = []
            if argument.has_short_name():
                names.append(short_prefix + argument.short_name)
            if argument.has_long_name():
                names.append(parser.long_prefix + argument.name)
            return ", ".join(names)
        return short_prefix + argument.name

    @classmethod
    def _syntax(cls, parser: "CommandLineParser", argument: Argument) -> str:
        text = cls._names(parser, argument).split(", ")[0]
        if not argument.is_switch:
            text += f" <{argument.value_description}>"
        if argument.multi_value:
            text += "..."
        return text if argument.required else f"[{text}]"


class CommandLineParser:
    """Parses command line arguments into the values of a set of arguments."""

    def __init__(self, arguments: Iterable[Argument], options: Optional[ParserOptions] = None):
        self.options = options if options is not None else ParserOptions()
        self.help_requested = False
        self._arguments: list[Argument] = []
        self._by_name: dict[str, Argument] = {}
        self._by_short_name: dict[str, Argument] = {}
        self._positional_count = 0
        self._help_argument: Optional[Argument] = None
        self._on_parsed_callback: Optional[OnParsedCallback] = None

        for argument in arguments:
            self._add_argument(argument)
        self._add_automatic_help_argument()
        self._arguments.sort(key=self._sort_key)
        self._sorted_prefixes = sort_prefixes(
            self.options.prefixes, self.options.long_prefix, self.options.mode
        )

    # Settings ---------------------------------------------------------------

    @property
    def mode(self) -> ParsingMode:
        return self.options.mode

    @property
    def command_name(self) -> str:
        return self.options.command_name

    @property
    def description(self) -> str:
        return self.options.description

    @property
    def allow_white_space_separator(self) -> bool:
        return self.options.allow_white_space_separator

    @property
    def allow_duplicate_arguments(self) -> bool:
        return self.options.allow_duplicate_arguments

    @property
    def argument_value_separator(self) -> str:
        return self.options.argument_value_separator

    @property
    def prefixes(self) -> tuple[str, ...]:
        return tuple(self.options.prefixes)

    @property
    def long_prefix(self) -> str:
        """The long name prefix; empty unless the mode is long/short."""
        if self.options.mode is ParsingMode.LONG_SHORT:
            return self.options.long_prefix
        return ""

    @property
    def case_sensitive(self) -> bool:
        return self.options.case_sensitive

    @property
    def argument_count(self) -> int:
        return len(self._arguments)

    @property
    def positional_argument_count(self) -> int:
        return self._positional_count

    @property
    def help_argument(self) -> Optional[Argument]:
        """The automatic help argument, or the argument whose name it clashed with."""
        return self._help_argument

    # Lookup -----------------------------------------------------------------

    def arguments(self) -> Iterator[Argument]:
        """All arguments: positional by position, then required, then by name."""
        return iter(self._arguments)

    def get_argument(self, name: str) -> Optional[Argument]:
        """The argument with this name or alias, or None."""
        return self._by_name.get(self._key(name))

    def get_positional_argument(self, position: int) -> Argument:
        """The positional argument at ``position``."""
        if not 0 <= position < self._positional_count:
            raise IndexError(f"no positional argument at position {position}")
        return self._arguments[position]

    def get_short_argument(self, name: str) -> Optional[Argument]:
        """The argument with this short name or short alias, or None."""
        return self._by_short_name.get(self._key(name))

    # Parsing ----------------------------------------------------------------

    def parse(self, args: Iterable[str], usage: Any = None) -> ParseResult:
        """Parse ``args``, which must not include the application name.

        When a usage writer is given, errors and usage help are written to it.
        """
        result = self._parse(args)
        if usage is not None:
            self._handle_error(result, usage)
        return result

    def parse_argv(self, argv: Sequence[str], usage: Any = None) -> ParseResult:
        """Parse ``argv``, skipping the application name in ``argv[0]``."""
        return self.parse(argv[1:], usage)

    def write_usage(self, usage: Any = None, request: UsageHelpRequest = UsageHelpRequest.FULL) -> None:
        """Write usage help for this parser's arguments."""
        writer = usage if usage is not None else _PlainUsageWriter()
        writer.write_parser_usage(self, request)

    def on_parsed(self, callback: Optional[OnParsedCallback]) -> None:
        """Set the callback invoked after each argument's value is set."""
        self._on_parsed_callback = callback

    # Internals --------------------------------------------------------------

    def _key(self, name: str) -> str:
        return name_key(name, self.options.case_sensitive)

    def _sort_key(self, argument: Argument) -> tuple:
        positional = argument.position is not None
        return (
            not positional,
            argument.position if positional else 0,
            not argument.required,
            self._key(argument.name),
        )

    def _add_argument(self, argument: Argument) -> None:
        if argument.has_long_name():
            for name in [argument.name, *argument.aliases]:
                key = self._key(name)
                if key in self._by_name:
                    raise ValueError("Duplicate argument name.")
                self._by_name[key] = argument
        if argument.has_short_name():
            for name in [argument.short_name, *argument.short_aliases]:
                key = self._key(name)
                if key in self._by_short_name:
                    raise ValueError("Duplicate short argument name.")
                self._by_short_name[key] = argument
        if argument.position is not None:
            self._positional_count += 1
        self._arguments.append(argument)

    def _add_automatic_help_argument(self) -> None:
        options = self.options
        if not options.automatic_help_argument:
            return

        name = options.help_name
        if self._arguments:
            first = self._arguments[0].name[:1]
            initial = name[0].upper() if first.isupper() else name[0].lower()
            name = initial + name[1:]

        short_name = options.help_short_name
        short_alias = name[0].lower()
        long_short = options.mode is ParsingMode.LONG_SHORT

        existing = self.get_argument(name)
        if existing is None:
            lookup = self.get_short_argument if long_short else self.get_argument
            existing = lookup(short_name)
            if existing is None:
                existing = lookup(short_alias)
        if existing is not None:
            self._help_argument = existing
            return

        if options.case_sensitive:
            has_alias = short_name != short_alias
        else:
            has_alias = short_name.upper() != short_alias.upper()

        extra = [short_alias] if has_alias else []
        names: dict[str, Any]
        if long_short:
            names = {"short_name": short_name, "short_aliases": extra}
        else:
            names = {"aliases": [short_name, *extra]}

        argument = ActionArgument(
            name=name,
            value_type=bool,
            cancel_parsing=True,
            description=options.help_description,
            action=_automatic_help_handler,
            **names,
        )
        self._help_argument = argument
        self._add_argument(argument)

    def _parse(self, args: Iterable[str]) -> ParseResult:
        self.help_requested = False
        for argument in self._arguments:
            argument.reset()

        pending = deque(args)
        position = 0
        while pending:
            arg = pending.popleft()
            prefix = self._check_prefix(arg)
            if prefix is not None:
                without_prefix, is_short = prefix
                result = self._parse_named_argument(without_prefix, is_short, pending)
                if not result:
                    return result
                continue

            # Skip positional arguments already given by name.
            while (
                position < self._positional_count
                and not self._arguments[position].multi_value
                and self._arguments[position].has_value
            ):
                position += 1

            if position >= self._positional_count:
                return self._create_result(ParseError.TOO_MANY_ARGUMENTS)

            result = self._set_argument_value(self._arguments[position], arg)
            if not result:
                return result

        for argument in self._arguments:
            if argument.required:
                if not argument.has_value:
                    return self._create_result(ParseError.MISSING_REQUIRED_ARGUMENT, argument.name)
            else:
                argument.apply_default_value()

        self.help_requested = False
        return self._create_result(ParseError.NONE)

    def _check_prefix(self, argument: str) -> Optional[tuple[str, bool]]:
        # A '-' followed by a digit is a value, since it may be a negative number.
        if len(argument) >= 2 and argument[0] == "-" and argument[1].isdigit():
            return None
        for info in self._sorted_prefixes:
            stripped = strip_prefix(argument, info.prefix)
            if stripped is not None:
                return stripped, info.is_short
        return None

    def _parse_named_argument(self, text: str, is_short: bool, pending: deque) -> ParseResult:
        name, value = split_once(text, self.options.argument_value_separator)
        if is_short and len(name) > 1:
            return self._parse_combined_short_argument(name, value)

        argument = self.get_short_argument(name) if is_short else self.get_argument(name)
        if argument is None:
            return self._create_result(ParseError.UNKNOWN_ARGUMENT, name)

        if value is None and not argument.is_switch:
            if (
                not self.options.allow_white_space_separator
                or not pending
                or self._check_prefix(pending[0]) is not None
            ):
                return self._create_result(ParseError.MISSING_VALUE, argument.name)
            value = pending.popleft()

        return self._set_argument_value(argument, value)

    def _parse_combined_short_argument(self, name: str, value: Optional[str]) -> ParseResult:
        for char in name:
            argument = self.get_short_argument(char)
            if argument is None:
                return self._create_result(ParseError.UNKNOWN_ARGUMENT, char)
            if not argument.is_switch:
                return self._create_result(ParseError.COMBINED_SHORT_NAME_NON_SWITCH, name)
            result = self._set_argument_value(argument, value)
            if not result:
                return result
        return self._create_result(ParseError.NONE)

    def _set_argument_value(self, argument: Argument, value: Optional[str]) -> ParseResult:
        if (
            not self.options.allow_duplicate_arguments
            and not argument.multi_value
            and argument.has_value
        ):
            return self._create_result(ParseError.DUPLICATE_ARGUMENT, argument.name)

        if value is None:
            outcome = argument.set_switch_value(self)
        else:
            outcome = argument.set_value(value, self)
            if outcome is SetValueResult.ERROR:
                return self._create_result(ParseError.INVALID_VALUE, argument.name)

        return self._post_process_argument(argument, value, outcome)

    def _post_process_argument(
        self, argument: Argument, value: Optional[str], outcome: SetValueResult
    ) -> ParseResult:
        action = OnParsedAction.NONE
        if self._on_parsed_callback is not None:
            action = self._on_parsed_callback(argument, value) or OnParsedAction.NONE

        cancel = action is OnParsedAction.CANCEL_PARSING
        if cancel or (
            (argument.cancel_parsing or outcome is SetValueResult.CANCEL)
            and action is not OnParsedAction.ALWAYS_CONTINUE
        ):
            # Help is requested automatically, but not for action arguments.
            if cancel or argument.cancel_parsing:
                self.help_requested = True
            return self._create_result(ParseError.PARSING_CANCELLED, argument.name)

        return self._create_result(ParseError.NONE)

    def _create_result(self, error: ParseError, argument_name: str = "") -> ParseResult:
        if error not in (ParseError.NONE, ParseError.PARSING_CANCELLED):
            self.help_requested = True
        return ParseResult(error, argument_name)

    def _handle_error(self, result: ParseResult, usage: Any) -> None:
        if result:
            return
        request = UsageHelpRequest.FULL
        if result.error is not ParseError.PARSING_CANCELLED:
            request = self.options.show_usage_on_error
            usage.write_error(result.message())
        if self.help_requested:
            self.write_usage(usage, request)