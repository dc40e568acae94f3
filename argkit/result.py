"""Outcomes of parsing and setting argument values."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ParseError(enum.Enum):
    """The kind of error that stopped parsing, if any."""

    NONE = "none"
    INVALID_VALUE = "invalid_value"
    UNKNOWN_ARGUMENT = "unknown_argument"
    MISSING_VALUE = "missing_value"
    DUPLICATE_ARGUMENT = "duplicate_argument"
    TOO_MANY_ARGUMENTS = "too_many_arguments"
    MISSING_REQUIRED_ARGUMENT = "missing_required_argument"
    PARSING_CANCELLED = "parsing_cancelled"
    COMBINED_SHORT_NAME_NON_SWITCH = "combined_short_name_non_switch"


class OnParsedAction(enum.Enum):
    """Value returned from a callback registered with a parser's ``on_parsed``."""

    NONE = "none"
    """Take no special action."""

    CANCEL_PARSING = "cancel_parsing"
    """Stop parsing immediately; parsing ends with ``PARSING_CANCELLED``."""

    ALWAYS_CONTINUE = "always_continue"
    """Continue even if the argument would otherwise cancel parsing."""


class SetValueResult(enum.Enum):
    """Outcome of storing a value in an argument."""

    SUCCESS = "success"
    ERROR = "error"
    CANCEL = "cancel"


class UsageHelpRequest(enum.Enum):
    """How much usage help to show."""

    FULL = "full"
    SYNTAX_ONLY = "syntax_only"
    NONE = "none"


_MESSAGES = {
    ParseError.NONE: "",
    ParseError.INVALID_VALUE: "The value provided for the argument '{name}' was invalid.",
    ParseError.UNKNOWN_ARGUMENT: "Unknown argument name '{name}'.",
    ParseError.MISSING_VALUE: "No value was supplied for the argument '{name}'.",
    ParseError.DUPLICATE_ARGUMENT: "The argument '{name}' was supplied more than once.",
    ParseError.TOO_MANY_ARGUMENTS: "Too many arguments were supplied.",
    ParseError.MISSING_REQUIRED_ARGUMENT: "The required argument '{name}' was not supplied.",
    ParseError.PARSING_CANCELLED: "Parsing was cancelled by the argument '{name}'.",
    ParseError.COMBINED_SHORT_NAME_NON_SWITCH: (
        "The combined short argument '{name}' contains an argument that is not a switch."
    ),
}


@dataclass(frozen=True)
class ParseResult:
    """The result of a parse: an error kind and the argument it concerns."""

    error: ParseError = ParseError.NONE
    argument_name: str = ""

    def __bool__(self) -> bool:
        return self.error is ParseError.NONE

    def message(self) -> str:
        """A human-readable description of the error; empty on success."""
        return _MESSAGES[self.error].format(name=self.argument_name)