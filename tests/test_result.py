import pytest

from argkit.result import ParseError, ParseResult


def test_success_is_truthy():
    default = ParseResult()
    assert default.error is ParseError.NONE
    assert default.__bool__() is True

    named = ParseResult(ParseError.NONE, "x")
    assert named.error is ParseError.NONE
    assert named.argument_name == "x"
    assert named.__bool__() is True


@pytest.mark.parametrize("error", [e for e in ParseError if e is not ParseError.NONE])
def test_errors_are_falsy(error):
    result = ParseResult(error, "Value")
    assert result.error is error
    assert result.argument_name == "Value"
    assert result.__bool__() is False


def test_success_message_empty():
    assert ParseResult().message() == ""


@pytest.mark.parametrize("error", [e for e in ParseError if e is not ParseError.NONE])
def test_error_messages_nonempty(error):
    assert len(ParseResult(error, "Value").message()) > 0


@pytest.mark.parametrize(
    "error",
    [
        ParseError.INVALID_VALUE,
        ParseError.UNKNOWN_ARGUMENT,
        ParseError.MISSING_VALUE,
        ParseError.DUPLICATE_ARGUMENT,
        ParseError.MISSING_REQUIRED_ARGUMENT,
        ParseError.PARSING_CANCELLED,
        ParseError.COMBINED_SHORT_NAME_NON_SWITCH,
    ],
)
def test_message_names_argument(error):
    assert "Pattern" in ParseResult(error, "Pattern").message()


def test_results_compare_by_value():
    assert ParseResult(ParseError.MISSING_VALUE, "a") == ParseResult(ParseError.MISSING_VALUE, "a")
    assert ParseResult(ParseError.MISSING_VALUE, "a") != ParseResult(ParseError.INVALID_VALUE, "a")