import pytest

from argkit.argument import ActionArgument, Argument
from argkit.result import SetValueResult


def test_string_value():
    arg = Argument("Pattern")
    assert arg.set_value("abc", None) is SetValueResult.SUCCESS
    assert arg.value == "abc"
    assert arg.has_value is True


def test_int_conversion():
    arg = Argument("Value", int)
    assert arg.set_value("42", None) is SetValueResult.SUCCESS
    assert arg.value == 42


def test_invalid_value():
    arg = Argument("Value", int)
    assert arg.set_value("abc", None) is SetValueResult.ERROR
    assert arg.has_value is False
    assert arg.value is None


def test_converter_returning_none_is_error():
    arg = Argument("Value", converter=lambda text: None)
    assert arg.set_value("x", None) is SetValueResult.ERROR


def test_custom_converter():
    arg = Argument("Value", converter=str.upper)
    arg.set_value("dog", None)
    assert arg.value == "DOG"


def test_switch():
    arg = Argument("Verbose", bool)
    assert arg.is_switch
    assert arg.set_switch_value(None) is SetValueResult.SUCCESS
    assert arg.value is True


def test_switch_explicit_false():
    arg = Argument("Verbose", bool)
    assert arg.set_value("FALSE", None) is SetValueResult.SUCCESS
    assert arg.value is False
    assert arg.set_value("maybe", None) is SetValueResult.ERROR


def test_non_switch_rejects_switch_value():
    with pytest.raises(TypeError):
        Argument("Value", int).set_switch_value(None)


def test_multi_value_appends():
    arg = Argument("Values", int, multi_value=True)
    arg.set_value("1", None)
    arg.set_value("2", None)
    assert arg.value == [1, 2]


def test_reset():
    arg = Argument("Values", multi_value=True)
    arg.set_value("a", None)
    arg.reset()
    assert arg.value == []
    assert arg.has_value is False


def test_default_applied_when_missing():
    arg = Argument("Count", int, default=1)
    arg.apply_default_value()
    assert arg.value == 1
    assert arg.has_value is False


def test_default_not_applied_when_set():
    arg = Argument("Count", int, default=1)
    arg.set_value("7", None)
    arg.apply_default_value()
    assert arg.value == 7


def test_default_is_copied():
    arg = Argument("Values", multi_value=True, default=["a"])
    arg.apply_default_value()
    arg.value.append("b")
    assert arg.default == ["a"]


def test_switch_defaults_to_false():
    arg = Argument("Verbose", bool)
    arg.apply_default_value()
    assert arg.value is False


def test_names():
    arg = Argument("Verbose", bool, short_name="v")
    assert arg.has_long_name()
    assert arg.has_short_name()
    assert not Argument("Pattern").has_short_name()


def test_short_only_argument():
    arg = Argument(short_name="f", value_type=int)
    assert arg.name == "f"
    assert not arg.has_long_name()
    assert arg.has_short_name()


def test_invalid_names():
    with pytest.raises(ValueError):
        Argument()
    with pytest.raises(ValueError):
        Argument("Value", short_name="ab")
    with pytest.raises(ValueError):
        Argument("Value", short_aliases=["xy"])


def test_action_receives_value_and_parser():
    seen = []
    parser = object()
    arg = ActionArgument("Size", int, action=lambda v, p: seen.append((v, p)) or False)
    assert arg.set_value("3", parser) is SetValueResult.SUCCESS
    assert seen == [(3, parser)]
    assert arg.value == 3


def test_action_cancels():
    arg = ActionArgument("Help", bool, action=lambda v, p: True)
    assert arg.set_switch_value(None) is SetValueResult.CANCEL
    assert arg.has_value is True


def test_action_invalid_value_not_called():
    calls = []
    arg = ActionArgument("Size", int, action=lambda v, p: calls.append(v))
    assert arg.set_value("x", None) is SetValueResult.ERROR
    assert calls == []