"""Command line argument definitions and value storage."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .result import SetValueResult

_INVALID = object()


def _convert_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


@dataclass
class Argument:
    """A single command line argument and the value parsed for it.

    An argument without a long name is given only ``short_name``; its ``name``
    is then the short name.
    """

    name: str = ""
    value_type: Callable[[str], Any] = str
    short_name: Optional[str] = None
    aliases: list[str] = field(default_factory=list)
    short_aliases: list[str] = field(default_factory=list)
    position: Optional[int] = None
    required: bool = False
    multi_value: bool = False
    cancel_parsing: bool = False
    description: str = ""
    value_description: str = ""
    default: Any = None
    converter: Optional[Callable[[str], Any]] = None
    long_name: bool = True
    value: Any = field(default=None, init=False)
    has_value: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.short_name is not None and len(self.short_name) != 1:
            raise ValueError("a short name must be a single character")
        if any(len(alias) != 1 for alias in self.short_aliases):
            raise ValueError("a short alias must be a single character")
        if not self.name:
            if self.short_name is None:
                raise ValueError("an argument needs a long or a short name")
            self.name = self.short_name
            self.long_name = False
        if not self.long_name and self.short_name is None:
            raise ValueError("an argument without a long name needs a short name")
        if not self.value_description:
            self.value_description = getattr(self.value_type, "__name__", "value")
        self.reset()

    @property
    def is_switch(self) -> bool:
        """Whether the argument may be given without a value."""
        return self.value_type is bool

    def has_long_name(self) -> bool:
        return self.long_name

    def has_short_name(self) -> bool:
        return self.short_name is not None

    def reset(self) -> None:
        """Forget any value from a previous parse."""
        self.has_value = False
        self.value = [] if self.multi_value else None

    def _convert(self, text: str) -> Any:
        converter = self.converter
        if converter is None:
            converter = _convert_bool if self.is_switch else self.value_type
        try:
            result = converter(text)
        except (ValueError, TypeError):
            return _INVALID
        return _INVALID if result is None else result

    def _store(self, converted: Any) -> None:
        if self.multi_value:
            self.value.append(converted)
        else:
            self.value = converted
        self.has_value = True

    def set_value(self, value: str, parser: Any) -> SetValueResult:
        """Convert ``value`` and store it."""
        converted = self._convert(value)
        if converted is _INVALID:
            return SetValueResult.ERROR
        self._store(converted)
        return SetValueResult.SUCCESS

    def set_switch_value(self, parser: Any) -> SetValueResult:
        """Store the value of a switch given without an explicit value."""
        if not self.is_switch:
            raise TypeError(f"argument '{self.name}' is not a switch")
        self._store(True)
        return SetValueResult.SUCCESS

    def apply_default_value(self) -> None:
        """Use the default value if no value was supplied."""
        if self.has_value:
            return
        if self.default is not None:
            default = copy.deepcopy(self.default)
            if self.multi_value and not isinstance(default, list):
                default = [default]
            self.value = default
        elif self.is_switch and not self.multi_value:
            self.value = False


@dataclass
class ActionArgument(Argument):
    """An argument that invokes a function when it is supplied.

    The action receives the converted value and the parser; returning ``True``
    cancels parsing.
    """

    action: Callable[[Any, Any], bool] = field(kw_only=True)

    def _run(self, converted: Any, parser: Any) -> SetValueResult:
        self._store(converted)
        if self.action(converted, parser):
            return SetValueResult.CANCEL
        return SetValueResult.SUCCESS

    def set_value(self, value: str, parser: Any) -> SetValueResult:
        converted = self._convert(value)
        if converted is _INVALID:
            return SetValueResult.ERROR
        return self._run(converted, parser)

    def set_switch_value(self, parser: Any) -> SetValueResult:
        if not self.is_switch:
            raise TypeError(f"argument '{self.name}' is not a switch")
        return self._run(True, parser)