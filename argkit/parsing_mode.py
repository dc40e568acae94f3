"""Argument parsing rule sets."""

from __future__ import annotations

import enum
import re


class ParsingMode(enum.Enum):
    """Which rules are used to interpret a command line."""

    DEFAULT = "default"
    """Every argument has one name, prefixed by any of the accepted prefixes."""

    LONG_SHORT = "long_short"
    """POSIX-like rules where arguments have separate long and short names."""

    @classmethod
    def from_name(cls, name: str) -> "ParsingMode":
        """Look up a mode by name, ignoring case, dashes, underscores and spaces.

        Both ``default`` and ``default_mode`` name the default mode.
        """
        key = re.sub(r"[-_\s]", "", name).lower()
        lookup = {
            "default": cls.DEFAULT,
            "defaultmode": cls.DEFAULT,
            "longshort": cls.LONG_SHORT,
        }
        try:
            return lookup[key]
        except KeyError:
            raise ValueError(f"unknown parsing mode: {name!r}") from None