"""Helpers for argument names, name prefixes and executable names."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable, Optional, Sequence

from .parsing_mode import ParsingMode


@dataclass(frozen=True)
class PrefixInfo:
    """An accepted argument name prefix and whether it introduces short names."""

    prefix: str
    is_short: bool


def get_default_prefixes() -> list[str]:
    """The prefixes accepted by default: '-' and '/' on Windows, only '-' elsewhere."""
    if sys.platform == "win32":
        return ["-", "/"]
    return ["-"]


def get_executable_name(argv: Sequence[str], include_extension: bool = False) -> str:
    """The file name of ``argv[0]``, without its extension unless asked for.

    Returns an empty string when ``argv`` is empty.
    """
    if not argv:
        return ""
    path = PurePath(argv[0])
    return path.name if include_extension else path.stem


def strip_prefix(argument: str, prefix: str) -> Optional[str]:
    """``argument`` without ``prefix``, or None if it does not start with it."""
    if argument.startswith(prefix):
        return argument[len(prefix):]
    return None


def split_once(text: str, separator: str) -> tuple[str, Optional[str]]:
    """Split at the first ``separator``; the second part is None if there is none."""
    name, found, value = text.partition(separator)
    return name, (value if found else None)


def sort_prefixes(
    prefixes: Iterable[str], long_prefix: str, mode: ParsingMode
) -> list[PrefixInfo]:
    """Build the prefix list, longest prefix first.

    In long/short mode the long prefix introduces long names and every other
    prefix introduces short names.
    """
    long_short = mode is ParsingMode.LONG_SHORT
    infos = [PrefixInfo(long_prefix, False)] if long_short else []
    infos.extend(PrefixInfo(prefix, long_short) for prefix in prefixes)
    return sorted(infos, key=lambda info: len(info.prefix), reverse=True)


def name_key(name: str, case_sensitive: bool = False) -> str:
    """The key under which a name is looked up and compared."""
    return name if case_sensitive else name.casefold()