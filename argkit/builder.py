"""Assembling a set of arguments and parser settings into a parser."""

from __future__ import annotations

import copy
from typing import Any

from .argument import Argument
from .parser import CommandLineParser, ParserOptions


class ParserBuilder:
    """Collects argument definitions and settings, then builds a parser.

    Settings are the fields of :class:`ParserOptions` and may be given as
    keyword arguments or changed later through :attr:`options`.
    """

    def __init__(self, command_name: str = "", **settings: Any) -> None:
        self.options = ParserOptions(command_name=command_name, **settings)
        self.arguments: list[Argument] = []

    def add_argument(self, argument: Argument) -> "ParserBuilder":
        """Add an argument definition; returns the builder for chaining."""
        if not isinstance(argument, Argument):
            raise TypeError("add_argument expects an Argument instance")
        self.arguments.append(argument)
        return self

    def build(self) -> CommandLineParser:
        """Create a parser for the arguments added so far.

        The parser gets a copy of the current settings, so later changes to
        the builder do not affect it.
        """
        return CommandLineParser(list(self.arguments), copy.deepcopy(self.options))