"""Command line argument parsing with positional, named, long/short and subcommand support."""

__version__ = "2.0.2"

__all__ = [
    "argument",
    "builder",
    "commands",
    "info",
    "manager",
    "naming",
    "parser",
    "parsing_mode",
    "result",
]