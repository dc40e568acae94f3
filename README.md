# argkit

argkit parses command line arguments into Python values. It handles positional and named
arguments, switches, multi-value arguments, aliases, default values, a POSIX-like
long/short mode and applications made of subcommands. It can print error messages and a
plain usage summary.

argkit needs nothing beyond the standard library.

## Defining arguments

Each argument is an `Argument` (in `argkit.argument`). Collect them with a
`ParserBuilder` (in `argkit.builder`); its `build()` method returns a
`CommandLineParser`.

```python
from argkit.argument import Argument
from argkit.builder import ParserBuilder

builder = ParserBuilder("search")
builder.add_argument(Argument("Pattern", position=0, required=True))
builder.add_argument(Argument("Count", value_type=int, default=10))
builder.add_argument(Argument("Verbose", value_type=bool, aliases=["v"]))
parser = builder.build()

result = parser.parse(["foo.*", "-Count", "5", "-v"])
if result:
    print(parser.get_argument("Pattern").value)   # foo.*
    print(parser.get_argument("Count").value)     # 5
else:
    print(result.message())
```

The main fields of `Argument` are:

- `name`, `aliases`: the long name and other names for it.
- `short_name`, `short_aliases`: single-character names, used in long/short mode. An
  argument given only a `short_name` has no long name.
- `value_type`: a callable that turns the text into a value (`str` by default). An
  argument whose `value_type` is `bool` is a switch and may be given without a value.
- `converter`: a callable used instead of `value_type` to convert the text. A
  `ValueError`, a `TypeError` or a result of `None` makes the value invalid.
- `position`, `required`, `multi_value`, `default`, `cancel_parsing`, `description`,
  `value_description`.

After parsing, the argument's `value` and `has_value` hold what was given. A
multi-value argument collects a list. Optional arguments that were not given receive
their `default`; switches that were not given become `False`.

`ActionArgument` calls its `action(value, parser)` when it is given; if the action
returns `True`, parsing is cancelled.

`ParserBuilder` takes the settings of `ParserOptions` (in `argkit.parser`) as keyword
arguments, for example `ParserBuilder("app", case_sensitive=True, prefixes=["--", "-"])`,
or through its `options` attribute. The built parser keeps a copy of the settings.

## Parsing rules

- Named arguments start with a prefix. The default prefix is `-`; on Windows `/` is also
  accepted. A `-` followed by a digit is read as a value, so negative numbers can be
  passed.
- A name and its value are separated by white space or by `argument_value_separator`,
  which is `:` by default: `-Count 5` or `-Count:5`. White space separation can be turned
  off with `allow_white_space_separator=False`.
- Arguments without a name fill the positional arguments in order, skipping those
  already given by name.
- Giving an argument twice is an error unless `allow_duplicate_arguments` is set or the
  argument is multi-value.
- Names are compared without regard to case unless `case_sensitive` is set.
- A help argument named `Help`, with the aliases `?` and `h`, is added unless
  `automatic_help_argument=False`. Its first letter follows the case of the first
  argument's name. If one of those names is already taken, no help argument is added and
  `parser.help_argument` is the argument that holds the name. Giving the help argument
  cancels parsing and sets `parser.help_requested`.

With `mode=ParsingMode.LONG_SHORT` (from `argkit.parsing_mode`), long names use the long
prefix (`--` by default) and short names use the other prefixes. Several short switches
can be combined, as in `-abc`. `ParsingMode.from_name("long-short")` looks a mode up by
name.

`parse_argv(argv)` parses a full `sys.argv`-style list, skipping `argv[0]`.
`get_executable_name(argv)` in `argkit.naming` gives the program name from `argv[0]`.

## Results

`parse()` returns a `ParseResult` (in `argkit.result`). It is true when parsing
succeeded. Otherwise `result.error` holds a `ParseError`, `result.argument_name` the
argument concerned, and `result.message()` a message to show the user.

`on_parsed(callback)` registers a function called as `callback(argument, value)` after
each argument is set. It may return an `OnParsedAction`: `CANCEL_PARSING` stops parsing,
`ALWAYS_CONTINUE` keeps going even for an argument that would cancel.

## Usage help

When `parse()` is given a usage writer, errors and usage help are written to it. A usage
writer is any object with these methods:

- `write_error(message)`
- `write_parser_usage(parser, request)`, where `request` is a `UsageHelpRequest`
- `write_command_list_usage(manager)`, for subcommands

After an error, the usage shown is set by `show_usage_on_error`. `parser.write_usage()`
without a writer prints a plain summary of the arguments to standard output.

## Subcommands

Write a subclass of `Command` (in `argkit.commands`) for each subcommand. Its
constructor receives a `ParserBuilder` to add arguments to, and `run()` returns an exit
code. The class attributes `name` and `description` set how it is listed; without
`name`, the class name is used.

```python
import sys

from argkit.argument import Argument
from argkit.commands import Command
from argkit.manager import CommandManager


class ReadCommand(Command):
    name = "read"
    description = "Reads a file."

    def __init__(self, builder):
        self.path = Argument("Path", position=0, required=True)
        builder.add_argument(self.path)

    def run(self):
        print(f"reading {self.path.value}")
        return 0


manager = CommandManager("myapp", common_help_argument="-Help")
manager.add_command(ReadCommand)
manager.add_version_command(lambda: print("myapp 1.0"))
code = manager.run_command(sys.argv[1:])
sys.exit(1 if code is None else code)
```

`run_command` and `create_command` take the arguments with the command name first;
`run_named_command` and `create_named_command` take the name separately. When no command
is given, or an unknown one, the list of commands is written; when a command's arguments
are wrong, the error and its usage are written. Without a usage writer these go to the
console. `configure_parser(function)` sets a function applied to every command's builder.

A command that parses its own arguments derives from `CommandWithCustomParsing`, is
created without a builder, and implements `parse(args, manager, usage)`, returning
`True` on success. `CommandInfo` (in `argkit.info`) describes a registered command.

## What argkit does not do

argkit is a library; it installs no command of its own. Its built-in usage output is a
plain, unwrapped listing of names and descriptions. For formatted or wrapped help,
pass your own usage writer. There is no built-in version argument; `add_version_command`
adds a version command that calls the function you give it.