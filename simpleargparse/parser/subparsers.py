# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Defines `Subparsers`, the positional slot that dispatches to named child parsers.

A `Subparsers` group is attached to an `ArgumentParser` through
`ArgumentParser.add_subparsers()` and always occupies the last positional slot.
When the parse engine reaches it, the token in that slot selects a child parser
by command word and every remaining token is handed to that child.

Example:
    parser = ArgumentParser(prog="tool")
    commands = parser.add_subparsers(dest="command")
    add = commands.add_parser("add", help="Add a file.")
    add.add_argument("path")

    parser.parse_args(["add", "notes.txt"])
    # Namespace(command='add', path='notes.txt')
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from simpleargparse.exceptions import InvalidArgumentNameError, ParserConfigError
from simpleargparse.parser.argument import Argument

if TYPE_CHECKING:
    from simpleargparse.parser.argument_parser import ArgumentParser


@dataclass(frozen=True, eq=False)
class Subparsers(Argument):
    """
    Positional slot holding a mapping of command words to child parsers.

    The inherited `name` is the destination key; when it is empty the chosen
    command word is not recorded and the slot only delegates.

    Attributes:
        title (str): Heading used for the command list in help output.
        prog (str): Program prefix given to every child parser.
        parser_class (type): Class used to build child parsers.
        console (Console | None): Console handed to every child parser.
        error_console (Console | None): Diagnostic console handed to every child.
        parsers (dict[str, ArgumentParser]): Child parsers keyed by command word.
    """

    title: str = ""
    prog: str = ""
    parser_class: Any = None
    console: Any = None
    error_console: Any = None
    parsers: dict[str, ArgumentParser] = field(default_factory=dict)
    command_help: dict[str, str] = field(default_factory=dict)

    def add_parser(
        self,
        name: str,
        help: str = "",
        description: str = "",
        epilog: str = "",
        usage: str | None = None,
    ) -> ArgumentParser:
        """
        Register a child parser under a command word and return it.

        Raises:
            InvalidArgumentNameError: If the command word is empty or contains
                whitespace.
            ParserConfigError: If the command word is already registered.
        """
        if not name or any(char.isspace() for char in name):
            raise InvalidArgumentNameError(
                f"Command name {name!r} must be non-empty and contain no whitespace."
            )
        if name in self.parsers:
            raise ParserConfigError(f"Command '{name}' is already defined.")
        prog = f"{self.prog} {name}" if self.prog else name
        parser = self.parser_class(
            prog=prog,
            usage=usage,
            description=description or help,
            epilog=epilog,
            console=self.console,
            error_console=self.error_console,
        )
        self.parsers[name] = parser
        self.command_help[name] = help
        return parser

    def get_parser(self, command: str) -> ArgumentParser | None:
        return self.parsers.get(command)

    @property
    def choices_text(self) -> str:
        return f"{{{','.join(self.parsers)}}}"

    @property
    def label(self) -> str:
        return self.name or self.choices_text

    @property
    def usage(self) -> str:
        return self.choices_text

    @property
    def display_name(self) -> str:
        return self.choices_text

    def __str__(self) -> str:
        return self.name or self.choices_text
