# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
This module implements `ArgumentParser`, the declarative half of SimpleArgParse.

An `ArgumentParser` holds an ordered list of positional arguments, a lookup of
optional arguments by name and alias, and at most one `Subparsers` group. Parsing
itself is delegated to `ParseEngine`; help and usage text is delegated to
`HelpFormatter`.

Public Interface:
- `add_argument(...)`: Register a positional or optional argument.
- `add_subparsers(...)`: Attach (or return the already attached) sub-command group.
- `parse_known(...)`: Parse tokens, raising `ArgumentError` or `HelpSignal`.
- `parse_args(...)`: Parse tokens, rendering help or diagnostics and raising
  `ExitSignal` instead of returning when parsing cannot produce a namespace.
- `format_usage()` / `format_help()`: Plain-text usage and help.
- `print_help()` / `error(...)`: Rich rendering to the parser's console.

Example Usage:
    parser = ArgumentParser(prog="tool")
    parser.add_argument("file", help="Input file.")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(["input.txt", "--verbose"])
    # args == Namespace(verbose=True, file='input.txt')
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from simpleargparse.console import console as default_console
from simpleargparse.console import error_console as default_error_console
from simpleargparse.exceptions import (
    ArgumentError,
    InvalidArgumentNameError,
    ParserConfigError,
)
from simpleargparse.logger import logger
from simpleargparse.parser.argument import Argument, is_option_token
from simpleargparse.parser.argument_action import ArgumentAction
from simpleargparse.parser.engine import ParseEngine
from simpleargparse.parser.formatter import HelpFormatter
from simpleargparse.parser.namespace import Namespace
from simpleargparse.parser.subparsers import Subparsers
from simpleargparse.signals import ExitSignal, HelpSignal
from simpleargparse.utils import get_program_name

EXIT_SUCCESS = 0
EXIT_PARSE_ERROR = 2


class ArgumentParser:
    """
    Declarative description of a command line and entry point for parsing it.

    Features:
    - Positional arguments matched in declaration order.
    - Optional arguments matched by name or alias.
    - Store, constant, boolean, append and help actions.
    - Choice validation for stored and appended values.
    - One level of sub-commands per parser, nested to any depth.
    - Help and usage rendering through Rich.
    """

    def __init__(
        self,
        prog: str | None = None,
        usage: str | None = None,
        description: str = "",
        epilog: str = "",
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.prog: str = prog or get_program_name()
        self.usage: str | None = usage
        self.description: str = description or ""
        self.epilog: str = epilog or ""
        self.console: Console = console or default_console
        self.error_console: Console = error_console or default_error_console
        self._arguments: list[Argument] = []
        self._positional: list[Argument] = []
        self._optional: list[Argument] = []
        self._flag_map: dict[str, Argument] = {}
        self._key_names: set[str] = set()
        self._subparsers: Subparsers | None = None
        self._add_help()

    def _add_help(self) -> None:
        """Add help argument to the parser."""
        self.add_argument(
            "-h",
            "--help",
            action=ArgumentAction.HELP,
            help="Show this help message and exit.",
        )

    @property
    def positional_arguments(self) -> list[Argument]:
        return list(self._positional)

    @property
    def optional_arguments(self) -> list[Argument]:
        return list(self._optional)

    @property
    def subparsers(self) -> Subparsers | None:
        return self._subparsers

    @property
    def positional_slots(self) -> list[Argument]:
        """Positional arguments in matching order, sub-command group last."""
        if self._subparsers is not None:
            return [*self._positional, self._subparsers]
        return list(self._positional)

    def _validate_name(self, name: Any, label: str = "Argument name") -> str:
        if not isinstance(name, str):
            raise InvalidArgumentNameError(f"{label} {name!r} must be a string.")
        if not name or not name.strip(" -"):
            raise InvalidArgumentNameError(f"{label} {name!r} must not be empty.")
        if any(char.isspace() for char in name):
            raise InvalidArgumentNameError(f"{label} {name!r} can't contain spaces.")
        return name

    def _validate_action(
        self, action: ArgumentAction | str, positional: bool
    ) -> ArgumentAction:
        if not isinstance(action, ArgumentAction):
            try:
                action = ArgumentAction(action)
            except ValueError:
                raise ParserConfigError(
                    f"Invalid action '{action}' is not a valid ArgumentAction"
                )
        if positional and action != ArgumentAction.STORE:
            raise ParserConfigError(
                f"Action '{action}' cannot be used with positional arguments"
            )
        return action

    def _determine_required(
        self, required: bool, positional: bool, action: ArgumentAction
    ) -> bool:
        if positional:
            return True
        if required and action in (
            ArgumentAction.STORE_TRUE,
            ArgumentAction.STORE_FALSE,
            ArgumentAction.HELP,
        ):
            raise ParserConfigError(f"Argument with action {action} cannot be required")
        return bool(required)

    def _normalize_choices(
        self, choices: Iterable | None, action: ArgumentAction
    ) -> tuple[str, ...] | None:
        if choices is None:
            return None
        if not action.takes_value:
            raise ParserConfigError(f"choices cannot be specified for {action} actions")
        if isinstance(choices, (str, dict)):
            raise ParserConfigError("choices must be a list, tuple or set of strings")
        try:
            normalized = tuple(str(choice) for choice in choices)
        except TypeError:
            raise ParserConfigError(
                "choices must be iterable (like list, tuple, or set)"
            )
        if not normalized:
            raise ParserConfigError("choices must not be empty")
        return normalized

    def _validate_default(
        self,
        default: Any,
        action: ArgumentAction,
        choices: tuple[str, ...] | None,
        key_name: str,
    ) -> Any:
        if default is None:
            return None
        if action in (ArgumentAction.STORE_TRUE, ArgumentAction.STORE_FALSE):
            raise ParserConfigError(
                f"Default value cannot be set for action {action}. It is a boolean flag."
            )
        if action in (ArgumentAction.APPEND, ArgumentAction.APPEND_CONST):
            if not isinstance(default, list):
                raise ParserConfigError(
                    f"Default value for '{key_name}' must be a list for action {action}"
                )
            if choices and any(item not in choices for item in default):
                raise ParserConfigError(
                    f"Default list {default!r} for '{key_name}' not in allowed "
                    f"choices: {list(choices)}"
                )
        elif choices and default not in choices:
            raise ParserConfigError(
                f"Default value '{default}' not in allowed choices: {list(choices)}"
            )
        return default

    def _validate_const(self, const: Any, action: ArgumentAction) -> Any:
        if action in (ArgumentAction.STORE_CONST, ArgumentAction.APPEND_CONST):
            if const is None:
                raise ParserConfigError(f"const must be provided for {action} actions")
        elif const is not None:
            raise ParserConfigError(f"const should not be provided for action {action}")
        return const

    def _register_argument(self, argument: Argument) -> None:
        for flag in argument.flags:
            if flag in self._flag_map:
                existing = self._flag_map[flag]
                raise ParserConfigError(
                    f"Flag '{flag}' is already used by argument '{existing.key_name}'"
                )
        if argument.key_name in self._key_names:
            raise ParserConfigError(
                f"Destination '{argument.key_name}' is already defined."
            )

        for flag in argument.flags:
            self._flag_map[flag] = argument
        self._key_names.add(argument.key_name)
        self._arguments.append(argument)
        if argument.is_positional:
            self._positional.append(argument)
        else:
            self._optional.append(argument)

    def add_argument(
        self,
        name: str,
        alias: str | None = None,
        action: str | ArgumentAction = "store",
        default: Any = None,
        choices: Iterable | None = None,
        required: bool = False,
        help: str = "",
        const: Any = None,
    ) -> Argument:
        """
        Define a new argument for the parser.

        Args:
            name (str): Primary token form, e.g. "file" or "-v".
            alias (str | None): Secondary token form, e.g. "--verbose".
            action (str | ArgumentAction): The argument action (default: "store").
            default (Any): Value used when an optional argument is omitted.
            choices (Iterable | None): Allowed literal values.
            required (bool): Whether an optional argument must be supplied.
            help (str): Help text shown in the help listing.
            const (Any): Constant for the store_const and append_const actions.

        Returns:
            Argument: The registered argument.

        Raises:
            InvalidArgumentNameError: If `name` or `alias` contains whitespace.
            ParserConfigError: If the definition is inconsistent or clashes with an
                existing argument.
        """
        name = self._validate_name(name)
        if alias is not None:
            alias = self._validate_name(alias, "Argument alias")
        positional = not is_option_token(name)
        if not positional and alias is not None and not is_option_token(alias):
            raise ParserConfigError(
                f"Alias '{alias}' of optional argument '{name}' must start with '-'"
            )
        action = self._validate_action(action, positional)
        choices = self._normalize_choices(choices, action)
        key_name = (alias or name).lstrip("-")
        default = self._validate_default(default, action, choices, key_name)
        const = self._validate_const(const, action)
        required = self._determine_required(required, positional, action)

        argument = Argument(
            name=name,
            alias=alias,
            action=action,
            default=default,
            choices=choices,
            required=required,
            help=help,
            const=const,
        )
        self._register_argument(argument)
        return argument

    def add_subparsers(
        self, title: str = "", help: str = "", dest: str = ""
    ) -> Subparsers:
        """
        Attach a sub-command group as the trailing positional slot.

        A parser holds at most one group. Later calls return the existing group so
        that commands added through either handle end up together.

        Args:
            title (str): Heading for the command list in help output.
            help (str): Help text for the command slot.
            dest (str): Key under which the chosen command word is recorded. When
                empty, the word is not recorded.
        """
        if self._subparsers is not None:
            logger.debug(
                "[%s] add_subparsers called again; merging into existing group.",
                self.prog,
            )
            return self._subparsers
        if dest:
            dest = self._validate_name(dest, "Sub-command dest")
            if is_option_token(dest):
                raise ParserConfigError("Sub-command dest must not start with '-'")
            if dest in self._key_names:
                raise ParserConfigError(f"Destination '{dest}' is already defined.")
            self._key_names.add(dest)
        self._subparsers = Subparsers(
            name=dest,
            help=help,
            title=title,
            prog=self.prog,
            parser_class=type(self),
            console=self.console,
            error_console=self.error_console,
        )
        return self._subparsers

    def get_argument(self, key_name: str) -> Argument | None:
        """Return the argument stored under `key_name`, if any."""
        return next((a for a in self._arguments if a.key_name == key_name), None)

    def get_optional(self, token: str) -> Argument | None:
        """Return the optional argument matched by `token` (name or alias)."""
        return self._flag_map.get(token)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert argument metadata into a serializable list of dicts.

        Returns:
            List of definitions for use in introspection or documentation.
        """
        defs = []
        for arg in self._arguments:
            defs.append(
                {
                    "name": arg.name,
                    "alias": arg.alias,
                    "key_name": arg.key_name,
                    "action": arg.action.value,
                    "default": arg.default,
                    "choices": list(arg.choices) if arg.choices else None,
                    "required": arg.required,
                    "positional": arg.is_positional,
                    "help": arg.help,
                    "const": arg.const,
                }
            )
        return defs

    def parse_known(self, tokens: Sequence[str] | None = None) -> Namespace:
        """
        Parse tokens into a `Namespace` without rendering anything.

        Raises:
            ArgumentError: On any parse failure.
            HelpSignal: If a help option was matched.
        """
        if tokens is None:
            tokens = []
        return ParseEngine(self).parse(list(tokens))

    def parse_args(self, tokens: Sequence[str] | None = None) -> Namespace:
        """
        Parse tokens (defaults to `sys.argv[1:]`) into a `Namespace`.

        Help requests render the help of the parser that received them and raise
        `ExitSignal(0)`. Parse failures render a diagnostic for the parser that
        detected them and raise `ExitSignal(2)`.
        """
        if tokens is None:
            tokens = sys.argv[1:]
        try:
            return self.parse_known(tokens)
        except HelpSignal as signal:
            parser = signal.parser or self
            parser.print_help()
            raise ExitSignal(EXIT_SUCCESS) from None
        except ArgumentError as error:
            parser = error.parser or self
            parser.error(error.message)

    def get_formatter(self) -> HelpFormatter:
        return HelpFormatter(self)

    def format_usage(self) -> str:
        return self.get_formatter().format_usage()

    def format_help(self) -> str:
        return self.get_formatter().format_help()

    def print_usage(self, console: Console | None = None) -> None:
        target = console or self.console
        target.print(escape(f"usage: {self.prog} {self.format_usage()}"), soft_wrap=True)

    def print_help(self) -> None:
        """Print help for this parser using Rich output."""
        self.get_formatter().render(self.console)

    def error(self, message: str) -> NoReturn:
        """Print the usage line and an error message, then raise `ExitSignal(2)`."""
        logger.debug("[%s] Parse failed: %s", self.prog, message)
        self.print_usage(self.error_console)
        self.error_console.print(
            f"[bold red]{escape(self.prog)}: error:[/bold red] {escape(message)}",
            soft_wrap=True,
        )
        raise ExitSignal(EXIT_PARSE_ERROR)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentParser):
            return False

        def sorted_args(parser):
            return sorted(parser._arguments, key=lambda a: a.key_name)

        def commands(parser):
            if parser._subparsers is None:
                return None
            return (parser._subparsers.name, parser._subparsers.parsers)

        return sorted_args(self) == sorted_args(other) and commands(self) == commands(
            other
        )

    __hash__ = object.__hash__

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        required = sum(arg.required for arg in self._optional)
        commands = len(self._subparsers.parsers) if self._subparsers else 0
        return (
            f"ArgumentParser(prog={self.prog!r}, args={len(self._arguments)}, "
            f"flags={len(self._flag_map)}, positional={len(self._positional)}, "
            f"required={required}, commands={commands})"
        )

    def __repr__(self) -> str:
        return str(self)
