# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Defines all custom exception classes used by SimpleArgParse.

Two families are kept apart: configuration errors raised while a parser is being
declared, and argument errors raised while a token vector is being parsed.
Argument errors remember the parser that detected them so the diagnostic can show
the usage line of the right sub-command.

Exception Hierarchy:
- SimpleArgParseError
    ├── ParserConfigError
    │   └── InvalidArgumentNameError
    └── ArgumentError
        ├── MissingValueError
        ├── InvalidChoiceError
        ├── UnrecognizedArgumentsError
        └── MissingArgumentsError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from simpleargparse.parser.argument_parser import ArgumentParser


class SimpleArgParseError(Exception):
    """Base exception for SimpleArgParse."""


class ParserConfigError(SimpleArgParseError):
    """Exception raised when a parser or argument is declared incorrectly."""


class InvalidArgumentNameError(ParserConfigError):
    """Exception raised when an argument name contains whitespace or is empty."""


class ArgumentError(SimpleArgParseError):
    """Exception raised when a token vector cannot be parsed."""

    def __init__(self, message: str, parser: ArgumentParser | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.parser = parser


class MissingValueError(ArgumentError):
    """Exception raised when an option expecting a value has none."""

    def __init__(self, argument: str, parser: ArgumentParser | None = None) -> None:
        super().__init__(f"argument {argument}: expected one argument", parser)
        self.argument = argument


class InvalidChoiceError(ArgumentError):
    """Exception raised when a value is not among the allowed choices."""

    def __init__(
        self,
        argument: str,
        value: str,
        choices: Sequence[str],
        parser: ArgumentParser | None = None,
    ) -> None:
        allowed = ", ".join(repr(choice) for choice in choices)
        super().__init__(
            f"argument {argument}: invalid choice: {value!r} (choose from {allowed})",
            parser,
        )
        self.value = value
        self.choices = tuple(choices)


class UnrecognizedArgumentsError(ArgumentError):
    """Exception raised for tokens that match no positional slot or option."""

    def __init__(
        self, tokens: Sequence[str], parser: ArgumentParser | None = None
    ) -> None:
        super().__init__(f"unrecognized arguments: {' '.join(tokens)}", parser)
        self.tokens = list(tokens)


class MissingArgumentsError(ArgumentError):
    """Exception raised when required arguments were not supplied."""

    def __init__(
        self, names: Sequence[str], parser: ArgumentParser | None = None
    ) -> None:
        super().__init__(
            f"the following arguments are required: {', '.join(names)}", parser
        )
        self.names = list(names)
