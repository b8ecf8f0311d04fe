# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Defines flow control signals used by SimpleArgParse.

These signals end a parse early without being parse failures. They inherit from
`FlowSignal`, a subclass of `BaseException`, so they pass through
`except Exception` blocks in calling code.

Signals:
- HelpSignal: The help option was matched; carries the parser whose help applies.
- ExitSignal: The terminal outcome of `ArgumentParser.parse_args`; carries the exit
  code an embedding program should use.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from simpleargparse.parser.argument_parser import ArgumentParser


class FlowSignal(BaseException):
    """Base class for all flow control signals in SimpleArgParse."""


class HelpSignal(FlowSignal):
    """Raised when help was requested."""

    def __init__(
        self,
        parser: ArgumentParser | None = None,
        message: str = "Help signal received.",
    ):
        super().__init__(message)
        self.parser = parser


class ExitSignal(FlowSignal):
    """Raised once help or a diagnostic has been rendered."""

    def __init__(self, code: int = 0, message: str = "Exit signal received."):
        super().__init__(message)
        self.code = code
