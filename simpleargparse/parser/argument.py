# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Defines the `Argument` dataclass used by `ArgumentParser` to describe a single
command-line parameter.

An argument whose name starts with the prefix character (`-`) is optional and is
matched by name or alias anywhere on the command line. Any other argument is
positional and is matched by its position among the non-option tokens. This
classification is made once from the name and never changes.

Key Attributes:
- `name`: Primary token form (e.g. `-v` or `file`)
- `alias`: Secondary token form (e.g. `--verbose`); for positional arguments it
  only changes the result key
- `action`: `ArgumentAction` describing the effect on the result
- `default`: Value used when an optional argument is omitted
- `choices`: Allowed literal values, if restricted
- `const`: Value emitted by the `*_CONST` actions
- `key_name`: Derived key under which the value is stored in the `Namespace`

Arguments should be created through `ArgumentParser.add_argument()`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from simpleargparse.parser.argument_action import ArgumentAction

PREFIX_CHAR = "-"


def is_option_token(token: str | None) -> bool:
    """Return True if the token looks like an optional argument (`-x`, `--long`)."""
    return bool(token) and token.startswith(PREFIX_CHAR)


@dataclass(frozen=True)
class Argument:
    """
    Represents a command-line argument.

    Attributes:
        name (str): Primary token form of the argument.
        alias (str | None): Secondary token form of the argument.
        action (ArgumentAction): The action taken when the argument is matched.
        default (Any): Value used when the argument is omitted.
        choices (tuple[str, ...] | None): Allowed literal values.
        required (bool): True if omitting the argument is an error.
        help (str): Help text for the argument.
        const (Any): Constant stored or appended by the `*_CONST` actions.
    """

    name: str
    alias: str | None = None
    action: ArgumentAction = ArgumentAction.STORE
    default: Any = None
    choices: tuple[str, ...] | None = None
    required: bool = False
    help: str = ""
    const: Any = None

    @property
    def is_optional(self) -> bool:
        return is_option_token(self.name)

    @property
    def is_positional(self) -> bool:
        return not self.is_optional

    @property
    def key_name(self) -> str:
        """Key under which the value is stored in the result namespace."""
        if self.alias is not None:
            return self.alias.lstrip(PREFIX_CHAR)
        return self.name.lstrip(PREFIX_CHAR)

    @property
    def metavar(self) -> str:
        return self.key_name.upper()

    @property
    def flags(self) -> tuple[str, ...]:
        """Tokens that match this argument on the command line."""
        if self.is_positional:
            return ()
        if self.alias is not None:
            return (self.name, self.alias)
        return (self.name,)

    @property
    def label(self) -> str:
        """Name used for the argument in diagnostics, e.g. `-c/--count`."""
        if self.is_optional:
            return "/".join(self.flags)
        return self.name

    def resolve_default(self) -> Any:
        """Default value seeded into the namespace before parsing."""
        if self.action == ArgumentAction.STORE_TRUE:
            return False
        if self.action == ArgumentAction.STORE_FALSE:
            return True
        return self.default

    def get_choice_text(self) -> str:
        """Get the value placeholder shown after the argument in usage and help."""
        if self.choices:
            return f"{{{','.join(self.choices)}}}"
        if self.is_optional and self.action.takes_value:
            return self.metavar
        return ""

    @property
    def usage(self) -> str:
        """Usage fragment, e.g. `-c COUNT` or `file`."""
        if self.is_positional:
            return self.get_choice_text() or self.name
        choice_text = self.get_choice_text()
        if choice_text:
            return f"{self.name} {choice_text}"
        return self.name

    @property
    def display_name(self) -> str:
        """Left column of the help listing, e.g. `-c COUNT, --count COUNT`."""
        if self.is_positional:
            return self.usage
        choice_text = self.get_choice_text()
        if choice_text:
            return ", ".join(f"{flag} {choice_text}" for flag in self.flags)
        return ", ".join(self.flags)

    def __str__(self) -> str:
        return self.name
