# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Defines `ArgumentAction`, the closed set of effects a matched argument can have on
the parse result.

Every member is handled by exactly one branch of the engine's dispatch table.
Members can be given as enum values or as their string names, with a few
config-friendly aliases.

Example:
    ArgumentAction("store_true") → ArgumentAction.STORE_TRUE
    ArgumentAction("true")       → ArgumentAction.STORE_TRUE (via alias)
    ArgumentAction("const")      → ArgumentAction.STORE_CONST (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentAction(Enum):
    """
    Defines the action to be taken when the argument is encountered.

    Members:
        STORE: Store the value following the option (default).
        STORE_CONST: Store the argument's constant when the option is present.
        STORE_TRUE: Store `True` if the option is present. Defaults to `False`.
        STORE_FALSE: Store `False` if the option is present. Defaults to `True`.
        APPEND: Append the value following the option to a list.
        APPEND_CONST: Append the argument's constant to a list.
        HELP: Display help and exit.

    Aliases:
        - "true" → "store_true"
        - "false" → "store_false"
        - "const" → "store_const"
    """

    STORE = "store"
    STORE_CONST = "store_const"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"
    APPEND = "append"
    APPEND_CONST = "append_const"
    HELP = "help"

    @classmethod
    def choices(cls) -> list[ArgumentAction]:
        """Return a list of all argument actions."""
        return list(cls)

    @classmethod
    def value_actions(cls) -> tuple[ArgumentAction, ...]:
        """Actions that consume the token following the option."""
        return (cls.STORE, cls.APPEND)

    @property
    def takes_value(self) -> bool:
        return self in self.value_actions()

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "true": "store_true",
            "false": "store_false",
            "const": "store_const",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls.choices())
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the argument action."""
        return self.value
