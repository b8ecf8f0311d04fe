# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Defines `Namespace`, the mapping produced by a parse.

Keys are argument key names. A value is one of:
- absent (`None`)
- a string taken verbatim from the token vector
- a boolean from `store_true` / `store_false`
- an argument constant from `store_const`
- a list of strings or constants from `append` / `append_const`

Values are never coerced. Each parse builds its own namespace; a parent parser
folds in the namespace of a delegated sub-parser with `merge()`.
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping, Union

ArgumentValue = Union[None, str, bool, list[Any], Any]


class Namespace:
    """
    Mapping of argument key names to parsed values.

    `namespace["key"]` is the lookup that always works. Attribute access is a
    convenience for keys that are valid identifiers (`dry_run` also finds
    `dry-run`); a key that shares its name with a method such as `items` or
    `get` is only reachable by item access.
    """

    def __init__(self, values: Mapping[str, ArgumentValue] | None = None) -> None:
        self._values: dict[str, ArgumentValue] = dict(values or {})

    def __getitem__(self, key: str) -> ArgumentValue:
        return self._values[key]

    def __setitem__(self, key: str, value: ArgumentValue) -> None:
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> ArgumentValue:
        if name.startswith("_"):
            raise AttributeError(name)
        values = self.__dict__.get("_values", {})
        if name in values:
            return values[name]
        hyphenated = name.replace("_", "-")
        if hyphenated in values:
            return values[hyphenated]
        raise AttributeError(f"'Namespace' has no attribute '{name}'")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Namespace):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def get(self, key: str, default: ArgumentValue = None) -> ArgumentValue:
        return self._values.get(key, default)

    def has_value(self, key: str) -> bool:
        """Return True if the key holds anything other than an absent value."""
        return self._values.get(key) is not None

    def append(self, key: str, value: Any) -> None:
        """Append to the list stored at `key`, creating it if absent."""
        current = self._values.get(key)
        if current is None:
            current = []
            self._values[key] = current
        current.append(value)

    def merge(self, other: Namespace | Mapping[str, ArgumentValue]) -> None:
        """Copy every key of `other` into this namespace, overwriting on conflict."""
        items = other._values if isinstance(other, Namespace) else other
        for key, value in items.items():
            self._values[key] = value

    def keys(self):
        return self._values.keys()

    def items(self):
        return self._values.items()

    def as_dict(self) -> dict[str, ArgumentValue]:
        return dict(self._values)

    def __repr__(self) -> str:
        body = ", ".join(f"{key}={value!r}" for key, value in self._values.items())
        return f"Namespace({body})"
