# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Implements `ParseEngine`, the token-consumption loop behind `ArgumentParser`.

One engine invocation walks a token vector once against one parser:

- Tokens starting with `-` are matched against the parser's optional arguments by
  name or alias and dispatched on the argument's `ArgumentAction`. Unknown option
  tokens are collected as unrecognized.
- Any other token fills the next positional slot. The last slot may be a
  `Subparsers` group, in which case the token selects a child parser, every
  remaining token is parsed by a fresh engine for that child, and the child's
  namespace is merged into this one (child keys win).
- After the loop the result is validated. Only the first failure is reported, in
  this order: unrecognized arguments, missing required options, missing
  positional arguments.

Failures are raised as `ArgumentError` subclasses tagged with the parser that
detected them. A help option raises `HelpSignal` tagged with its parser. Neither
prints anything; rendering is left to `ArgumentParser.parse_args`.
"""
from __future__ import annotations

from copy import deepcopy
from typing import TYPE_CHECKING, Sequence

from simpleargparse.exceptions import (
    InvalidChoiceError,
    MissingArgumentsError,
    MissingValueError,
    UnrecognizedArgumentsError,
)
from simpleargparse.logger import logger
from simpleargparse.parser.argument import Argument, is_option_token
from simpleargparse.parser.argument_action import ArgumentAction
from simpleargparse.parser.namespace import Namespace
from simpleargparse.parser.subparsers import Subparsers
from simpleargparse.signals import HelpSignal

if TYPE_CHECKING:
    from simpleargparse.parser.argument_parser import ArgumentParser


class ParseEngine:
    """Parses one token vector against one `ArgumentParser`."""

    def __init__(self, parser: ArgumentParser) -> None:
        self.parser = parser
        self.namespace = Namespace()
        self.unrecognized: list[str] = []
        self.pos = 0
        self.pos_idx = 0

    def _seed_defaults(self) -> None:
        for spec in self.parser.optional_arguments:
            if spec.action == ArgumentAction.HELP or spec.required:
                continue
            self.namespace[spec.key_name] = deepcopy(spec.resolve_default())

    def _check_choice(self, spec: Argument, value: str) -> None:
        if spec.choices and value not in spec.choices:
            raise InvalidChoiceError(spec.label, value, spec.choices, self.parser)

    def _take_value(self, tokens: Sequence[str], spec: Argument) -> str:
        value_index = self.pos + 1
        if value_index >= len(tokens) or is_option_token(tokens[value_index]):
            raise MissingValueError(spec.label, self.parser)
        value = tokens[value_index]
        self._check_choice(spec, value)
        return value

    def _handle_option(self, tokens: Sequence[str], spec: Argument) -> None:
        action = spec.action
        key = spec.key_name

        if action == ArgumentAction.HELP:
            raise HelpSignal(self.parser)
        elif action == ArgumentAction.STORE:
            self.namespace[key] = self._take_value(tokens, spec)
            self.pos += 2
        elif action == ArgumentAction.APPEND:
            self.namespace.append(key, self._take_value(tokens, spec))
            self.pos += 2
        elif action == ArgumentAction.STORE_CONST:
            self.namespace[key] = deepcopy(spec.const)
            self.pos += 1
        elif action == ArgumentAction.APPEND_CONST:
            self.namespace.append(key, deepcopy(spec.const))
            self.pos += 1
        elif action == ArgumentAction.STORE_TRUE:
            self.namespace[key] = True
            self.pos += 1
        elif action == ArgumentAction.STORE_FALSE:
            self.namespace[key] = False
            self.pos += 1
        else:
            raise AssertionError(f"Unhandled action: {action}")

    def _delegate(self, tokens: Sequence[str], slot: Subparsers, command: str) -> None:
        child = slot.get_parser(command)
        if child is None:
            raise InvalidChoiceError(
                slot.label, command, list(slot.parsers), self.parser
            )
        if slot.key_name:
            self.namespace[slot.key_name] = command
        remaining = list(tokens[self.pos + 1 :])
        logger.debug(
            "[%s] Delegating %d token(s) to sub-command '%s'.",
            self.parser.prog,
            len(remaining),
            command,
        )
        self.namespace.merge(ParseEngine(child).parse(remaining))
        self.pos = len(tokens)

    def _handle_positional(self, tokens: Sequence[str], token: str) -> None:
        slots = self.parser.positional_slots
        slot = slots[self.pos_idx] if self.pos_idx < len(slots) else None

        if slot is None:
            self.unrecognized.append(token)
        elif isinstance(slot, Subparsers):
            self._delegate(tokens, slot, token)
            return
        elif slot.key_name:
            self._check_choice(slot, token)
            self.namespace[slot.key_name] = token

        self.pos += 1
        self.pos_idx += 1

    def _validate(self) -> None:
        if self.unrecognized:
            logger.debug(
                "[%s] Unrecognized tokens: %s", self.parser.prog, self.unrecognized
            )
            raise UnrecognizedArgumentsError(self.unrecognized, self.parser)

        missing_optional = [
            spec.key_name
            for spec in self.parser.optional_arguments
            if spec.required and not self.namespace.has_value(spec.key_name)
        ]
        if missing_optional:
            raise MissingArgumentsError(missing_optional, self.parser)

        missing_positional = [
            spec.key_name
            for spec in self.parser.positional_arguments
            if spec.key_name and not self.namespace.has_value(spec.key_name)
        ]
        if missing_positional:
            raise MissingArgumentsError(missing_positional, self.parser)

    def parse(self, tokens: Sequence[str]) -> Namespace:
        """
        Parse `tokens` and return the resulting namespace.

        Raises:
            ArgumentError: On any parse failure.
            HelpSignal: If a help option was matched.
        """
        self._seed_defaults()

        while self.pos < len(tokens):
            token = tokens[self.pos]
            if is_option_token(token):
                spec = self.parser.get_optional(token)
                if spec is None:
                    self.unrecognized.append(token)
                    self.pos += 1
                else:
                    self._handle_option(tokens, spec)
            else:
                self._handle_positional(tokens, token)

        self._validate()
        return self.namespace


def parse(parser: ArgumentParser, tokens: Sequence[str]) -> Namespace:
    """
    Parse `tokens` against `parser` with a fresh engine.

    Raises:
        ArgumentError: On any parse failure.
        HelpSignal: If a help option was matched.
    """
    return ParseEngine(parser).parse(list(tokens))
