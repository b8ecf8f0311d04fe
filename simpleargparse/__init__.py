"""
SimpleArgParse

Copyright (c) 2025 SimpleArgParse contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgumentError,
    InvalidArgumentNameError,
    InvalidChoiceError,
    MissingArgumentsError,
    MissingValueError,
    ParserConfigError,
    SimpleArgParseError,
    UnrecognizedArgumentsError,
)
from .parser import ArgumentAction, ArgumentParser, Namespace, parse
from .signals import ExitSignal, HelpSignal

logger = logging.getLogger("simpleargparse")

__version__ = "0.1.0"

__all__ = [
    "ArgumentAction",
    "ArgumentError",
    "ArgumentParser",
    "ExitSignal",
    "HelpSignal",
    "InvalidArgumentNameError",
    "InvalidChoiceError",
    "MissingArgumentsError",
    "MissingValueError",
    "Namespace",
    "ParserConfigError",
    "SimpleArgParseError",
    "UnrecognizedArgumentsError",
    "parse",
]
