"""
SimpleArgParse

Copyright (c) 2025 SimpleArgParse contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .argument_action import ArgumentAction
from .argument_parser import ArgumentParser
from .engine import ParseEngine, parse
from .formatter import HelpFormatter
from .namespace import Namespace
from .subparsers import Subparsers

__all__ = [
    "Argument",
    "ArgumentAction",
    "ArgumentParser",
    "HelpFormatter",
    "Namespace",
    "ParseEngine",
    "Subparsers",
    "parse",
]
