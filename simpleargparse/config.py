# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""config.py
Loads `ArgumentParser` definitions from YAML or TOML files.

A definition file describes one parser and, recursively, its sub-commands:

    prog: tool
    description: Manage files.
    arguments:
      - name: -v
        alias: --verbose
        action: store_true
    subcommands:
      dest: command
      commands:
        add:
          help: Add a file.
          arguments:
            - name: path
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator
from rich.console import Console

from simpleargparse.logger import logger
from simpleargparse.parser.argument_action import ArgumentAction
from simpleargparse.parser.argument_parser import ArgumentParser

MAX_SUBCOMMAND_DEPTH = 16


class RawArgument(BaseModel):
    """Raw argument model for parser definition files."""

    name: str
    alias: str | None = None
    action: ArgumentAction = ArgumentAction.STORE
    default: Any = None
    choices: list[str] | None = None
    required: bool = False
    help: str = ""
    const: Any = None

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, value: Any) -> ArgumentAction:
        if isinstance(value, ArgumentAction):
            return value
        return ArgumentAction(value)

    @field_validator("choices", mode="before")
    @classmethod
    def validate_choices(cls, value: Any) -> list[str] | None:
        if value is None:
            return None
        if isinstance(value, (str, dict)) or not isinstance(value, (list, tuple)):
            raise ValueError("choices must be a list of values.")
        return [str(choice) for choice in value]

    @field_validator("default", mode="before")
    @classmethod
    def validate_default(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        if isinstance(value, (int, float)):
            return str(value)
        return value


class RawCommand(BaseModel):
    """A child parser registered under a command word."""

    help: str = ""
    description: str = ""
    epilog: str = ""
    usage: str | None = None
    arguments: list[RawArgument] = Field(default_factory=list)
    subcommands: RawSubcommands | None = None


class RawSubcommands(BaseModel):
    """The sub-command group of a parser."""

    title: str = ""
    help: str = ""
    dest: str = ""
    commands: dict[str, RawCommand] = Field(default_factory=dict)


class ParserConfig(BaseModel):
    """Top-level parser definition."""

    prog: str | None = None
    usage: str | None = None
    description: str = ""
    epilog: str = ""
    arguments: list[RawArgument] = Field(default_factory=list)
    subcommands: RawSubcommands | None = None

    def to_parser(self, console: Console | None = None) -> ArgumentParser:
        parser = ArgumentParser(
            prog=self.prog,
            usage=self.usage,
            description=self.description,
            epilog=self.epilog,
            console=console,
        )
        build_parser(parser, self.arguments, self.subcommands)
        return parser


RawCommand.model_rebuild()
RawSubcommands.model_rebuild()
ParserConfig.model_rebuild()


def build_parser(
    parser: ArgumentParser,
    arguments: list[RawArgument],
    subcommands: RawSubcommands | None,
    depth: int = 0,
) -> ArgumentParser:
    """Register raw arguments and sub-commands on `parser`, recursing into children."""
    for raw_argument in arguments:
        parser.add_argument(**raw_argument.model_dump())

    if subcommands is None:
        return parser
    if depth >= MAX_SUBCOMMAND_DEPTH:
        raise ValueError(
            f"Maximum sub-command depth exceeded ({MAX_SUBCOMMAND_DEPTH} levels deep)"
        )

    group = parser.add_subparsers(
        title=subcommands.title, help=subcommands.help, dest=subcommands.dest
    )
    for command, raw_command in subcommands.commands.items():
        child = group.add_parser(
            command,
            help=raw_command.help,
            description=raw_command.description,
            epilog=raw_command.epilog,
            usage=raw_command.usage,
        )
        build_parser(child, raw_command.arguments, raw_command.subcommands, depth + 1)
    return parser


def from_dict(
    raw_config: dict[str, Any], console: Console | None = None
) -> ArgumentParser:
    """Build an `ArgumentParser` from an already loaded definition mapping."""
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Parser definition must be a dictionary.\n"
            "Example:\n"
            "prog: 'tool'\n"
            "arguments:\n"
            "  - name: 'file'\n"
            "    help: 'Input file.'"
        )
    return ParserConfig.model_validate(raw_config).to_parser(console=console)


def loader(file_path: Path | str, console: Console | None = None) -> ArgumentParser:
    """
    Load a parser definition from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the definition file.
        console (Console | None): Console handed to the built parsers.

    Returns:
        ArgumentParser: The root parser with all arguments and sub-commands.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is invalid.
        ParserConfigError: If an argument definition is inconsistent.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.debug("Loaded parser definition from '%s'.", path)
    return from_dict(raw_config, console=console)
