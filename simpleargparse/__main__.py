"""
SimpleArgParse

Copyright (c) 2025 SimpleArgParse contributors.
Licensed under the MIT License. See LICENSE file for details.

Reference command line: load a parser definition file, parse the tokens after
`--` with it and print the resulting namespace.

    simpleargparse tool.yaml -- add notes.txt --force
"""

import logging
import sys
from typing import Sequence

from rich.markup import escape

from simpleargparse.config import loader
from simpleargparse.console import console, error_console
from simpleargparse.exceptions import SimpleArgParseError
from simpleargparse.logger import logger
from simpleargparse.parser import ArgumentParser, Namespace
from simpleargparse.signals import ExitSignal
from simpleargparse.utils import setup_logging

EXIT_CONFIG_ERROR = 1


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="simpleargparse",
        usage="[-h] [-v] [--json] [--log-file LOG_FILE] config [-- TOKENS ...]",
        description="Parse TOKENS with the parser defined in a YAML or TOML file.",
        epilog="Tokens after '--' are handed to the loaded parser unchanged.",
    )
    parser.add_argument("config", help="Path to the parser definition file.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the namespace as JSON."
    )
    parser.add_argument("--log-file", help="Also write debug logs to this file.")
    return parser


def split_tokens(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first `--` into own arguments and forwarded tokens."""
    argv = list(argv)
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1 :]
    return argv, []


def print_namespace(namespace: Namespace, as_json: bool = False) -> None:
    if as_json:
        console.print_json(data=namespace.as_dict(), default=str)
    else:
        console.print(repr(namespace), soft_wrap=True, markup=False)


def run(argv: Sequence[str] | None = None) -> int:
    """Run the reference command line and return its exit code."""
    own_args, tokens = split_tokens(sys.argv[1:] if argv is None else argv)
    try:
        cli_args = get_parser().parse_args(own_args)
        setup_logging(
            log_filename=cli_args["log-file"],
            console_log_level=logging.DEBUG if cli_args.verbose else logging.WARNING,
        )
        if cli_args.verbose:
            logging.getLogger("simpleargparse").setLevel(logging.DEBUG)
        try:
            target = loader(cli_args.config)
        except (FileNotFoundError, TypeError, ValueError, SimpleArgParseError) as error:
            logger.debug("Failed to load '%s'.", cli_args.config, exc_info=True)
            error_console.print(
                f"[bold red]error:[/bold red] could not load "
                f"{escape(repr(cli_args.config))}: {escape(str(error))}",
                highlight=False,
            )
            return EXIT_CONFIG_ERROR
        namespace = target.parse_args(tokens)
    except ExitSignal as signal:
        return signal.code
    print_namespace(namespace, as_json=cli_args.json)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
