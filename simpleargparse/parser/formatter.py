# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""
Usage and help text for `ArgumentParser`.

`HelpFormatter` only reads parser metadata. `format_usage()` and `format_help()`
return plain strings; `render()` prints the same content through Rich with bold
section headings.

Usage lists every optional argument first (non-required ones in brackets), then
every positional argument, then the sub-command group, each in declaration order:

    [-h] [-c COUNT] [-v] file {add,remove} ...
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from simpleargparse.parser.argument import Argument
from simpleargparse.parser.subparsers import Subparsers

if TYPE_CHECKING:
    from simpleargparse.parser.argument_parser import ArgumentParser

HELP_OFFSET = 24


class HelpFormatter:
    """Builds usage lines and column-aligned help listings for a parser."""

    def __init__(self, parser: ArgumentParser, help_offset: int = HELP_OFFSET) -> None:
        self.parser = parser
        self.help_offset = help_offset

    def format_usage(self) -> str:
        """Return the usage line without the `usage: <prog>` prefix."""
        if self.parser.usage:
            return self.parser.usage
        parts = []
        for arg in self.parser.optional_arguments:
            parts.append(arg.usage if arg.required else f"[{arg.usage}]")
        for arg in self.parser.positional_slots:
            if isinstance(arg, Subparsers):
                parts.append(f"{arg.usage} ...")
            else:
                parts.append(arg.usage)
        return " ".join(parts)

    def format_entry(self, label: str, help_text: str, indent: int = 2) -> str:
        """Format one help row, moving the help text down when the label is long."""
        line = " " * indent + label
        if not help_text:
            return line
        if len(line) >= self.help_offset - 1:
            return f"{line}\n{' ' * self.help_offset}{help_text}"
        return f"{line:<{self.help_offset}}{help_text}"

    def _argument_entry(self, arg: Argument) -> str:
        return self.format_entry(arg.display_name, arg.help)

    def _command_entries(self, group: Subparsers) -> list[str]:
        entries = [self._argument_entry(group)]
        for command, help_text in group.command_help.items():
            entries.append(self.format_entry(command, help_text, indent=4))
        return entries

    def sections(self) -> list[tuple[str, list[str]]]:
        """Return `(heading, entries)` pairs for the body of the help text."""
        sections: list[tuple[str, list[str]]] = []
        group = self.parser.subparsers

        positional = [
            self._argument_entry(arg) for arg in self.parser.positional_arguments
        ]
        if group is not None and not group.title:
            positional.extend(self._command_entries(group))
        if positional:
            sections.append(("positional arguments:", positional))

        if group is not None and group.title:
            sections.append((f"{group.title}:", self._command_entries(group)))

        options = [self._argument_entry(arg) for arg in self.parser.optional_arguments]
        if options:
            sections.append(("options:", options))
        return sections

    def format_help(self) -> str:
        """Return the full help text: usage, description, sections and epilog."""
        blocks = [f"usage: {self.parser.prog} {self.format_usage()}"]
        if self.parser.description:
            blocks.append(self.parser.description)
        for heading, entries in self.sections():
            blocks.append("\n".join([heading, *entries]))
        if self.parser.epilog:
            blocks.append(self.parser.epilog)
        return "\n\n".join(blocks) + "\n"

    def render(self, console: Console) -> None:
        """Print the help text through Rich."""
        console.print(
            f"[bold]usage:[/bold] {escape(self.parser.prog)} "
            f"{escape(self.format_usage())}\n",
            soft_wrap=True,
        )
        if self.parser.description:
            console.print(escape(self.parser.description) + "\n", soft_wrap=True)
        for heading, entries in self.sections():
            console.print(f"[bold]{escape(heading)}[/bold]")
            for entry in entries:
                console.print(escape(entry), soft_wrap=True, highlight=False)
            console.print()
        if self.parser.epilog:
            console.print(escape(self.parser.epilog), style="dim", soft_wrap=True)
