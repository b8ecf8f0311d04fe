# SimpleArgParse — (c) 2025 SimpleArgParse contributors — MIT Licensed
"""Global console instances for SimpleArgParse output."""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
