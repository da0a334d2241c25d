"""Terminal display backed by rich."""

import sys
from datetime import datetime

from rich.console import Console

from .Display import Display


class CLIDisplay(Display):
    """Status lines go to stderr, the command's message to stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout, highlight=False)
        self.stderr_console = Console(file=sys.stderr, highlight=False)

    def _line(self, marker: str, message: str) -> None:
        self.stderr_console.print(f"[dim]{datetime.now():%H:%M:%S}[/dim] {marker} {message}")

    def status(self, message: str) -> None:
        self._line("[blue]i[/blue]", message)

    def success(self, message: str) -> None:
        self._line("[green]✓[/green]", message)

    def error(self, message: str) -> None:
        self._line("[red]✗[/red]", message)

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def text(self, message: str) -> None:
        # markup off: messages contain backticks and brackets
        self.console.print(message, markup=False, soft_wrap=True, end="" if message.endswith("\n") else "\n")
