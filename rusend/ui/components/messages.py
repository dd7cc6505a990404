"""Simple status messages (no panels)."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from rusend.utils.console import get_console, get_error_console


class StatusMessage:
    """Simple status messages without panels.

    Errors and warnings go to the error console so stdout stays clean for
    piping.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.console = console or get_console()
        self.error_console = error_console or get_error_console()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def error(self, message: str) -> None:
        self.error_console.print(f"[red]Error: {escape(message)}[/red]")

    def warning(self, message: str) -> None:
        self.error_console.print(f"[yellow]Warning: {escape(message)}[/yellow]")

    def info(self, message: str) -> None:
        self.console.print(escape(message))
