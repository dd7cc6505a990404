"""Email table display component."""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rusend.utils.console import get_console


def format_recipients(value: Any) -> str:
    """Render a recipient field that may be a list or a string."""
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


class EmailTable:
    """Reusable email list table.

    Used by: list and received-list.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def display(self, emails: List[Dict[str, Any]], title: str = "Emails") -> None:
        if not emails:
            self.console.print("[yellow]No emails to display[/yellow]")
            return

        table = Table(title=title)
        table.add_column("ID", style="cyan", overflow="fold")
        table.add_column("Created", style="yellow", no_wrap=True)
        table.add_column("From", style="magenta")
        table.add_column("To", style="blue")
        table.add_column("Subject", style="green")

        for email in emails:
            row = [
                str(email.get("id", "N/A")),
                str(email.get("created_at", "")),
                str(email.get("from", "")),
                format_recipients(email.get("to")),
                self._truncate(str(email.get("subject") or ""), 60),
            ]
            table.add_row(*(escape(cell) for cell in row))

        self.console.print(table)

    @staticmethod
    def _truncate(text: str, max_length: int) -> str:
        if len(text) <= max_length:
            return text
        return text[: max_length - 3] + "..."
