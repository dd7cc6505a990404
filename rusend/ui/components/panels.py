"""Panels for a single email and the saved configuration."""

from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rusend.utils.console import get_console

from .tables import format_recipients

EMPTY_BODY_MARKER = "(empty)"


def describe_body(email: Dict[str, Any]) -> str:
    """Pick the body to print: text first, then an HTML-only note, else empty."""
    text = email.get("text")
    if text:
        return text

    html = email.get("html")
    if html:
        return f"[HTML content only, {len(html)} characters; no plain-text body]"

    return EMPTY_BODY_MARKER


class EmailPanel:
    """Display a single email as header and body panels.

    Used by: get and received-get.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def display(self, email: Dict[str, Any], title: str = "Email") -> None:
        header = Table(show_header=False, box=None, padding=(0, 1))
        header.add_column(style="bold", no_wrap=True)
        header.add_column(overflow="fold")

        for label, value in self._header_rows(email):
            header.add_row(label, Text(value))

        self.console.print(Panel(
            header,
            title=f"[bold]{title}[/bold]",
            border_style="cyan",
            padding=(0, 1),
        ))

        body = describe_body(email)
        self.console.print(Panel(
            Text(body, style="italic dim" if body == EMPTY_BODY_MARKER else ""),
            title="[bold]Body[/bold]",
            border_style="cyan dim",
            padding=(0, 1),
        ))

    @staticmethod
    def _header_rows(email: Dict[str, Any]) -> List[Tuple[str, str]]:
        rows = [
            ("ID:", str(email.get("id", ""))),
            ("Created:", str(email.get("created_at", ""))),
            ("From:", str(email.get("from", ""))),
            ("To:", format_recipients(email.get("to"))),
        ]

        for label, key in (("Cc:", "cc"), ("Bcc:", "bcc"), ("Reply-To:", "reply_to")):
            if email.get(key):
                rows.append((label, format_recipients(email[key])))

        rows.append(("Subject:", str(email.get("subject") or "")))

        if email.get("last_event"):
            rows.append(("Status:", str(email["last_event"])))
        if email.get("scheduled_at"):
            rows.append(("Scheduled:", str(email["scheduled_at"])))

        return rows


class ConfigPanel:
    """Summary of the stored configuration.

    Used by: config.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def display(self, rows: List[Tuple[str, str]], title: str = "Configuration") -> None:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(style="bold", no_wrap=True)
        table.add_column(overflow="fold")

        for label, value in rows:
            table.add_row(label, Text(value))

        self.console.print(Panel(table, title=f"[bold]{title}[/bold]", border_style="green"))
