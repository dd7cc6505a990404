"""View display coordinator (uses shared UI components)."""

from typing import Any, Dict, List, Optional

from rich.console import Console

from rusend.core.models import EmailKind
from rusend.ui.components import EmailPanel, EmailTable


class ViewDisplay:
    """Coordinates display for the view feature."""

    def __init__(self, console: Optional[Console] = None):
        self.table = EmailTable(console)
        self.panel = EmailPanel(console)

    def display_list(self, emails: List[Dict[str, Any]], kind: EmailKind) -> None:
        self.table.display(emails, title=kind.label)

    def display_single(self, email: Dict[str, Any], kind: EmailKind) -> None:
        title = "Received email" if kind is EmailKind.RECEIVED else "Sent email"
        self.panel.display(email, title=title)
