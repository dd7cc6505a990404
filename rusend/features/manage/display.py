"""Manage display coordinator (uses shared UI components)."""

from typing import Optional

from rich.console import Console

from rusend.ui.components import StatusMessage


class ManageDisplay:
    """Coordinates display for the manage feature."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.message = StatusMessage(console, error_console)

    def show_updated(self, email_id: str) -> None:
        self.message.success(f"Updated email with ID: {email_id}")

    def show_canceled(self, email_id: str) -> None:
        self.message.success(f"Canceled: {email_id}")
