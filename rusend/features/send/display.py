"""Send display coordinator (uses shared UI components)."""

from typing import Any, Dict, List, Optional

from rich.console import Console

from rusend.ui.components import StatusMessage


class SendDisplay:
    """Coordinates display for the send feature."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.message = StatusMessage(console, error_console)

    def show_sent(self, result: Dict[str, Any], scheduled_at: Optional[str] = None) -> None:
        email_id = result.get("id", "unknown")
        if scheduled_at:
            self.message.success(f"Email {email_id} scheduled for {scheduled_at}.")
        else:
            self.message.success(f"Send request submitted. ID: {email_id}")

    def show_batch_sent(self, result: Dict[str, Any]) -> None:
        entries: List[Dict[str, Any]] = result.get("data") or []
        self.message.success(f"Batch send request submitted ({len(entries)} emails).")
        for entry in entries:
            self.message.info(f"  {entry.get('id', 'unknown')}")
