"""View workflow orchestration."""

from typing import Any, Dict, List, Optional

from rich.console import Console

from rusend.core.client import ResendClient
from rusend.core.models import EmailKind
from rusend.core.resolution import resolve_id
from rusend.utils.errors import error_context
from rusend.utils.logging import async_log_call, get_logger

from .display import ViewDisplay

logger = get_logger(__name__)

DEFAULT_LIST_COUNT = 10


class ViewWorkflow:
    """Orchestrates listing and showing sent or received emails."""

    def __init__(self, client: ResendClient, console: Optional[Console] = None):
        self.client = client
        self.display = ViewDisplay(console)

    @async_log_call
    async def view_list(
        self, kind: EmailKind = EmailKind.SENT, count: int = DEFAULT_LIST_COUNT
    ) -> List[Dict[str, Any]]:
        """Fetch the default listing and show the first ``count`` entries.

        The limit is applied locally; the service is not asked for a
        page size.
        """
        with error_context(f"list {kind.value} emails failed"):
            if kind is EmailKind.RECEIVED:
                emails = await self.client.list_received_emails()
            else:
                emails = await self.client.list_emails()

        shown = emails[:count]
        self.display.display_list(shown, kind)
        return shown

    @async_log_call
    async def view_single(
        self, kind: EmailKind = EmailKind.SENT, email_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """Show one email; without an id, the newest one."""
        with error_context(f"find newest {kind.value} email"):
            resolved = await resolve_id(self.client, kind, email_id)

        with error_context(f"get {kind.value} email {resolved} failed"):
            if kind is EmailKind.RECEIVED:
                email = await self.client.get_received_email(resolved)
            else:
                email = await self.client.get_email(resolved)

        self.display.display_single(email, kind)
        return email


## Factory functions

async def list_emails(
    client: ResendClient,
    kind: EmailKind = EmailKind.SENT,
    count: int = DEFAULT_LIST_COUNT,
    console: Optional[Console] = None,
) -> bool:
    """List sent or received emails."""
    workflow = ViewWorkflow(client, console)
    await workflow.view_list(kind, count)
    return True


async def view_email(
    client: ResendClient,
    kind: EmailKind = EmailKind.SENT,
    email_id: Optional[str] = None,
    console: Optional[Console] = None,
) -> bool:
    """View one sent or received email."""
    workflow = ViewWorkflow(client, console)
    await workflow.view_single(kind, email_id)
    return True
