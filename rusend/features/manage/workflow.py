"""Email management workflow orchestration."""

from typing import Any, Dict, Optional

from rich.console import Console

from rusend.core.client import ResendClient
from rusend.utils.errors import ValidationError, error_context
from rusend.utils.logging import async_log_call, get_logger

from .display import ManageDisplay

logger = get_logger(__name__)


class ManageWorkflow:
    """Orchestrates update and cancel of scheduled emails."""

    def __init__(
        self,
        client: ResendClient,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.client = client
        self.display = ManageDisplay(console, error_console)

    @async_log_call
    async def update(self, email_id: str, scheduled_at: Optional[str] = None) -> Dict[str, Any]:
        """Apply the supplied fields only.

        Raises:
            ValidationError: nothing to update
        """
        if scheduled_at is None:
            raise ValidationError(
                "Nothing to update: pass --scheduled-at",
                details={"email_id": email_id},
            )

        with error_context("update failed"):
            result = await self.client.update_email(email_id, scheduled_at=scheduled_at)

        self.display.show_updated(result.get("id") or email_id)
        return result

    @async_log_call
    async def cancel(self, email_id: str) -> Dict[str, Any]:
        with error_context("cancel failed"):
            result = await self.client.cancel_email(email_id)

        self.display.show_canceled(result.get("id") or email_id)
        return result


## Factory functions

async def update_email(
    client: ResendClient,
    email_id: str,
    scheduled_at: Optional[str] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> bool:
    workflow = ManageWorkflow(client, console, error_console)
    await workflow.update(email_id, scheduled_at)
    return True


async def cancel_email(
    client: ResendClient,
    email_id: str,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> bool:
    workflow = ManageWorkflow(client, console, error_console)
    await workflow.cancel(email_id)
    return True
