"""Resolve an omitted email id to the newest email."""

from typing import Optional

from rusend.utils.errors import NoEmailsAvailableError
from rusend.utils.logging import async_log_call, get_logger

from .client import ResendClient
from .models import EmailKind

logger = get_logger(__name__)


@async_log_call
async def resolve_id(
    client: ResendClient, kind: EmailKind, provided: Optional[str] = None
) -> str:
    """Return ``provided``, or the id of the newest email of ``kind``.

    The service lists newest first; that order is used as-is. No existence
    check is made for a provided id.

    Raises:
        NoEmailsAvailableError: nothing to resolve to.
    """
    if provided:
        return provided

    if kind is EmailKind.RECEIVED:
        emails = await client.list_received_emails()
    else:
        emails = await client.list_emails()

    if not emails:
        raise NoEmailsAvailableError(
            "No emails available", details={"kind": kind.value}
        )

    email_id = emails[0].get("id")
    if not email_id:
        raise NoEmailsAvailableError(
            "Newest email has no id", details={"kind": kind.value}
        )

    logger.info(f"Resolved newest {kind.value} email to {email_id}")
    return email_id
