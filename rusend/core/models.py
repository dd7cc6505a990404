"""Request models for outgoing email."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EmailKind(Enum):
    """Which side of the mailbox a record lives on."""

    SENT = "sent"
    RECEIVED = "received"

    @property
    def label(self) -> str:
        return "Sent emails" if self is EmailKind.SENT else "Received emails"


class EmailMessage(BaseModel):
    """One outbound message as submitted to the service."""

    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(alias="from")
    to: List[str]
    subject: str
    html: Optional[str] = None
    text: Optional[str] = None
    cc: Optional[List[str]] = None
    bcc: Optional[List[str]] = None
    reply_to: Optional[List[str]] = None
    scheduled_at: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation; unset optional fields are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class BatchEmailInput(BaseModel):
    """One element of a batch input file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sender: str = Field(alias="from")
    to: List[str]
    subject: str
    html: Optional[str] = None
    text: Optional[str] = None

    def to_message(self) -> EmailMessage:
        return EmailMessage(
            sender=self.sender,
            to=list(self.to),
            subject=self.subject,
            html=self.html,
            text=self.text,
        )
