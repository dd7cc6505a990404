"""Send workflow orchestration."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from rich.console import Console

from rusend.core.client import ResendClient
from rusend.core.models import EmailMessage
from rusend.core.validation import parse_addresses
from rusend.utils.config_manager import AppConfig
from rusend.utils.errors import (
    InvalidBatchFileError,
    MissingRequiredFieldError,
    error_context,
)
from rusend.utils.logging import async_log_call, get_logger

from .batch import load_batch_file
from .display import SendDisplay

logger = get_logger(__name__)

FORWARD_PREFIX = "Fwd: "


@dataclass
class SendOptions:
    """Values given on the send command line."""

    sender: Optional[str] = None
    to: Optional[str] = None
    subject: Optional[str] = None
    html: Optional[str] = None
    text: Optional[str] = None
    from_stdin: bool = False
    forward_id: Optional[str] = None
    cc: Optional[str] = None
    bcc: Optional[str] = None
    reply_to: Optional[str] = None
    scheduled_at: Optional[str] = None

    @classmethod
    def from_args(cls, args: Dict[str, Any]) -> "SendOptions":
        return cls(
            sender=args.get("sender"),
            to=args.get("to"),
            subject=args.get("subject"),
            html=args.get("html"),
            text=args.get("text"),
            from_stdin=bool(args.get("from_stdin", False)),
            forward_id=args.get("forward_id"),
            cc=args.get("cc"),
            bcc=args.get("bcc"),
            reply_to=args.get("reply_to"),
            scheduled_at=args.get("scheduled_at"),
        )


class SendWorkflow:
    """Builds outbound messages and submits them."""

    def __init__(
        self,
        client: ResendClient,
        config: Optional[AppConfig] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
    ):
        self.client = client
        self.config = config or AppConfig()
        self.stdin = stdin
        self.display = SendDisplay(console, error_console)

    async def build_message(self, options: SendOptions) -> EmailMessage:
        """Resolve addresses, subject and body into one message.

        Flags win over configured defaults, field by field.

        Raises:
            MissingRequiredFieldError: no sender, recipients or subject
        """
        sender = options.sender or self.config.default_from
        if not sender or not sender.strip():
            raise MissingRequiredFieldError(
                "No sender: pass --from or set one with `rusend config --default-from`"
            )

        recipients = parse_addresses(options.to or self.config.default_to)
        if not recipients:
            raise MissingRequiredFieldError(
                "No recipients: pass --to or set one with `rusend config --default-to`"
            )

        subject = options.subject
        html = None
        text = None

        if options.forward_id:
            with error_context(f"fetch received email {options.forward_id}"):
                original = await self.client.get_received_email(options.forward_id)
            html = original.get("html")
            text = original.get("text")
            if not subject:
                subject = FORWARD_PREFIX + (original.get("subject") or "")
        else:
            if not subject:
                raise MissingRequiredFieldError("Subject is required (pass --subject)")

            if options.from_stdin:
                html = self._read_stdin()
            elif options.html is not None:
                html = options.html
            elif options.text is not None:
                text = options.text

        return EmailMessage(
            sender=sender.strip(),
            to=recipients,
            subject=subject,
            html=html,
            text=text,
            cc=parse_addresses(options.cc) or None,
            bcc=parse_addresses(options.bcc) or None,
            reply_to=parse_addresses(options.reply_to) or None,
            scheduled_at=options.scheduled_at,
        )

    def _read_stdin(self) -> str:
        stream = self.stdin if self.stdin is not None else sys.stdin
        with error_context("stdin read"):
            return stream.read()

    @async_log_call
    async def send(self, options: SendOptions) -> Dict[str, Any]:
        message = await self.build_message(options)

        with error_context("send failed"):
            result = await self.client.send_email(message)

        logger.info(f"Sent email {result.get('id')} to {len(message.to)} recipients")
        self.display.show_sent(result, message.scheduled_at)
        return result

    @async_log_call
    async def send_batch(self, path: Path) -> Dict[str, Any]:
        """Validate the whole batch file, then submit it as one request."""
        messages = load_batch_file(path)
        if not messages:
            raise InvalidBatchFileError(f"Batch file {path} contains no messages")

        with error_context("batch send failed"):
            result = await self.client.send_batch(messages)

        logger.info(f"Batch of {len(messages)} emails submitted")
        self.display.show_batch_sent(result)
        return result


## Factory functions

async def send_email(
    config: AppConfig,
    client: ResendClient,
    options: SendOptions,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
    stdin: Optional[TextIO] = None,
) -> bool:
    """Send (or forward) one email."""
    workflow = SendWorkflow(client, config, console, error_console, stdin)
    await workflow.send(options)
    return True


async def send_batch(
    client: ResendClient,
    path: Path,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> bool:
    """Send every message in a batch file."""
    workflow = SendWorkflow(client, console=console, error_console=error_console)
    await workflow.send_batch(path)
    return True
