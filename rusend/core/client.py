"""Client for the Resend REST API."""

import asyncio
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

import requests

from rusend import __version__
from rusend.utils.errors import NetworkError, ResendAPIError
from rusend.utils.logging import get_logger

from .models import EmailMessage

logger = get_logger(__name__)

API_BASE_URL = "https://api.resend.com"
DEFAULT_TIMEOUT = 30  # seconds


class ResendClient:
    """Async wrapper around the Resend HTTP endpoints.

    Each request runs on a worker thread so the blocking ``requests`` session
    can be awaited from the command workflows.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "User-Agent": f"rusend/{__version__}",
        })

    # Sent emails

    async def send_email(self, message: EmailMessage) -> Dict[str, Any]:
        """Send one email. Returns ``{"id": ...}``."""
        return await self._request("POST", "/emails", message.to_payload())

    async def send_batch(self, messages: Sequence[EmailMessage]) -> Dict[str, Any]:
        """Send up to the service limit of emails in one request."""
        payload = [message.to_payload() for message in messages]
        return await self._request("POST", "/emails/batch", payload)

    async def list_emails(self) -> List[Dict[str, Any]]:
        """List sent emails, newest first, using the service's default page."""
        response = await self._request("GET", "/emails")
        return response.get("data") or []

    async def get_email(self, email_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/emails/{quote(email_id, safe='')}")

    async def update_email(
        self, email_id: str, scheduled_at: Optional[str] = None
    ) -> Dict[str, Any]:
        """Partially update an email; only supplied fields are sent."""
        payload = {}
        if scheduled_at is not None:
            payload["scheduled_at"] = scheduled_at
        return await self._request(
            "PATCH", f"/emails/{quote(email_id, safe='')}", payload
        )

    async def cancel_email(self, email_id: str) -> Dict[str, Any]:
        return await self._request(
            "POST", f"/emails/{quote(email_id, safe='')}/cancel"
        )

    # Received emails

    async def list_received_emails(self) -> List[Dict[str, Any]]:
        response = await self._request("GET", "/emails/receiving")
        return response.get("data") or []

    async def get_received_email(self, email_id: str) -> Dict[str, Any]:
        return await self._request(
            "GET", f"/emails/receiving/{quote(email_id, safe='')}"
        )

    # Transport

    async def _request(self, method: str, path: str, payload: Any = None) -> Dict[str, Any]:
        return await asyncio.to_thread(self._request_sync, method, path, payload)

    def _request_sync(self, method: str, path: str, payload: Any = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method, url, json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise NetworkError(
                f"Request to {url} failed: {e}",
                details={"method": method, "path": path},
            ) from e

        logger.debug(f"{method} {path} -> {response.status_code}")

        if not response.ok:
            raise ResendAPIError(
                _error_message(response),
                details={
                    "status_code": response.status_code,
                    "method": method,
                    "path": path,
                },
            )

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise ResendAPIError(
                f"Invalid JSON in response from {path}",
                details={"status_code": response.status_code},
            ) from e


def _error_message(response: requests.Response) -> str:
    """Best human-readable message from an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        name = body.get("name")
        if message and name:
            return f"{message} ({name}, HTTP {response.status_code})"
        if message:
            return f"{message} (HTTP {response.status_code})"

    text = (response.text or "").strip()
    return f"HTTP {response.status_code}: {text or response.reason}"
