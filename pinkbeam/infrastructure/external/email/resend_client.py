"""Resend transactional email client (HTTP API over httpx)."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx

from pinkbeam.application.dtos.email import EmailMessage
from pinkbeam.domain.exceptions import EmailDeliveryException
from pinkbeam.shared.telemetry.logging import get_logger
from pinkbeam.shared.telemetry.tracing import traced

logger = get_logger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"
DEFAULT_FROM_ADDRESS = "Pink Beam <notifications@pinkbeam.ai>"


class ResendEmailClient:
    """Sends one message per POST to the Resend emails endpoint.

    Without an API key sending is disabled: send_email logs and returns
    False without any network I/O.
    """

    def __init__(
        self,
        api_key: str | None,
        from_address: str = DEFAULT_FROM_ADDRESS,
        api_url: str = RESEND_API_URL,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._from_address = from_address
        self._api_url = api_url
        self._shared_http = http_client
        self._timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    def _payload(self, message: EmailMessage) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "from": self._from_address,
            "to": message.recipients,
            "subject": message.subject,
            "html": message.html,
        }
        if message.reply_to:
            payload["reply_to"] = message.reply_to
        if message.tags:
            payload["tags"] = message.tags
        return payload

    @traced("email.resend.send")
    async def send_email(self, message: EmailMessage) -> bool:
        """POST message to Resend. Raises EmailDeliveryException on a non-2xx reply."""
        if not self._api_key:
            logger.info("RESEND_API_KEY not configured; skipping email %r", message.subject)
            return False
        async with self._http_cm() as client:
            response = await client.post(
                self._api_url,
                json=self._payload(message),
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
        if response.is_success:
            return True
        logger.error(
            "Resend rejected email %r with status %d", message.subject, response.status_code
        )
        raise EmailDeliveryException(response.status_code, response.text)
