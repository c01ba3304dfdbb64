"""
Telegram Bot API notifier.

Used by the waitlist endpoint to push each accepted signup to a fixed chat.
Each call is a single best-effort POST to `sendMessage`; there is no retry and
no queue, the caller decides what the visitor sees on failure.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote, urlencode

import httpx
import logging

logger = logging.getLogger(__name__)


class NotifierError(Exception):
    """Raised when the upstream messaging API did not accept the message."""


class TelegramNotifier:
    def __init__(
        self,
        token: str,
        chat_id: str,
        api_base: str = "https://api.telegram.org",
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.token = token
        self.chat_id = chat_id
        self.api_base = api_base.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def send_url(self) -> str:
        return f"{self.api_base}/bot{self.token}/sendMessage"

    def _encode(self, text: str) -> str:
        # spaces become %20, as in a query string
        return urlencode(
            {
                "chat_id": self.chat_id,
                "text": text,
                "disable_web_page_preview": "true",
            },
            quote_via=quote,
        )

    async def send(self, text: str) -> str:
        """
        Deliver `text` to the configured chat.

        Returns the raw response body on a 2xx answer, raises NotifierError otherwise.
        """
        body = self._encode(text)
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(self.send_url, content=body, headers=headers)
        except httpx.TimeoutException:
            raise NotifierError("timeout")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NotifierError(str(e) or type(e).__name__)

        if not 200 <= response.status_code < 300:
            raise NotifierError(f"telegram {response.status_code}: {response.text}")

        logger.debug("telegram accepted message for chat %s", self.chat_id)
        return response.text
