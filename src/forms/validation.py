"""Backend handling for waitlist form submissions.

The landing page posts the waitlist form as `application/x-www-form-urlencoded`.
These helpers read the body under a hard size cap, decode it, apply the honeypot
check, and validate the required fields.

On validation failure, raise `FormValidationError` so the API can return HTTP 400.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional
from urllib.parse import parse_qsl

HONEYPOT_FIELD = "hp_field"
REQUIRED_FIELDS = ("name", "email", "company", "phone", "desc")


@dataclass
class FormValidationError(Exception):
    """Exception raised for form validation failures.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: top-level message returned to the client.
    """

    field_errors: Dict[str, str]
    message: str = "Missing required fields"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class PayloadTooLargeError(Exception):
    def __init__(self, limit: int) -> None:
        super().__init__(f"request body exceeds {limit} bytes")
        self.limit = limit


class BodyReadTimeoutError(Exception):
    pass


@dataclass(frozen=True)
class WaitlistSubmission:
    name: str
    email: str
    company: str
    phone: str
    desc: str


async def read_limited_body(
    chunks: AsyncIterator[bytes],
    limit: int,
    *,
    timeout: Optional[float] = None,
) -> bytes:
    """Accumulate a request body, giving up as soon as it grows past `limit`.

    Raises PayloadTooLargeError without consuming the rest of the stream, and
    BodyReadTimeoutError when a chunk takes longer than `timeout` seconds.
    """
    body = bytearray()
    iterator = chunks.__aiter__()
    while True:
        try:
            chunk = await asyncio.wait_for(iterator.__anext__(), timeout)
        except StopAsyncIteration:
            break
        except asyncio.TimeoutError:
            raise BodyReadTimeoutError(f"no body data within {timeout}s")
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(limit)
    return bytes(body)


def parse_form_body(body: bytes) -> Dict[str, str]:
    """Decode an urlencoded body. For repeated keys the first value wins."""
    text = body.decode("utf-8", errors="replace")
    form: Dict[str, str] = {}
    for key, value in parse_qsl(text, keep_blank_values=True):
        form.setdefault(key, value)
    return form


def is_spam(form: Dict[str, Any]) -> bool:
    # hidden input; humans leave it empty
    return bool(form.get(HONEYPOT_FIELD))


def _strip(v: Any) -> str:
    return "" if v is None else str(v).strip()


def validate_submission(form: Dict[str, Any]) -> WaitlistSubmission:
    errors: Dict[str, str] = {}
    values: Dict[str, str] = {}
    for field in REQUIRED_FIELDS:
        value = _strip(form.get(field))
        if not value:
            errors[field] = f"{field} is required"
        values[field] = value
    if errors:
        raise FormValidationError(errors)
    return WaitlistSubmission(**values)


def escape_text(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def compose_message(submission: WaitlistSubmission, site_name: str) -> str:
    """Build the notification text. Every submitted value is escaped."""
    return (
        f"🆕 New waitlist signup ({site_name})\n"
        f"👤 Name: {escape_text(submission.name)}\n"
        f"📧 Email: {escape_text(submission.email)}\n"
        f"🏢 Company: {escape_text(submission.company)}\n"
        f"📞 Phone: {escape_text(submission.phone)}\n"
        f"📝 Use case:\n{escape_text(submission.desc)}"
    )
