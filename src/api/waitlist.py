import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from src.api.dependencies import get_error_handler, get_notifier, get_settings
from src.error_handler import ErrorHandler
from src.forms.validation import (
    BodyReadTimeoutError,
    FormValidationError,
    PayloadTooLargeError,
    compose_message,
    is_spam,
    parse_form_body,
    read_limited_body,
    validate_submission,
)
from src.integrations.telegram import NotifierError, TelegramNotifier
from src.utils.config_loader import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _text(message: str, status_code: int, close: bool = False) -> PlainTextResponse:
    headers = {"Connection": "close"} if close else None
    return PlainTextResponse(message, status_code=status_code, headers=headers)


def _declared_length(request: Request) -> int:
    try:
        return int(request.headers.get("content-length", "0"))
    except ValueError:
        return 0


@router.post("/waitlist", tags=["Waitlist"])
async def submit_waitlist(
    request: Request,
    settings: Settings = Depends(get_settings),
    notifier: TelegramNotifier = Depends(get_notifier),
    error_handler: ErrorHandler = Depends(get_error_handler),
):
    """
    Accept a waitlist signup and forward it to the team's Telegram chat.
    """
    content_type = (request.headers.get("content-type") or "").lower()
    if not content_type.startswith(FORM_CONTENT_TYPE):
        return _text("Unsupported Media Type", status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    # Oversized bodies are cut off before the rest is read; Connection: close
    # makes the server drop the socket instead of draining it.
    if _declared_length(request) > settings.max_body_bytes:
        return _text("Payload Too Large", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, close=True)
    try:
        body = await read_limited_body(
            request.stream(),
            settings.max_body_bytes,
            timeout=settings.body_read_timeout_seconds,
        )
    except PayloadTooLargeError:
        return _text("Payload Too Large", status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, close=True)
    except BodyReadTimeoutError:
        return _text("Request Timeout", status.HTTP_408_REQUEST_TIMEOUT, close=True)

    form = parse_form_body(body)

    if is_spam(form):
        logger.info("honeypot triggered, dropping submission")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    try:
        submission = validate_submission(form)
    except FormValidationError as e:
        logger.info("rejected waitlist submission: %s", ", ".join(sorted(e.field_errors)))
        return _text(e.message, status.HTTP_400_BAD_REQUEST)

    if not settings.notifier_configured:
        return _text("Server not configured", status.HTTP_500_INTERNAL_SERVER_ERROR)

    message = compose_message(submission, settings.site_name)
    try:
        await notifier.send(message)
    except NotifierError as e:
        return error_handler.handle_upstream_failure(e)

    return JSONResponse({"ok": True}, status_code=status.HTTP_200_OK)
