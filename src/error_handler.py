"""Error handling helpers for the waitlist server."""
from typing import Any, Dict
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_PAYLOAD: Dict[str, Any] = {"ok": False, "error": "upstream error"}


class ErrorHandler:
    def handle_upstream_failure(self, exc: Exception) -> JSONResponse:
        # the detail stays in the server log; clients only get the generic payload
        logger.error("telegram error: %s", exc)
        return JSONResponse(dict(UPSTREAM_ERROR_PAYLOAD), status_code=status.HTTP_502_BAD_GATEWAY)

    async def handle_exception(self, request: Request, exc: Exception) -> PlainTextResponse:
        logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
