"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from typing import Optional

from fastapi import Depends, FastAPI, Request

from src.api.dependencies import get_static_server
from src.api.static_files import StaticFileServer
from src.api.waitlist import router as waitlist_router
from src.error_handler import ErrorHandler
from src.integrations.telegram import TelegramNotifier
from src.utils.config_loader import Settings, load_settings

# Setup logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO")
logger = logging.getLogger(__name__)

STATIC_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _request_path(request: Request) -> str:
    # raw_path keeps the percent-encoding the client sent
    raw = request.scope.get("raw_path")
    if raw:
        return raw.decode("latin-1")
    return request.url.path


def create_app(settings: Optional[Settings] = None, notifier: Optional[TelegramNotifier] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="Waitlist Site Server",
        description="Static site plus waitlist signups forwarded to Telegram",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # ========================================================================
    # DEPENDENCY INJECTION
    # ========================================================================

    error_handler = ErrorHandler()
    app.state.settings = settings
    app.state.static_server = StaticFileServer(settings.static_dir)
    app.state.notifier = notifier or TelegramNotifier(
        token=settings.telegram_token,
        chat_id=settings.telegram_chat_id,
        api_base=settings.telegram_api_base,
        timeout_seconds=settings.notify_timeout_seconds,
    )
    app.state.error_handler = error_handler
    app.add_exception_handler(Exception, error_handler.handle_exception)

    # Waitlist first so POST /waitlist never reaches the static catch-all
    app.include_router(waitlist_router)

    @app.api_route("/{path:path}", methods=STATIC_METHODS, include_in_schema=False)
    async def static_files(request: Request, server: StaticFileServer = Depends(get_static_server)):
        return server.serve(_request_path(request))

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = app.state.settings
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info("waitlist server listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
