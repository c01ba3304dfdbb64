from fastapi import Request

from src.api.static_files import StaticFileServer
from src.error_handler import ErrorHandler
from src.integrations.telegram import TelegramNotifier
from src.utils.config_loader import Settings


# Components are built once in create_app() and parked on app.state.


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_static_server(request: Request) -> StaticFileServer:
    return request.app.state.static_server


def get_notifier(request: Request) -> TelegramNotifier:
    return request.app.state.notifier


def get_error_handler(request: Request) -> ErrorHandler:
    return request.app.state.error_handler
