"""Pytest fixtures for static serving, the waitlist endpoint and the notifier."""

import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.integrations.telegram import TelegramNotifier
from src.utils.config_loader import Settings


class FakeTelegramAPI:
    """Stands in for api.telegram.org and records every request it receives."""

    def __init__(self, status_code: int = 200, body: str = '{"ok":true,"result":{}}', error=None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / "public"
    (root / "css").mkdir(parents=True)
    (root / "img").mkdir()
    (root / "index.html").write_text("<!doctype html><title>Waitlist</title>", encoding="utf-8")
    (root / "css" / "site.css").write_text("body { margin: 0; }", encoding="utf-8")
    (root / "img" / "logo.PNG").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "data.bin").write_bytes(b"\x00\x01\x02")
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    return root


@pytest.fixture
def settings(static_root):
    return Settings(
        static_dir=static_root,
        telegram_token="TOKEN",
        telegram_chat_id="12345",
        site_name="nsin.ir",
    )


@pytest.fixture
def telegram_api():
    return FakeTelegramAPI()


def build_client(settings: Settings, telegram_api: FakeTelegramAPI) -> TestClient:
    notifier = TelegramNotifier(
        token=settings.telegram_token,
        chat_id=settings.telegram_chat_id,
        api_base=settings.telegram_api_base,
        timeout_seconds=settings.notify_timeout_seconds,
        transport=telegram_api.transport,
    )
    return TestClient(create_app(settings, notifier=notifier))


@pytest.fixture
def client(settings, telegram_api):
    return build_client(settings, telegram_api)


@pytest.fixture
def make_client():
    return build_client
