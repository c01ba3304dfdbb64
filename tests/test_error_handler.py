import json
import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.error_handler import ErrorHandler
from src.integrations.telegram import NotifierError


def test_upstream_failure_hides_detail(caplog):
    eh = ErrorHandler()

    with caplog.at_level(logging.ERROR):
        out = eh.handle_upstream_failure(NotifierError("telegram 401: Unauthorized"))

    assert out.status_code == 502
    assert json.loads(out.body) == {"ok": False, "error": "upstream error"}
    assert "Unauthorized" in caplog.text


def test_unexpected_exception_becomes_500():
    app = FastAPI()
    app.add_exception_handler(Exception, ErrorHandler().handle_exception)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.text == "Internal Server Error"
