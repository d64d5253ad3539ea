"""Tests for structured logging setup and request context."""

import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from finance_api.core.logging import REQUEST_ID_HEADER, install_request_context, setup_logging


class TestStructuredLogging:
    def test_setup_logging_configures_structlog(self):
        setup_logging(log_level="DEBUG", json_output=True)
        logger = structlog.get_logger()
        assert logger is not None

    def test_setup_logging_dev_mode(self):
        setup_logging(log_level="DEBUG", json_output=False)
        logger = structlog.get_logger()
        assert logger is not None


class TestRequestContext:
    def _app(self):
        app = FastAPI()
        install_request_context(app)

        @app.get("/echo")
        async def echo():
            return {"ok": True}

        return app

    def test_response_carries_generated_request_id(self):
        client = TestClient(self._app())
        response = client.get("/echo")
        assert response.status_code == 200
        assert len(response.headers[REQUEST_ID_HEADER]) == 32

    def test_incoming_request_id_is_kept(self):
        client = TestClient(self._app())
        response = client.get("/echo", headers={REQUEST_ID_HEADER: "abc-123"})
        assert response.headers[REQUEST_ID_HEADER] == "abc-123"
