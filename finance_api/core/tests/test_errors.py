"""Tests for RFC 7807 error handling."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from finance_api.core.errors import (
    AggregationFailedError,
    InvalidIdentifierError,
    NotFoundError,
    StoreUnavailableError,
    register_error_handlers,
)


class Payload(BaseModel):
    amount: float


@pytest.fixture
def error_app():
    """Create a test app with error handlers registered."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/test/not-found")
    async def raise_not_found():
        raise NotFoundError("Finance record xyz not found")

    @app.get("/test/invalid-id")
    async def raise_invalid_id():
        raise InvalidIdentifierError("Invalid finance id: 'xyz'")

    @app.get("/test/store-down")
    async def raise_store_down():
        raise StoreUnavailableError()

    @app.get("/test/aggregation")
    async def raise_aggregation():
        raise AggregationFailedError("Error fetching finance stats")

    @app.post("/test/body")
    async def accept_body(payload: Payload):
        return payload

    @app.get("/test/unhandled")
    async def raise_unhandled():
        raise RuntimeError("Unexpected crash")

    return app


@pytest.fixture
def client(error_app):
    return TestClient(error_app, raise_server_exceptions=False)


class TestRFC7807ErrorFormat:
    """All errors should return RFC 7807 Problem Details format."""

    def test_not_found_returns_rfc7807(self, client):
        response = client.get("/test/not-found")
        assert response.status_code == 404
        body = response.json()
        assert body["type"] == "about:blank"
        assert body["title"] == "Not Found"
        assert body["status"] == 404
        assert body["detail"] == "Finance record xyz not found"
        assert body["instance"] == "/test/not-found"

    def test_invalid_identifier_is_bad_request(self, client):
        response = client.get("/test/invalid-id")
        assert response.status_code == 400
        assert response.json()["title"] == "Bad Request"

    def test_store_unavailable_is_503(self, client):
        response = client.get("/test/store-down")
        assert response.status_code == 503
        assert response.json()["detail"] == "Record store unavailable"

    def test_aggregation_failure_is_500_with_message(self, client):
        response = client.get("/test/aggregation")
        assert response.status_code == 500
        assert response.json()["detail"] == "Error fetching finance stats"

    def test_malformed_json_is_problem_detail(self, client):
        response = client.post(
            "/test/body",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422
        body = response.json()
        assert body["title"] == "Unprocessable Entity"
        assert body["instance"] == "/test/body"

    def test_unknown_route_uses_problem_detail(self, client):
        response = client.get("/test/missing")
        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"

    def test_unhandled_error_returns_rfc7807(self, client):
        response = client.get("/test/unhandled")
        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Internal Server Error"
        assert body["detail"] == "An unexpected error occurred"
