"""
Tests for the HTTP transport.

Uses FastAPI's TestClient against an app wired to the sample documents
and a fake database pool.
"""

import importlib
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from cgov_mcp import server
from cgov_mcp.config import Settings
from cgov_mcp.db import DatabasePool
from cgov_mcp.server import create_app, init_error_tracking

from .conftest import FakePool


@pytest.fixture
def pool() -> FakePool:
    return FakePool(rows=[{"table_name": "dreps"}])


@pytest.fixture
def client(documents_dir: Path, pool: FakePool):
    settings = Settings(_env_file=None, documents_dir=documents_dir)
    with TestClient(create_app(settings, pool)) as client:
        yield client


def rpc(method: str, params: dict | None = None, id: int = 1) -> dict:
    return {"jsonrpc": "2.0", "id": id, "method": method, "params": params or {}}


class TestHealth:
    """Tests for informational endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["server"] == "cgov-mcp"

    def test_root(self, client: TestClient) -> None:
        assert client.get("/").json()["mcp"] == "/mcp"


class TestMcpEndpoint:
    """Tests for /mcp."""

    def test_initialize(self, client: TestClient) -> None:
        response = client.post("/mcp", json=rpc("initialize", {"protocolVersion": "2025-03-26"}))

        assert response.status_code == 200
        assert response.json()["result"]["serverInfo"]["name"] == "cgov-mcp"

    def test_tools_call(self, client: TestClient, pool: FakePool) -> None:
        response = client.post("/mcp", json=rpc("tools/call", {"name": "list_tables", "arguments": {}}))

        assert response.status_code == 200
        assert "dreps" in response.json()["result"]["content"][0]["text"]
        assert len(pool.queries) == 1

    def test_tool_error_keeps_status_200(self, client: TestClient) -> None:
        response = client.post(
            "/mcp", json=rpc("tools/call", {"name": "query_database", "arguments": {"sql": "DELETE FROM t"}})
        )

        assert response.status_code == 200
        assert response.json()["result"]["isError"] is True

    def test_parse_error(self, client: TestClient) -> None:
        response = client.post(
            "/mcp", content=b"{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32700, "message": "Parse error"},
        }

    def test_notification_accepted(self, client: TestClient) -> None:
        response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})

        assert response.status_code == 202
        assert response.content == b""

    def test_request_id_header(self, client: TestClient) -> None:
        response = client.post("/mcp", json=rpc("ping"))

        assert response.headers["x-request-id"]

    def test_get_not_allowed(self, client: TestClient) -> None:
        response = client.get("/mcp")

        assert response.status_code == 405
        assert response.json() == {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32000, "message": "Method not allowed. Use POST."},
        }

    def test_delete_not_allowed(self, client: TestClient) -> None:
        response = client.delete("/mcp")

        assert response.status_code == 405
        assert response.json()["error"]["message"] == "Method not allowed."


class TestLifecycle:
    """Tests for app lifespan and error handling."""

    def test_import_builds_no_app(self, monkeypatch) -> None:
        """Importing the module creates no pool; apps come from create_app."""
        built = []
        monkeypatch.setattr(
            DatabasePool, "from_settings", classmethod(lambda cls, settings: built.append(settings))
        )

        importlib.reload(server)

        assert built == []
        assert not hasattr(server, "app")

    def test_pool_closed_on_shutdown(self, documents_dir: Path) -> None:
        pool = FakePool()
        settings = Settings(_env_file=None, documents_dir=documents_dir)

        with TestClient(create_app(settings, pool)):
            assert pool.close_calls == 0

        assert pool.close_calls == 1

    def test_unhandled_error_is_internal_error(self, documents_dir: Path, monkeypatch) -> None:
        settings = Settings(_env_file=None, documents_dir=documents_dir)
        app = create_app(settings, FakePool())

        async def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("cgov_mcp.server.handle_jsonrpc", explode)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.post("/mcp", json=rpc("ping"))

        assert response.status_code == 500
        assert response.json()["error"] == {"code": -32603, "message": "Internal server error"}


class TestErrorTracking:
    """Tests for init_error_tracking."""

    def test_disabled_without_dsn(self) -> None:
        assert init_error_tracking(Settings(_env_file=None, sentry_dsn=None)) is False

    def test_initialized_with_dsn(self) -> None:
        settings = Settings(_env_file=None, sentry_dsn="https://key@sentry.example/1", environment="production")

        with patch("cgov_mcp.server.sentry_sdk.init") as init:
            assert init_error_tracking(settings) is True

        kwargs = init.call_args.kwargs
        assert kwargs["environment"] == "production"
        assert kwargs["traces_sample_rate"] == 0.1
