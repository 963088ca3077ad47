"""Tests for the HTTP transport: health, JSON-RPC, and direct tool calls."""

import json

import pytest
from fastapi.testclient import TestClient

from magentaa11y_mcp import __version__
from magentaa11y_mcp.engine import ContentLoader
from magentaa11y_mcp.engine.core import InitializationError
from magentaa11y_mcp.mcp import INVALID_REQUEST, METHOD_NOT_FOUND, PARSE_ERROR
from magentaa11y_mcp.server import create_app


@pytest.fixture
def client(content_root):
    app = create_app(ContentLoader(content_root))
    with TestClient(app) as test_client:
        yield test_client


def rpc(client: TestClient, method: str, params: dict | None = None, id: int = 1):
    response = client.post(
        "/mcp", json={"jsonrpc": "2.0", "id": id, "method": method, "params": params or {}}
    )
    assert response.status_code == 200
    return response.json()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["version"] == __version__

    def test_ready_after_startup(self, client):
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json() == {
            "ready": True,
            "components": {"web": 3, "native": 2},
            "warnings": [],
        }

    def test_not_ready_before_startup(self, content_root):
        client = TestClient(create_app(ContentLoader(content_root)))
        response = client.get("/ready")
        assert response.status_code == 503
        assert response.json()["ready"] is False


class TestStartup:
    @pytest.mark.asyncio
    async def test_missing_content_root_fails_startup(self, tmp_path):
        app = create_app(ContentLoader(tmp_path / "missing"))
        with pytest.raises(InitializationError):
            async with app.router.lifespan_context(app):
                pass


class TestJsonRpc:
    def test_initialize(self, client):
        body = rpc(client, "initialize")
        assert body["id"] == 1
        assert body["result"]["serverInfo"] == {"name": "magentaa11y-mcp", "version": __version__}
        assert "tools" in body["result"]["capabilities"]

    def test_ping(self, client):
        assert rpc(client, "ping")["result"] == {}

    def test_tools_list(self, client):
        tools = rpc(client, "tools/list")["result"]["tools"]
        names = {tool["name"] for tool in tools}
        assert len(tools) == 12
        assert {"get_web_component", "list_component_formats", "suggest_similar_components"} <= names
        assert all("inputSchema" in tool for tool in tools)

    def test_tools_call_structured(self, client):
        body = rpc(client, "tools/call", {"name": "get_web_component", "arguments": {"component": "button"}})
        content = body["result"]["content"][0]
        assert content["type"] == "text"
        assert json.loads(content["text"])["component"] == "button"
        assert "isError" not in body["result"]

    def test_tools_call_raw_text(self, client):
        body = rpc(
            client,
            "tools/call",
            {"name": "get_component_gherkin", "arguments": {"platform": "web", "component": "button"}},
        )
        assert body["result"]["content"][0]["text"] == "G"

    def test_tools_call_error_payload(self, client):
        body = rpc(client, "tools/call", {"name": "get_web_component", "arguments": {"component": "buton"}})
        assert body["result"]["isError"] is True
        assert json.loads(body["result"]["content"][0]["text"])["error"] == "Component not found"

    def test_unknown_method(self, client):
        assert rpc(client, "resources/list")["error"]["code"] == METHOD_NOT_FOUND

    def test_invalid_request(self, client):
        response = client.post("/mcp", json={"id": 3, "method": "ping"})
        assert response.json()["error"]["code"] == INVALID_REQUEST
        assert response.json()["id"] == 3

    def test_notification_has_no_response(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert response.status_code == 204

    def test_parse_error(self, client):
        response = client.post("/mcp", content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == PARSE_ERROR

    def test_batch(self, client):
        response = client.post(
            "/mcp",
            json=[
                {"jsonrpc": "2.0", "id": 1, "method": "ping"},
                {"jsonrpc": "2.0", "method": "notifications/initialized"},
                {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
            ],
        )
        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == [1, 2]


class TestDirectTools:
    def test_execute_tool(self, client):
        response = client.post(
            "/v1/tools", json={"tool": "list_native_components", "params": {"category": "components"}}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["is_error"] is False
        assert [c["name"] for c in body["data"]["components"]] == ["picker"]

    def test_unknown_tool_rejected(self, client):
        response = client.post("/v1/tools", json={"tool": "nope", "params": {}})
        assert response.status_code == 422
