"""Shared fixtures for the Agent Domain Service MCP tests.

HTTP traffic is served by an in-process fake built on httpx.MockTransport,
so no test touches the network.
"""

import json

import httpx
import pytest

from agent_domain_service_mcp.client import DomainServiceClient

TEST_BASE_URL = "https://domains.test"


class FakeDomainService:
    """Routes requests by (method, path) and records everything it receives."""

    def __init__(self):
        self.routes: dict[tuple[str, str], dict | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, json_body=None, status_code: int = 200, content: bytes | None = None):
        if content is not None:
            self.routes[(method, path)] = {"status_code": status_code, "content": content}
        else:
            self.routes[(method, path)] = {"status_code": status_code, "json": json_body}

    def fail(self, method: str, path: str, error: Exception):
        self.routes[(method, path)] = error

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.raw_path.split(b"?")[0].decode()))
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(route, Exception):
            raise route
        # A fresh response per request
        return httpx.Response(**route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)

    def client(self, timeout: float = 5.0) -> DomainServiceClient:
        return DomainServiceClient(base_url=TEST_BASE_URL, timeout=timeout, transport=self.transport)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config directory at a temp dir and clear settings env vars."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    for var in ("AGENT_DOMAIN_SERVICE_URL", "AGENT_DOMAIN_SERVICE_TIMEOUT", "AGENT_DOMAIN_SERVICE_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "config" / "agent-domain-service-mcp"


@pytest.fixture
def service():
    return FakeDomainService()


@pytest.fixture
def lookup_payload():
    return {
        "domain": "x.com",
        "available": True,
        "status": "available",
        "checked_at": "2026-10-17T10:00:00Z",
        "expires_at": None,
        "source": "registry",
        "purchase_price": 12,
        "renewal_price": 15,
        "premium": False,
        "cache": {"hit": True, "ttl_seconds": 300, "stale": False},
    }
