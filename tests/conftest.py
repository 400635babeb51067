"""Pytest configuration and fixtures for PowerVS SDK tests."""

from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from powervs_sdk.authenticators import NoAuthAuthenticator
from powervs_sdk.powervs_v1 import PowervsV1

SERVICE_URL = "https://us-south.power-iaas.cloud.ibm.com"


class FakeServer:
    """Scripted HTTP backend for httpx.MockTransport.

    Each queued reply is used once, in order; the last one repeats.
    A reply is either ``(status, json_body, headers)`` or an exception
    to raise instead of answering.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._replies: List[Any] = []

    def reply(self, status: int = 200, json: Any = None, headers: Optional[Dict[str, str]] = None,
              content: Optional[bytes] = None) -> "FakeServer":
        self._replies.append((status, json, headers or {}, content))
        return self

    def fail(self, exc_factory: Callable[[httpx.Request], Exception]) -> "FakeServer":
        self._replies.append(exc_factory)
        return self

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._replies:
            return httpx.Response(200, json={})
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]
        if callable(reply):
            raise reply(request)
        status, body, headers, content = reply
        if content is not None:
            return httpx.Response(status, content=content, headers=headers)
        if body is None:
            return httpx.Response(status, headers=headers)
        return httpx.Response(status, json=body, headers=headers)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server() -> FakeServer:
    """Create an empty fake PowerVS backend."""
    return FakeServer()


@pytest.fixture
def service(server: FakeServer) -> PowervsV1:
    """Create a PowervsV1 client wired to the fake backend."""
    return PowervsV1(
        authenticator=NoAuthAuthenticator(),
        service_url=SERVICE_URL,
        transport=server.transport(),
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove PowerVS settings and hide any real credentials file."""
    for var in ["IBM_CREDENTIALS_FILE", "POWERVS_URL", "POWERVS_AUTH_TYPE", "POWERVS_APIKEY",
                "POWERVS_AUTH_URL", "POWERVS_BEARER_TOKEN", "POWERVS_USERNAME", "POWERVS_PASSWORD",
                "POWERVS_DISABLE_SSL", "POWERVS_ENABLE_RETRIES", "POWERVS_MAX_RETRIES",
                "POWERVS_RETRY_INTERVAL"]:
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def env_with_credentials(clean_env, monkeypatch):
    """Set environment variables for a bearer-token PowerVS client."""
    monkeypatch.setenv("POWERVS_URL", SERVICE_URL)
    monkeypatch.setenv("POWERVS_AUTH_TYPE", "bearerToken")
    monkeypatch.setenv("POWERVS_BEARER_TOKEN", "test-token")
    monkeypatch.setenv("POWERVS_ENABLE_RETRIES", "true")
    monkeypatch.setenv("POWERVS_MAX_RETRIES", "2")
    monkeypatch.setenv("POWERVS_RETRY_INTERVAL", "0.01")
    return clean_env
