# tests/conftest.py
"""
Main pytest configuration and shared fixtures for all tests.

This module provides:
- Async test support (pytest-asyncio auto mode)
- Settings override for the test environment
- A fake admin API (httpx.MockTransport) that records every request
- A scripted operator prompt and a non-opening browser navigator
- Gateway, page and console fixtures wired to the fake API
"""

import inspect
import json as jsonlib
from typing import Any, AsyncGenerator, Callable

import httpx
import pytest

from jclaw_console.config.settings import Settings, get_settings
from jclaw_console.console import Console
from jclaw_console.gateway.client import GatewayClient
from jclaw_console.gateway.navigation import BrowserNavigator
from jclaw_console.ui.page import ConsolePage


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest-asyncio to use auto mode."""
    config.option.asyncio_mode = "auto"


# ============================================================================
# Settings and Configuration
# ============================================================================

BASE_URL = "http://console.test"
API = "/admin/api"


@pytest.fixture
def test_settings() -> Settings:
    """Test settings pointing at the fake admin API host."""
    return Settings(
        app_name="jclaw Operator Console Test",
        environment="local",
        base_url=BASE_URL,
        audit_page_size=20,
        log_level=40,  # ERROR level to reduce noise in tests
    )


@pytest.fixture(autouse=True)
def override_settings(monkeypatch):
    """
    Make get_settings() agree with test_settings for code that reads it
    directly (timestamp formatting, log masking).
    """
    monkeypatch.setenv("BASE_URL", BASE_URL)
    monkeypatch.setenv("LOG_LEVEL", "40")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Fake admin API
# ============================================================================

Handler = Callable[[httpx.Request], Any]


class FakeAdminApi:
    """
    In-memory admin API behind an httpx.MockTransport.

    Routes are keyed by (method, decoded path); unrouted requests get 404.
    A route is either a canned response or a handler (sync or async) that
    receives the request and returns an httpx.Response.

    Usage:
        fake_api.on("GET", "/admin/api/agents", json=[...])
        fake_api.on("POST", "/admin/api/chat/send", handler=slow_reply)
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        json: Any = None,
        status: int = 200,
        text: str | None = None,
        headers: dict[str, str] | None = None,
        handler: Handler | None = None,
    ) -> None:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                if text is not None:
                    return httpx.Response(status, text=text, headers=headers)
                if json is not None:
                    return httpx.Response(status, json=json, headers=headers)
                return httpx.Response(status, headers=headers)

        self.routes[(method.upper(), path)] = handler

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text=f"No route for {request.method} {request.url.path}")
        response = handler(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return jsonlib.loads(request.content) if request.content else None


@pytest.fixture
def fake_api() -> FakeAdminApi:
    return FakeAdminApi()


@pytest.fixture
def admin_api(fake_api: FakeAdminApi) -> FakeAdminApi:
    """Fake API with every admin tab endpoint answering an empty list."""
    fake_api.on("GET", f"{API}/agents", json=[])
    fake_api.on("GET", f"{API}/identity-mappings/pending", json=[])
    fake_api.on("GET", f"{API}/sessions", json=[])
    fake_api.on("GET", f"{API}/audit", json={"content": [], "number": 0, "totalPages": 0})
    return fake_api


# ============================================================================
# Operator interaction
# ============================================================================

class ScriptedPrompt:
    """Operator prompt that answers confirmations from a script and records alerts."""

    def __init__(self, confirm_answer: bool = True):
        self.confirm_answer = confirm_answer
        self.confirmations: list[str] = []
        self.alerts: list[str] = []

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.confirm_answer

    def alert(self, message: str) -> None:
        self.alerts.append(message)


@pytest.fixture
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture
def navigator() -> BrowserNavigator:
    return BrowserNavigator(open_browser=False)


# ============================================================================
# Gateway, page and console
# ============================================================================

@pytest.fixture
def cookies() -> dict[str, str]:
    return {"SESSION": "session-abc", "XSRF-TOKEN": "xsrf%2Btoken%3D"}


@pytest.fixture
async def gateway(
    test_settings: Settings,
    navigator: BrowserNavigator,
    fake_api: FakeAdminApi,
    cookies: dict[str, str],
) -> AsyncGenerator[GatewayClient, None]:
    client = GatewayClient(
        test_settings,
        navigator,
        cookies=cookies,
        transport=fake_api.transport,
    )
    yield client
    await client.aclose()


@pytest.fixture
def page() -> ConsolePage:
    return ConsolePage()


@pytest.fixture
async def console(
    test_settings: Settings,
    gateway: GatewayClient,
    page: ConsolePage,
    prompt: ScriptedPrompt,
    navigator: BrowserNavigator,
) -> AsyncGenerator[Console, None]:
    async with Console(
        settings=test_settings,
        gateway=gateway,
        page=page,
        prompt=prompt,
        navigator=navigator,
    ) as c:
        yield c
