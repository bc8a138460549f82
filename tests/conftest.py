"""Fixtures — mock transport, checker, and test client."""

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.routes import get_checker
from src.config import Settings, get_settings
from src.heuristics import PageFetcher, SpeedHeuristicsChecker
from src.main import app

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def html_handler() -> Callable[..., Handler]:
    """Build a MockTransport handler that serves *html* with *status_code*."""

    def _make(html: str, status_code: int = 200) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status_code,
                text=html,
                headers={"content-type": "text/html; charset=utf-8"},
            )

        return handler

    return _make


@pytest.fixture
def make_checker() -> Callable[[Handler], SpeedHeuristicsChecker]:
    def _make(handler: Handler) -> SpeedHeuristicsChecker:
        return SpeedHeuristicsChecker(PageFetcher(transport=httpx.MockTransport(handler)))

    return _make


@pytest.fixture
def make_client(make_checker):
    """Build a TestClient whose checker is served by *handler*."""

    def _make(handler: Handler, settings: Settings | None = None) -> TestClient:
        checker = make_checker(handler)
        app.dependency_overrides[get_checker] = lambda: checker
        app.dependency_overrides[get_settings] = lambda: settings or Settings()
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
