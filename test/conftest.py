from __future__ import annotations

from typing import Iterable

import httpx
import pytest

from wrapi.config import get_settings

ALLOWED_PREFIXES: Iterable[str] = (
    "http://mock",
    "https://mock",
    "http://localhost",
    "http://127.0.0.1",
)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Fail any test that would reach a real network host.

    Requests to the mock hosts still go through, so clients wired with an
    ``httpx.MockTransport`` behave normally.
    """
    orig_sync = httpx.Client.send
    orig_async = httpx.AsyncClient.send

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in ALLOWED_PREFIXES)

    def offline_sync(self, request, *args, **kwargs):
        url_str = str(request.url)
        if _is_allowed(url_str):
            return orig_sync(self, request, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, request, *args, **kwargs):
        url_str = str(request.url)
        if _is_allowed(url_str):
            return await orig_async(self, request, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx.Client, "send", offline_sync, raising=True)
    monkeypatch.setattr(httpx.AsyncClient, "send", offline_async, raising=True)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
