"""Factories for httpx clients pre-configured from `WrapiSettings`.

Requests never need these; any httpx client works. They exist so callers can
get a client with consistent timeout, redirect and User-Agent defaults. The
caller owns the returned client and is responsible for closing it.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from wrapi.config import WrapiSettings, get_settings

logger = logging.getLogger(__name__)


def _client_kwargs(settings: Optional[WrapiSettings], overrides: Dict[str, Any]) -> Dict[str, Any]:
    settings = settings or get_settings()
    kwargs: Dict[str, Any] = {
        "timeout": settings.timeout,
        "follow_redirects": settings.follow_redirects,
        "headers": {"User-Agent": settings.user_agent},
    }
    if settings.base_url:
        kwargs["base_url"] = settings.base_url
    kwargs.update(overrides)
    return kwargs


def build_client(settings: Optional[WrapiSettings] = None, **overrides: Any) -> httpx.Client:
    """Create an ``httpx.Client``; keyword overrides go straight to the constructor."""
    kwargs = _client_kwargs(settings, overrides)
    logger.debug("build_client: timeout=%s follow_redirects=%s", kwargs.get("timeout"), kwargs.get("follow_redirects"))
    return httpx.Client(**kwargs)


def build_async_client(settings: Optional[WrapiSettings] = None, **overrides: Any) -> httpx.AsyncClient:
    """Async counterpart of `build_client`."""
    kwargs = _client_kwargs(settings, overrides)
    logger.debug(
        "build_async_client: timeout=%s follow_redirects=%s", kwargs.get("timeout"), kwargs.get("follow_redirects")
    )
    return httpx.AsyncClient(**kwargs)
