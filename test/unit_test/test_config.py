"""Unit tests for WrapiSettings environment binding."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wrapi import __version__
from wrapi.config import WrapiSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WRAPI_LOG_LEVEL",
        "WRAPI_LOG_FORMAT",
        "WRAPI_TIMEOUT",
        "WRAPI_FOLLOW_REDIRECTS",
        "WRAPI_USER_AGENT",
        "WRAPI_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = WrapiSettings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "detailed"
    assert settings.timeout == 10.0
    assert settings.follow_redirects is True
    assert settings.user_agent == f"wrapi/{__version__}"
    assert settings.base_url is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WRAPI_LOG_LEVEL", "debug")
    monkeypatch.setenv("WRAPI_LOG_FORMAT", "JSON")
    monkeypatch.setenv("WRAPI_TIMEOUT", "2.5")
    monkeypatch.setenv("WRAPI_FOLLOW_REDIRECTS", "false")
    monkeypatch.setenv("WRAPI_BASE_URL", "http://mock/api")

    settings = WrapiSettings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.timeout == 2.5
    assert settings.follow_redirects is False
    assert settings.base_url == "http://mock/api"


def test_unknown_log_format_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WRAPI_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        WrapiSettings(_env_file=None)


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
