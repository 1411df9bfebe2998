"""
Configuration Settings.

Defines the library configuration using Pydantic's BaseSettings. Values are
bound from environment variables (``WRAPI_*``) and an optional ``.env`` file.
Settings only feed the convenience client factories and logging helpers;
requests themselves never read them.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wrapi._version import __version__

LOG_FORMATS = ("simple", "detailed", "json")


class WrapiSettings(BaseSettings):
    """
    Library settings model.

    All properties are bound from environment variables and the .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level for wrapi loggers (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="WRAPI_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format: simple, detailed or json",
        alias="WRAPI_LOG_FORMAT",
    )

    # =====================================================================
    # HTTP client defaults
    # =====================================================================
    timeout: float = Field(
        default=10.0,
        description="Default timeout in seconds for clients built by wrapi.client",
        alias="WRAPI_TIMEOUT",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether clients built by wrapi.client follow redirects",
        alias="WRAPI_FOLLOW_REDIRECTS",
    )
    user_agent: str = Field(
        default=f"wrapi/{__version__}",
        description="User-Agent header sent by clients built by wrapi.client",
        alias="WRAPI_USER_AGENT",
    )
    base_url: Optional[str] = Field(
        default=None,
        description="Optional base URL preset on clients built by wrapi.client",
        alias="WRAPI_BASE_URL",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}, got {v!r}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> WrapiSettings:
    """Return the process-wide settings instance."""
    return WrapiSettings()
