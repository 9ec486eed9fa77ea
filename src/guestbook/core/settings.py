"""Shared base settings for the guestbook.

``GuestbookBaseSettings`` holds what every entry point needs (bind address,
debug mode, log level and format). The HTTP transport adds its own fields in
:mod:`guestbook.api.settings`.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked at startup, not at request time
    - **Environment-driven:** Reads ``GUESTBOOK_*`` env vars and ``.env`` files
    - **Sensible defaults:** Works out of the box for development

Examples:
    >>> from guestbook.core.settings import GuestbookBaseSettings
    >>> GuestbookBaseSettings(port=8080).port
    8080

Tags:
    settings, configuration, pydantic, environment, guestbook
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GuestbookBaseSettings(BaseSettings):
    """Common settings shared by the API server and the CLI.

    Fields
    ──────
    host         : Bind address for the HTTP server
    port         : Bind port for the HTTP server
    debug        : Enable debug mode (exception details in 500 responses)
    log_level    : structlog log level
    log_format   : ``console`` for development, ``json`` for aggregation
    """

    model_config = SettingsConfigDict(
        env_prefix="GUESTBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Network ──────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Bind port")

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"
