"""
API-specific settings.

Extends :class:`~guestbook.core.settings.GuestbookBaseSettings` with the
store location and the knobs that govern the HTTP transport.

All values can be overridden via environment variables prefixed with
``GUESTBOOK_`` (e.g. ``GUESTBOOK_DATABASE_URL=sqlite:///guestbook.db``).
"""

from __future__ import annotations

from pydantic import Field

from guestbook import __version__
from guestbook.core.settings import GuestbookBaseSettings


class GuestbookAPISettings(GuestbookBaseSettings):
    """Settings for the guestbook HTTP server.

    Order of precedence (highest → lowest):
        1. Explicit keyword arguments
        2. Environment variables (``GUESTBOOK_DATABASE_URL``, etc.)
        3. ``.env`` file
        4. Defaults below
    """

    # ── Store ────────────────────────────────────────────────────────────
    database_url: str = Field(
        default=":memory:",
        description="Store location: ':memory:', a file path, or sqlite:///path",
    )
    data_dir: str | None = Field(
        default=None,
        description="Directory that relative file locations are resolved against",
    )

    # ── API ──────────────────────────────────────────────────────────────
    api_title: str = Field(default="Guestbook", description="Application title")
    api_version: str = Field(default=__version__, description="Application version string")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Allowed CORS origins (empty disables CORS)",
    )
