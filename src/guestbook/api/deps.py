"""
FastAPI dependency injection — the settings singleton and the repository.

Usage in routers::

    from guestbook.api.deps import Repository

    @router.get("/things")
    def list_things(repo: Repository):
        ...

Manifesto:
    The store handle is created once by the application lifespan and kept
    on ``app.state``. Routers never reach for a global; they receive an
    :class:`EntryRepository` bound to that handle through ``Depends``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from guestbook.api.settings import GuestbookAPISettings
from guestbook.core.connection import Store
from guestbook.core.repository import EntryRepository

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> GuestbookAPISettings:
    """Cached settings, loaded once per process."""
    return GuestbookAPISettings()


# ── Store / repository (shared handle, per-request wrapper) ──────────────


def get_store(request: Request) -> Store | None:
    """The store handle opened at startup, or ``None`` if there is none."""
    return getattr(request.app.state, "store", None)


def get_repository(
    store: Annotated[Store | None, Depends(get_store)],
) -> EntryRepository | None:
    """Wrap the shared store in a repository for this request.

    Returns ``None`` when the application has no store; the routers turn
    that into a write or read error depending on the path.
    """
    if store is None:
        return None
    return EntryRepository(store)


# ── Convenience type aliases ─────────────────────────────────────────────

Settings = Annotated[GuestbookAPISettings, Depends(get_settings)]
Repository = Annotated[EntryRepository | None, Depends(get_repository)]
