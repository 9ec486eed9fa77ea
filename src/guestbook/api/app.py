"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers, and the
lifespan that owns the store handle into a single ``FastAPI`` instance.

Manifesto:
    The app factory is the single composition root. The store is opened
    here at startup and handed to routers through ``app.state``; if it
    cannot be prepared, startup fails and no request is ever served.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from guestbook.api.deps import get_settings
from guestbook.api.middleware.errors import guestbook_exception_handler, unhandled_exception_handler
from guestbook.api.middleware.request_id import RequestIDMiddleware
from guestbook.api.middleware.timing import TimingMiddleware
from guestbook.api.settings import GuestbookAPISettings
from guestbook.core.connection import bootstrap_store
from guestbook.core.errors import GuestbookError
from guestbook.core.logging import configure_logging, get_logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Bootstrap the store on startup and close it on shutdown.

    Bootstrap errors are not caught: a store that cannot be prepared
    aborts startup.
    """
    settings: GuestbookAPISettings = app.state.settings
    configure_logging(level=settings.log_level, json_format=settings.json_logs)
    log = get_logger("guestbook.api")
    log.info("guestbook API starting", version=app.version, database_url=settings.database_url)

    store = bootstrap_store(settings.database_url, data_dir=settings.data_dir)
    app.state.store = store
    try:
        yield
    finally:
        app.state.store = None
        store.close()
        log.info("guestbook API shutting down")


def create_app(*, settings: GuestbookAPISettings | None = None) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : GuestbookAPISettings | None
        Override settings (useful for testing). When ``None`` the cached
        singleton from :func:`get_settings` is used.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.store = None

    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (outermost → innermost) ────────────────────────────
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(GuestbookError, guestbook_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from guestbook.api.routers import home, messages

    app.include_router(home.router, tags=["home"])
    app.include_router(messages.router, prefix="/api", tags=["messages"])

    return app
