"""
Error-handling middleware — maps guestbook errors to fixed HTTP responses.

Each error kind carries its own status and public message; this module is
the only place they become a response.

=================  ======  ===================================
Kind               Status  Body
=================  ======  ===================================
``DatabaseError``  500     the store's own message
``WriteError``     500     ``fail to write``
``ReadError``      500     ``fail to read``
``RenderError``    500     ``fail to render: <template error>``
anything else      500     ``Internal Server Error``
=================  ======  ===================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import PlainTextResponse

from guestbook.core.errors import GuestbookError, categorize_error
from guestbook.core.logging import get_logger

logger = get_logger(__name__)


def error_response(exc: GuestbookError) -> PlainTextResponse:
    """Build the plain-text response for a guestbook error."""
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


async def guestbook_exception_handler(request: Request, exc: GuestbookError) -> PlainTextResponse:
    """Log a guestbook error and return its fixed status and message."""
    logger.error(
        "request failed",
        method=request.method,
        path=request.url.path,
        **exc.to_dict(),
    )
    return error_response(exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Catch-all for unhandled exceptions; always 500."""
    logger.exception(
        "unhandled exception",
        method=request.method,
        path=request.url.path,
        category=categorize_error(exc).value,
    )
    settings = getattr(request.app.state, "settings", None)
    detail = str(exc) if settings is not None and settings.debug else "Internal Server Error"
    return PlainTextResponse(detail, status_code=500)
