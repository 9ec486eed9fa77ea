"""
Home router.

GET /
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from guestbook.core.logging import get_logger
from guestbook.render import render_home

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def home() -> HTMLResponse:
    """Serve the static home page. Render failures become a 500."""
    logger.info("home called")
    return HTMLResponse(render_home())
