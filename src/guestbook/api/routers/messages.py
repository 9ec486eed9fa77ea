"""
Messages router — list and append guestbook entries.

GET  /api/message
POST /api/message

GET returns the concatenated HTML fragments for every entry; POST takes the
form fields ``who`` and ``message`` and answers 200 with an empty body.
Both fields must be present; empty values are stored as-is.
Failures propagate as guestbook errors and are mapped to responses by
:mod:`guestbook.api.middleware.errors`.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse

from guestbook.api.deps import Repository
from guestbook.core.errors import DatabaseError, ReadError, WriteError
from guestbook.core.logging import get_logger
from guestbook.core.models import Entry
from guestbook.render import render_entry_list

logger = get_logger(__name__)

router = APIRouter(prefix="/message")

_FORM_FIELDS = ("who", "message")


async def entry_form(request: Request) -> Entry:
    """Build an :class:`Entry` from the submitted form.

    A missing field is a 422. An empty value is kept, which ``Form()``
    parameters would treat as missing.
    """
    form = await request.form()
    errors = []
    for name in _FORM_FIELDS:
        value = form.get(name)
        if value is None:
            errors.append({"type": "missing", "loc": ("body", name), "msg": "Field required", "input": None})
        elif not isinstance(value, str):
            errors.append(
                {"type": "string_type", "loc": ("body", name), "msg": "Input should be a valid string", "input": None}
            )
    if errors:
        raise RequestValidationError(errors)
    return Entry(who=form["who"], message=form["message"])


@router.get("", response_class=HTMLResponse)
def list_messages(repo: Repository) -> HTMLResponse:
    """Render every stored entry, in stored order."""
    if repo is None:
        raise ReadError("no store configured")
    try:
        entries = repo.list()
    except DatabaseError as e:
        logger.error("get entries failed", error=e.message)
        raise
    logger.info("sending entries", count=len(entries))
    return HTMLResponse(render_entry_list(entries))


@router.post("")
def add_message(
    repo: Repository,
    entry: Annotated[Entry, Depends(entry_form)],
) -> Response:
    """Append one entry from the submitted form."""
    if repo is None:
        raise WriteError("no store configured")
    try:
        repo.append(entry)
    except DatabaseError as e:
        logger.error("insert failed", error=e.message)
        raise
    logger.info("inserted entry")
    return Response(status_code=200)
