"""
Rendering layer — turns entries and the home page into HTML text.

Manifesto:
    Templates handle markup; these functions only feed them values and
    translate template failures into guestbook errors. There is no
    renderer class hierarchy: one plain function per renderable thing.

Architecture:
    ::

        Entry ──► render_entry() ──► entry.html ──► "<p>who said: message</p>"

        [Entry, ...] ──► render_entry_list() ──► render_entry() × N ──► "".join

        render_home() ──► home.html

Features:
    - Jinja2 ``Environment`` over the package ``templates/`` directory
    - HTML autoescaping, so entry fields can never inject markup
    - ``StrictUndefined``: a missing field is a render failure, not blank output
    - No output caching; callers re-render on every request

Tags:
    - renderer
    - template
    - jinja2
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from guestbook.core.errors import ReadError, RenderError
from guestbook.core.logging import get_logger
from guestbook.core.models import Entry

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

ENTRY_TEMPLATE = "entry.html"
HOME_TEMPLATE = "home.html"

HOME_TITLE = "Guestbook"
MESSAGE_URL = "/api/message"


def create_environment(template_dir: Path | str | None = None) -> Environment:
    """Build a Jinja2 environment for ``template_dir`` (defaults to the bundled templates)."""
    return Environment(
        loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Process-wide environment over the bundled templates."""
    return create_environment()


def _render(template_name: str, env: Environment | None, **values: object) -> str:
    env = env or get_environment()
    try:
        return env.get_template(template_name).render(**values)
    except TemplateError as e:
        raise RenderError(str(e) or e.__class__.__name__, cause=e).with_context(
            template=template_name
        ) from e


def render_entry(entry: Entry, *, env: Environment | None = None) -> str:
    """Render one entry as an HTML fragment.

    Raises:
        RenderError: The template could not substitute the fields.
    """
    return _render(ENTRY_TEMPLATE, env, who=entry.who, message=entry.message)


def render_entry_list(entries: Iterable[Entry], *, env: Environment | None = None) -> str:
    """Render each entry independently and concatenate in the order given.

    If any single entry fails the whole listing fails; a partial page is
    never returned.

    Raises:
        ReadError: One of the entries could not be rendered.
    """
    fragments: list[str] = []
    for entry in entries:
        try:
            fragments.append(render_entry(entry, env=env))
        except RenderError as e:
            logger.error("fail to render", error=e.message, template=e.context.template)
            raise ReadError(cause=e).with_context(operation="render_entry_list") from e
    return "".join(fragments)


def render_home(*, env: Environment | None = None) -> str:
    """Render the static home page.

    Raises:
        RenderError: Template or engine defect; no data is involved.
    """
    return _render(HOME_TEMPLATE, env, title=HOME_TITLE, message_url=MESSAGE_URL)


__all__ = [
    "create_environment",
    "get_environment",
    "render_entry",
    "render_entry_list",
    "render_home",
]
