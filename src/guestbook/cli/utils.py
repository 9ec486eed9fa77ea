"""
CLI utility helpers — output formatting and store access.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from guestbook.core.connection import Store, bootstrap_store
from guestbook.core.errors import GuestbookError
from guestbook.core.repository import EntryRepository

console = Console()
err_console = Console(stderr=True)


# ── Store helper ─────────────────────────────────────────────────────────


def default_database() -> str:
    """The configured store location (``GUESTBOOK_DATABASE_URL``)."""
    from guestbook.api.deps import get_settings

    return get_settings().database_url


@contextmanager
def open_store(database: str | None = None) -> Iterator[Store]:
    """Bootstrap ``database`` (or the configured default) for one command.

    Guestbook errors are printed in red and turn into exit code 1.
    """
    try:
        store = bootstrap_store(database or default_database())
    except GuestbookError as e:
        fail(e)
    try:
        yield store
    except GuestbookError as e:
        fail(e)
    finally:
        store.close()


@contextmanager
def open_repository(database: str | None = None) -> Iterator[EntryRepository]:
    with open_store(database) as store:
        yield EntryRepository(store)


def fail(error: GuestbookError) -> NoReturn:
    """Print an error and exit with code 1."""
    err_console.print(f"[bold red]Error[/bold red] ({error.category.value}): {escape(error.public_message)}")
    raise typer.Exit(code=1)


# ── Output helpers ───────────────────────────────────────────────────────


def output_rows(
    rows: list[dict[str, Any]],
    *,
    as_json: bool = False,
    title: str = "",
    columns: list[str] | None = None,
) -> None:
    """Render a list of dicts as a table, or as JSON."""
    if as_json:
        console.print_json(json.dumps(rows, default=str))
        return

    if not rows:
        console.print("[dim]No results.[/dim]")
        return

    cols = columns or list(rows[0].keys())
    table = Table(title=title or None, show_lines=False)
    for col in cols:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(escape(str(row.get(col, ""))) for col in cols))
    console.print(table)


def output_mapping(data: dict[str, Any], *, as_json: bool = False, title: str = "") -> None:
    """Render a single dict as key/value lines, or as JSON."""
    if as_json:
        console.print_json(json.dumps(data, default=str))
        return

    if title:
        console.print(f"[bold]{title}[/bold]")
    for key, value in data.items():
        console.print(f"  {escape(str(key))}: {escape(str(value))}")
