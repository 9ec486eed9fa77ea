"""
CLI: ``guestbook entries`` — read and sign the guestbook from a terminal.
"""

from __future__ import annotations

import typer
from rich.markup import escape

from guestbook.cli.utils import console, open_repository, output_rows
from guestbook.core.models import Entry

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_entries(
    database: str | None = typer.Option(None, "--database", "-d", help="Store location"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """List every entry in stored order."""
    with open_repository(database) as repo:
        entries = repo.list()
    output_rows(
        [entry.to_dict() for entry in entries],
        as_json=json_out,
        title="Entries",
        columns=["who", "message"],
    )


@app.command("add")
def add_entry(
    who: str = typer.Argument(..., help="Author"),
    message: str = typer.Argument(..., help="Message body"),
    database: str | None = typer.Option(None, "--database", "-d", help="Store location"),
) -> None:
    """Append one entry."""
    with open_repository(database) as repo:
        repo.append(Entry(who=who, message=message))
        total = repo.count()
    console.print(f"[green]Signed[/green] as {escape(who)} ({total} entries)")
