"""
CLI: ``guestbook db`` — store management commands.
"""

from __future__ import annotations

import typer

from guestbook.cli.utils import open_repository, output_mapping
from guestbook.core.connection import describe

app = typer.Typer(no_args_is_help=True)


@app.command()
def init(
    database: str | None = typer.Option(None, "--database", "-d", help="Store location"),
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Create the store and the entries table if they do not exist."""
    with open_repository(database) as repo:
        data = describe(repo.store)
        data["entries"] = repo.count()
    output_mapping(data, as_json=json_out, title="Database Init")
