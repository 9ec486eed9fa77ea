"""
Root Typer application for the guestbook CLI.
"""

from __future__ import annotations

import sys

import typer
from typer import Typer

from guestbook import __version__
from guestbook.core.logging import configure_logging

app = Typer(
    name="guestbook",
    help="guestbook: sign and read a shared list of messages.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"guestbook {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON"),
) -> None:
    """Serve the guestbook and manage its store."""
    configure_logging(level=log_level, json_format=json_logs, stream=sys.stderr)


# ── Sub-command registration ─────────────────────────────────────────────

from guestbook.cli.db import app as db_app  # noqa: E402
from guestbook.cli.entries import app as entries_app  # noqa: E402
from guestbook.cli.serve import app as serve_app  # noqa: E402

app.add_typer(db_app, name="db", help="Store operations.")
app.add_typer(entries_app, name="entries", help="Read and sign the guestbook.")
app.add_typer(serve_app, name="serve", help="Start the HTTP server.")
