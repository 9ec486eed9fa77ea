"""
CLI: ``guestbook serve`` — start the HTTP server.
"""

from __future__ import annotations

import os

import typer
import uvicorn

from guestbook.cli.utils import console

app = typer.Typer(no_args_is_help=True)


@app.command("start")
def start(
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Bind address"),
    port: int = typer.Option(3000, "--port", "-p", help="Bind port"),
    database: str | None = typer.Option(
        None, "--database", "-d", help="Store location (overrides GUESTBOOK_DATABASE_URL)"
    ),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the guestbook server."""
    # uvicorn builds the app from the factory, possibly in a child process,
    # so overrides travel through the environment
    if database is not None:
        os.environ["GUESTBOOK_DATABASE_URL"] = database
    os.environ["GUESTBOOK_LOG_LEVEL"] = log_level.upper()

    console.print(f"[bold green]Starting guestbook[/bold green] on {host}:{port}")
    uvicorn.run(
        "guestbook.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level.lower(),
    )
