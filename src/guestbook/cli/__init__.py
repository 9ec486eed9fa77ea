"""Command line interface (``guestbook``)."""

from guestbook.cli.app import app

__all__ = ["app"]
