"""
Guestbook core: store bootstrap, entry repository, errors, logging, settings.

Everything the HTTP surface and the CLI need to talk to the store lives
here; neither of them touches ``sqlite3`` directly.
"""

from guestbook.core.connection import ConnectionInfo, Store, bootstrap_store, parse_location
from guestbook.core.errors import (
    ConfigError,
    DatabaseError,
    ErrorCategory,
    GuestbookError,
    ReadError,
    RenderError,
    WriteError,
)
from guestbook.core.models import Entry
from guestbook.core.repository import EntryRepository

__all__ = [
    "ConfigError",
    "ConnectionInfo",
    "DatabaseError",
    "Entry",
    "EntryRepository",
    "ErrorCategory",
    "GuestbookError",
    "ReadError",
    "RenderError",
    "Store",
    "WriteError",
    "bootstrap_store",
    "parse_location",
]
