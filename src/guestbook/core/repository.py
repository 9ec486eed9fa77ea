"""Entry repository — the only read/write interface over stored entries.

Architecture::

    ┌──────────────────────────────────────────────────────────────┐
    │                      EntryRepository                         │
    │                                                              │
    │   store: Store            ← guestbook.core.connection        │
    │                                                              │
    │   append(entry)           → None      (one INSERT)           │
    │   list()                  → [Entry]   (one SELECT)           │
    │   count()                 → int                              │
    └──────────────────────────────────────────────────────────────┘

Every ``sqlite3.Error`` is re-raised as
:class:`~guestbook.core.errors.DatabaseError` carrying the store's own
message. Nothing is retried here; retry policy belongs to the caller.

Usage:
    >>> repo = EntryRepository(bootstrap_store(":memory:"))
    >>> repo.append(Entry(who="boss", message="hi!"))
    >>> repo.list()
    [Entry(who='boss', message='hi!')]

Tags:
    repository, database, guestbook
"""

from __future__ import annotations

import sqlite3

from guestbook.core.connection import Store
from guestbook.core.errors import wrap_database_error
from guestbook.core.models import Entry
from guestbook.core.schema import COUNT_ENTRIES, INSERT_ENTRY, SELECT_ENTRIES


class EntryRepository:
    """Append and list guestbook entries against a shared :class:`Store`.

    Parameters:
        store: An open store handle, normally the one created by
               :func:`~guestbook.core.connection.bootstrap_store` at startup.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    def append(self, entry: Entry) -> None:
        """Insert one entry, binding ``who`` then ``message``.

        The statement is a single atomic insert; once this returns the
        entry is visible to subsequent :meth:`list` calls.
        """
        try:
            self.store.execute(INSERT_ENTRY, (entry.who, entry.message))
        except sqlite3.Error as e:
            raise wrap_database_error(e, operation="append", location=self.store.info.url) from e

    def list(self) -> list[Entry]:
        """Return every stored entry.

        Order is the store's natural scan order. The ``record`` table is an
        append-only rowid table, so that is insertion order. An empty store
        gives an empty list.
        """
        try:
            rows = self.store.query(SELECT_ENTRIES)
        except sqlite3.Error as e:
            raise wrap_database_error(e, operation="list", location=self.store.info.url) from e
        return [Entry.from_row(row) for row in rows]

    def count(self) -> int:
        """Number of stored entries."""
        try:
            rows = self.store.query(COUNT_ENTRIES)
        except sqlite3.Error as e:
            raise wrap_database_error(e, operation="count", location=self.store.info.url) from e
        return int(rows[0][0])


__all__ = ["EntryRepository"]
