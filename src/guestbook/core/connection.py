"""Store handle and schema bootstrap.

:func:`bootstrap_store` is the **single entry point** for getting a usable
store. It resolves a location string, creates the database when it does not
exist yet, opens one shared handle and applies the idempotent schema.

Supported locations
-------------------
=========================  ==========================================  ============
Form                       Example                                     Backend
=========================  ==========================================  ============
in-memory                  ``None``, ``"memory"``, ``":memory:"``,     SQLite RAM
                           ``"sqlite::memory:"``
``sqlite`` URL             ``sqlite:///path/to/guestbook.db``          SQLite file
(file path)                ``./data/guestbook.db``                     SQLite file
=========================  ==========================================  ============

Usage
-----
::

    from guestbook.core.connection import bootstrap_store

    store = bootstrap_store(":memory:")
    store.execute("INSERT INTO record (who, message) VALUES (?, ?)", ("boss", "hi!"))
    rows = store.query("SELECT who, message FROM record")

Design
------
The handle wraps a single ``sqlite3.Connection`` opened with
``check_same_thread=False``. FastAPI runs sync endpoints in a threadpool,
so every statement is serialised through a lock held only for that one
statement. One connection also keeps a ``:memory:`` database shared by all
requests, since each new SQLite connection to ``:memory:`` is a separate,
empty database.
"""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from guestbook.core.errors import ConfigError, wrap_database_error
from guestbook.core.logging import get_logger
from guestbook.core.schema import CREATE_RECORD_TABLE

logger = get_logger(__name__)

MEMORY = ":memory:"

_MEMORY_ALIASES = ("", "memory", MEMORY)


# ── ConnectionInfo ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class ConnectionInfo:
    """Metadata about a store location."""

    backend: str
    """Backend identifier, always ``"sqlite"``."""

    persistent: bool
    """Whether data survives process exit."""

    url: str
    """The original location string."""

    resolved_path: str | None = None
    """For file-based SQLite, the resolved absolute path."""

    def __repr__(self) -> str:
        parts = [f"backend={self.backend!r}", f"persistent={self.persistent}"]
        if self.resolved_path:
            parts.append(f"path={self.resolved_path!r}")
        else:
            parts.append(f"url={self.url!r}")
        return f"ConnectionInfo({', '.join(parts)})"

    @property
    def target(self) -> str:
        """What ``sqlite3.connect`` is called with."""
        return self.resolved_path or MEMORY


# ── Location parsing ─────────────────────────────────────────────────────


def _parse_url(db: str | None) -> tuple[str, str]:
    """Parse a location into ``(scheme, target)``.

    ``scheme`` is ``"memory"`` or ``"file"``.
    """
    if db is None or db.strip() in _MEMORY_ALIASES:
        return "memory", MEMORY

    db = db.strip()

    for prefix in ("sqlite:///", "sqlite://", "sqlite:"):
        if db.startswith(prefix):
            path = db[len(prefix):]
            if path in _MEMORY_ALIASES:
                return "memory", MEMORY
            return "file", path

    if "://" in db:
        scheme = db.split("://", 1)[0]
        raise ConfigError(f"unsupported database scheme {scheme!r}").with_context(location=db)

    return "file", db


def parse_location(db: str | None, *, data_dir: str | Path | None = None) -> ConnectionInfo:
    """Resolve a location string into :class:`ConnectionInfo`.

    Relative file paths are resolved against ``data_dir`` when given,
    otherwise against the current directory.
    """
    scheme, target = _parse_url(db)
    if scheme == "memory":
        return ConnectionInfo(backend="sqlite", persistent=False, url=db or MEMORY)

    path = Path(target).expanduser()
    if data_dir is not None and not path.is_absolute():
        path = Path(data_dir).expanduser() / path
    return ConnectionInfo(
        backend="sqlite",
        persistent=True,
        url=db or target,
        resolved_path=str(path.resolve()),
    )


# ── Store handle ─────────────────────────────────────────────────────────


class Store:
    """Shared store handle with ``execute`` / ``query`` capability.

    Statements are serialised by an internal lock; writes are committed
    immediately and rolled back if they fail.
    """

    def __init__(self, conn: sqlite3.Connection, info: ConnectionInfo) -> None:
        self._conn = conn
        self._lock = threading.Lock()
        self.info = info

    @classmethod
    def open(cls, info: ConnectionInfo) -> Store:
        """Open a handle against an existing location."""
        conn = sqlite3.connect(info.target, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return cls(conn, info)

    def execute(self, sql: str, params: tuple = ()) -> int:
        """Execute a single write statement and commit. Returns the row count."""
        with self._lock:
            try:
                cursor = self._conn.execute(sql, params)
                self._conn.commit()
            except sqlite3.Error:
                self._conn.rollback()
                raise
            return cursor.rowcount

    def query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        """Execute a single read statement and fetch every row."""
        with self._lock:
            return self._conn.execute(sql, params).fetchall()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    @property
    def raw(self) -> sqlite3.Connection:
        """Access the underlying ``sqlite3.Connection`` (e.g. for pragmas)."""
        return self._conn

    def __repr__(self) -> str:
        return f"Store({self.info!r})"


# ── Bootstrap ────────────────────────────────────────────────────────────


def database_exists(info: ConnectionInfo) -> bool:
    """Check whether the database behind ``info`` already exists."""
    if not info.persistent:
        return True
    return Path(info.target).is_file()


def create_database(info: ConnectionInfo) -> None:
    """Create an empty database file (and parent directories) for ``info``."""
    if not info.persistent:
        return
    path = Path(info.target)
    path.parent.mkdir(parents=True, exist_ok=True)
    sqlite3.connect(path).close()


def bootstrap_store(
    db: str | None = None,
    *,
    data_dir: str | Path | None = None,
) -> Store:
    """Guarantee a usable store and return an open handle to it.

    Steps: resolve the location, create the database if missing, open the
    handle, then apply ``CREATE TABLE IF NOT EXISTS``. Running it twice
    against the same file leaves existing rows untouched.

    Raises
    ------
    ConfigError
        The location uses a scheme other than SQLite.
    DatabaseError
        Any failure while checking, creating, opening or initialising the
        store. Startup must not continue past it.
    """
    info = parse_location(db, data_dir=data_dir)
    store: Store | None = None
    try:
        if not database_exists(info):
            logger.info("creating database", url=info.url, path=info.resolved_path)
            create_database(info)
            logger.info("created database", url=info.url, path=info.resolved_path)

        store = Store.open(info)
        store.execute(CREATE_RECORD_TABLE)
    except (sqlite3.Error, OSError) as e:
        if store is not None:
            store.close()
        logger.error("store bootstrap failed", url=info.url, error=str(e))
        raise wrap_database_error(e, operation="bootstrap", location=info.url) from e

    logger.info("store ready", info=repr(info))
    return store


def describe(store: Store) -> dict[str, Any]:
    """Plain-dict view of a store's :class:`ConnectionInfo` for CLI output."""
    info = store.info
    return {
        "backend": info.backend,
        "persistent": info.persistent,
        "url": info.url,
        "path": info.resolved_path,
    }


__all__ = [
    "MEMORY",
    "ConnectionInfo",
    "Store",
    "bootstrap_store",
    "create_database",
    "database_exists",
    "describe",
    "parse_location",
]
