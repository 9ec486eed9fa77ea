"""SQL for the single ``record`` table.

The table has no primary key and no indexes. SQLite stores it as a rowid
table, so a plain ``SELECT`` scans rows in insertion order as long as rows
are only ever appended.
"""

from __future__ import annotations

TABLE_NAME = "record"

CREATE_RECORD_TABLE = """
CREATE TABLE IF NOT EXISTS record (
    who TEXT NOT NULL,
    message TEXT NOT NULL
);
"""

INSERT_ENTRY = "INSERT INTO record (who, message) VALUES (?, ?)"

SELECT_ENTRIES = "SELECT who, message FROM record"

COUNT_ENTRIES = "SELECT COUNT(*) FROM record"
