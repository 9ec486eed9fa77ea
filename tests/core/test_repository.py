"""Tests for guestbook.core.repository.EntryRepository."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from guestbook.core.connection import Store, bootstrap_store
from guestbook.core.errors import DatabaseError
from guestbook.core.models import Entry
from guestbook.core.repository import EntryRepository


class TestAppendAndList:
    def test_empty_store_lists_nothing(self, repo: EntryRepository):
        assert repo.list() == []
        assert repo.count() == 0

    def test_append_then_list(self, repo: EntryRepository):
        repo.append(Entry(who="boss", message="hi!"))
        assert repo.list() == [Entry(who="boss", message="hi!")]

    def test_fields_are_not_swapped(self, repo: EntryRepository):
        repo.append(Entry(who="alice", message="hello"))
        entry = repo.list()[0]
        assert entry.who == "alice"
        assert entry.message == "hello"

    def test_list_keeps_insertion_order(self, repo: EntryRepository):
        expected = [Entry(who=f"user{i}", message=f"msg {i}") for i in range(10)]
        for entry in expected:
            repo.append(entry)
        assert repo.list() == expected

    def test_duplicates_are_kept(self, repo: EntryRepository):
        repo.append(Entry(who="boss", message="hi!"))
        repo.append(Entry(who="boss", message="hi!"))
        assert repo.count() == 2

    def test_empty_strings_accepted(self, repo: EntryRepository):
        repo.append(Entry(who="", message=""))
        assert repo.list() == [Entry(who="", message="")]

    def test_markup_stored_verbatim(self, repo: EntryRepository):
        repo.append(Entry(who="<b>x</b>", message="a & b"))
        assert repo.list()[0] == Entry(who="<b>x</b>", message="a & b")


class TestSharedStore:
    def test_two_repositories_see_same_rows(self, store: Store):
        EntryRepository(store).append(Entry(who="boss", message="hi!"))
        assert EntryRepository(store).list() == [Entry(who="boss", message="hi!")]

    def test_rows_survive_reopen(self, db_path: Path):
        store = bootstrap_store(str(db_path))
        EntryRepository(store).append(Entry(who="boss", message="hi!"))
        store.close()

        store = bootstrap_store(str(db_path))
        try:
            assert EntryRepository(store).list() == [Entry(who="boss", message="hi!")]
        finally:
            store.close()

    def test_concurrent_appends(self, repo: EntryRepository):
        def sign(n: int) -> None:
            for i in range(25):
                repo.append(Entry(who=f"t{n}", message=str(i)))

        threads = [threading.Thread(target=sign, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert repo.count() == 200
        # each writer's own entries stay in the order it wrote them
        t0 = [e.message for e in repo.list() if e.who == "t0"]
        assert t0 == [str(i) for i in range(25)]


class TestFailures:
    def test_append_without_table(self, store: Store, repo: EntryRepository):
        store.execute("DROP TABLE record")
        with pytest.raises(DatabaseError, match="no such table: record") as exc_info:
            repo.append(Entry(who="boss", message="hi!"))
        assert exc_info.value.context.operation == "append"

    def test_list_without_table(self, store: Store, repo: EntryRepository):
        store.execute("DROP TABLE record")
        with pytest.raises(DatabaseError, match="no such table: record") as exc_info:
            repo.list()
        assert exc_info.value.public_message == "no such table: record"

    def test_count_without_table(self, store: Store, repo: EntryRepository):
        store.execute("DROP TABLE record")
        with pytest.raises(DatabaseError):
            repo.count()
