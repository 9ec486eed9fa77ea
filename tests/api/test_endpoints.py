"""
Integration tests for the guestbook HTTP endpoints using FastAPI TestClient.

Each test gets an app whose lifespan bootstrapped a fresh in-memory store.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from guestbook.api.app import create_app
from guestbook.api.settings import GuestbookAPISettings
from guestbook.core.errors import ReadError, RenderError
from guestbook.core.models import Entry
from guestbook.core.repository import EntryRepository
from guestbook.render import render_entry


def sign(client: TestClient, who: str, message: str):
    return client.post("/api/message", data={"who": who, "message": message})


class TestHome:
    def test_home_page(self, client: TestClient):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "<title>Guestbook</title>" in resp.text

    def test_home_render_failure(self, client: TestClient, monkeypatch):
        def broken():
            raise RenderError("home.html")

        monkeypatch.setattr("guestbook.api.routers.home.render_home", broken)
        resp = client.get("/")
        assert resp.status_code == 500
        assert resp.text == "fail to render: home.html"


class TestMessages:
    def test_empty_listing(self, client: TestClient):
        resp = client.get("/api/message")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert resp.text == ""

    def test_sign_then_read(self, client: TestClient):
        resp = sign(client, "boss", "hi!")
        assert resp.status_code == 200
        assert resp.content == b""

        listing = client.get("/api/message")
        assert listing.status_code == 200
        assert "boss" in listing.text
        assert "hi!" in listing.text

    def test_listing_in_insertion_order(self, client: TestClient):
        for i in range(5):
            sign(client, f"user{i}", f"message {i}")
        text = client.get("/api/message").text
        positions = [text.index(f"message {i}") for i in range(5)]
        assert positions == sorted(positions)

    def test_markup_is_escaped(self, client: TestClient):
        sign(client, "<b>mallory</b>", "<script>alert(1)</script>")
        text = client.get("/api/message").text
        assert "<script>" not in text
        assert "&lt;script&gt;" in text

    @pytest.mark.parametrize("data", [{"who": "boss"}, {"message": "hi!"}, {}])
    def test_missing_field_rejected(self, client: TestClient, data):
        resp = client.post("/api/message", data=data)
        assert resp.status_code == 422
        assert client.get("/api/message").text == ""

    def test_missing_field_reports_its_name(self, client: TestClient):
        resp = client.post("/api/message", data={"who": "boss"})
        assert resp.status_code == 422
        assert [error["loc"] for error in resp.json()["detail"]] == [["body", "message"]]

    def test_empty_values_accepted(self, client: TestClient):
        resp = sign(client, "", "")
        assert resp.status_code == 200
        assert EntryRepository(client.app.state.store).list() == [Entry(who="", message="")]
        assert client.get("/api/message").text == render_entry(Entry(who="", message=""))

    def test_unknown_method(self, client: TestClient):
        assert client.delete("/api/message").status_code == 405

    def test_docs_disabled(self, client: TestClient):
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404


class TestErrorMapping:
    def test_database_error_on_read(self, client: TestClient):
        client.app.state.store.execute("DROP TABLE record")
        resp = client.get("/api/message")
        assert resp.status_code == 500
        assert resp.text == "no such table: record"

    def test_database_error_on_write(self, client: TestClient):
        client.app.state.store.execute("DROP TABLE record")
        resp = sign(client, "boss", "hi!")
        assert resp.status_code == 500
        assert resp.text == "no such table: record"

    def test_no_store_on_write(self, client: TestClient):
        client.app.state.store = None
        resp = sign(client, "boss", "hi!")
        assert resp.status_code == 500
        assert resp.text == "fail to write"

    def test_no_store_on_read(self, client: TestClient):
        client.app.state.store = None
        resp = client.get("/api/message")
        assert resp.status_code == 500
        assert resp.text == "fail to read"

    def test_render_failure_on_read(self, client: TestClient, monkeypatch):
        def broken(entries):
            raise ReadError()

        sign(client, "boss", "hi!")
        monkeypatch.setattr("guestbook.api.routers.messages.render_entry_list", broken)
        resp = client.get("/api/message")
        assert resp.status_code == 500
        assert resp.text == "fail to read"

    @pytest.mark.parametrize(
        ("debug", "body"),
        [(False, "Internal Server Error"), (True, "kaboom")],
    )
    def test_unexpected_exception(self, monkeypatch, debug, body):
        def broken():
            raise RuntimeError("kaboom")

        monkeypatch.setattr("guestbook.api.routers.home.render_home", broken)
        app = create_app(settings=GuestbookAPISettings(database_url=":memory:", debug=debug))
        with TestClient(app, raise_server_exceptions=False) as c:
            resp = c.get("/")
        assert resp.status_code == 500
        assert resp.text == body


class TestFileStore:
    def test_entries_survive_restart(self, tmp_path: Path):
        settings = GuestbookAPISettings(database_url=f"sqlite:///{tmp_path / 'gb.db'}")

        with TestClient(create_app(settings=settings)) as c:
            assert sign(c, "boss", "hi!").status_code == 200

        with TestClient(create_app(settings=settings)) as c:
            assert "hi!" in c.get("/api/message").text

    def test_relative_location_uses_data_dir(self, tmp_path: Path):
        settings = GuestbookAPISettings(database_url="gb.db", data_dir=str(tmp_path))
        with TestClient(create_app(settings=settings)) as c:
            sign(c, "boss", "hi!")
        assert (tmp_path / "gb.db").is_file()
