"""
Shared pytest fixtures for guestbook tests.

This module provides:
- In-memory and file-backed stores
- A repository bound to the in-memory store
- An API client whose lifespan bootstraps a fresh store

Usage:
    Fixtures are auto-discovered by pytest; request them by name.

    def test_something(repo):
        repo.append(Entry(who="boss", message="hi!"))
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from guestbook.api.app import create_app
from guestbook.api.settings import GuestbookAPISettings
from guestbook.core.connection import Store, bootstrap_store
from guestbook.core.logging import clear_context
from guestbook.core.repository import EntryRepository


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if test_path.parts and test_path.parts[0] == "api":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clean_log_context() -> Generator[None, None, None]:
    """No structlog context leaks from one test into the next."""
    clear_context()
    yield
    clear_context()


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store() -> Generator[Store, None, None]:
    """Freshly bootstrapped in-memory store."""
    s = bootstrap_store(":memory:")
    yield s
    s.close()


@pytest.fixture
def repo(store: Store) -> EntryRepository:
    return EntryRepository(store)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Location of a not-yet-created database file."""
    return tmp_path / "data" / "guestbook.db"


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def settings() -> GuestbookAPISettings:
    return GuestbookAPISettings(database_url=":memory:", log_level="WARNING")


@pytest.fixture
def client(settings: GuestbookAPISettings) -> Generator[TestClient, None, None]:
    """Test client; entering it runs the lifespan, which bootstraps the store."""
    app = create_app(settings=settings)
    with TestClient(app) as c:
        yield c
