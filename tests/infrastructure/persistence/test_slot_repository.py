"""Tests for slot repositories."""

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from utilsuite.infrastructure.persistence import (
    DatabaseManager,
    InMemorySlotRepository,
    SQLiteSlotRepository,
)


@pytest.fixture
def db_manager() -> Generator[DatabaseManager, None, None]:
    """Create an in-memory database with tables."""
    manager = DatabaseManager(":memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def repository(db_manager: DatabaseManager) -> SQLiteSlotRepository:
    """Create test repository."""
    return SQLiteSlotRepository(db_manager.get_session)


class TestSQLiteSlotRepository:
    """SQLiteSlotRepository tests."""

    def test_read_missing(self, repository: SQLiteSlotRepository) -> None:
        """Test reading an unwritten key returns None."""
        assert repository.read("SavedNotes") is None

    def test_write_and_read(self, repository: SQLiteSlotRepository) -> None:
        """Test written bytes are read back unchanged."""
        assert repository.write("SavedNotes", b'[{"id": "1"}]') is True

        assert repository.read("SavedNotes") == b'[{"id": "1"}]'

    def test_write_overwrites(self, repository: SQLiteSlotRepository) -> None:
        """Test a second write replaces the first."""
        repository.write("SavedTodos", b"[1]")
        repository.write("SavedTodos", b"[2]")

        assert repository.read("SavedTodos") == b"[2]"
        assert repository.keys() == ["SavedTodos"]

    def test_keys_sorted(self, repository: SQLiteSlotRepository) -> None:
        """Test keys are listed in ascending order."""
        repository.write("b", b"[]")
        repository.write("a", b"[]")

        assert repository.keys() == ["a", "b"]

    def test_delete(self, repository: SQLiteSlotRepository) -> None:
        """Test deleting a slot."""
        repository.write("a", b"[]")

        assert repository.delete("a") is True
        assert repository.read("a") is None
        assert repository.delete("a") is False

    def test_persists_across_managers(self, tmp_path: Path) -> None:
        """Test data survives reopening the database file."""
        db_path = str(tmp_path / "slots.db")
        first = DatabaseManager(db_path)
        first.create_tables()
        SQLiteSlotRepository(first.get_session).write("SavedNotes", b"[]")
        first.close()

        second = DatabaseManager(db_path)
        try:
            assert SQLiteSlotRepository(second.get_session).read("SavedNotes") == b"[]"
        finally:
            second.close()

    def test_failures_are_not_raised(self) -> None:
        """Test database errors become None / False."""

        @contextmanager
        def broken_session() -> Generator[Session, None, None]:
            raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))
            yield  # pragma: no cover

        repository = SQLiteSlotRepository(broken_session)

        assert repository.read("a") is None
        assert repository.write("a", b"[]") is False
        assert repository.delete("a") is False
        assert repository.keys() == []

    def test_missing_table_write_fails(self) -> None:
        """Test writing before tables exist reports failure."""
        manager = DatabaseManager(":memory:")
        repository = SQLiteSlotRepository(manager.get_session)

        assert repository.write("a", b"[]") is False
        manager.close()


class TestInMemorySlotRepository:
    """InMemorySlotRepository tests."""

    def test_round_trip(self) -> None:
        """Test write then read."""
        slot = InMemorySlotRepository()

        assert slot.read("a") is None
        assert slot.write("a", b"xyz") is True
        assert slot.read("a") == b"xyz"

    def test_keys_and_delete(self) -> None:
        """Test listing and deleting keys."""
        slot = InMemorySlotRepository()
        slot.write("b", b"")
        slot.write("a", b"")

        assert slot.keys() == ["a", "b"]
        assert slot.delete("a") is True
        assert slot.delete("a") is False
        assert slot.keys() == ["b"]
