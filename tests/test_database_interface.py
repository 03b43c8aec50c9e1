"""Tests for the SQLAlchemy database returning domain models in log order."""

import pytest

from weighstation.database.factories import create_memory_database
from weighstation.domain import entities
from weighstation.domain.errors import NotFoundError


class TestDatabaseInterface:
    """Tests to verify the Database interface."""

    def test_get_entry_returns_domain_model(self, temp_db, make_entry):
        """Test that get_entry returns a domain Entry entity."""
        temp_db.insert_entry(make_entry(id="a"))

        entry = temp_db.get_entry("a")

        assert isinstance(entry, entities.Entry)
        assert entry == make_entry(id="a")

    def test_get_missing_entry(self, temp_db):
        """Test that a missing entry is None."""
        assert temp_db.get_entry("missing") is None
        assert not temp_db.entry_exists("missing")

    def test_insert_puts_entry_first(self, temp_db, make_entry):
        """Test that each insert goes to the front of the list."""
        for entry_id in ("a", "b", "c"):
            temp_db.insert_entry(make_entry(id=entry_id))

        assert [e.id for e in temp_db.list_entries()] == ["c", "b", "a"]

    def test_replace_keeps_position(self, temp_db, make_entry):
        """Test that replacing an entry keeps its place."""
        for entry_id in ("a", "b", "c"):
            temp_db.insert_entry(make_entry(id=entry_id))

        temp_db.replace_entry(make_entry(id="b", plate_number="CHANGED"))

        entries = temp_db.list_entries()
        assert [e.id for e in entries] == ["c", "b", "a"]
        assert entries[1].plate_number == "CHANGED"

    def test_replace_missing_entry(self, temp_db, make_entry):
        """Test that replacing a missing entry raises NotFoundError."""
        with pytest.raises(NotFoundError, match="not found"):
            temp_db.replace_entry(make_entry(id="missing"))

    def test_delete_entry(self, temp_db, make_entry):
        """Test deleting keeps the order of the rest."""
        for entry_id in ("a", "b", "c"):
            temp_db.insert_entry(make_entry(id=entry_id))

        temp_db.delete_entry("b")

        assert [e.id for e in temp_db.list_entries()] == ["c", "a"]
        with pytest.raises(NotFoundError):
            temp_db.delete_entry("b")

    def test_delete_all_entries(self, temp_db, make_entry):
        """Test clearing the log."""
        temp_db.insert_entry(make_entry(id="a"))
        temp_db.delete_all_entries()
        assert temp_db.list_entries() == []

    def test_databases_are_isolated(self, make_entry):
        """Test that each in-memory database starts empty."""
        first = create_memory_database()
        second = create_memory_database()
        try:
            first.insert_entry(make_entry(id="a"))
            assert len(first.list_entries()) == 1
            assert second.list_entries() == []
        finally:
            first.disconnect()
            second.disconnect()

    def test_data_survives_reconnect(self, temp_db, make_entry):
        """Test that closing the session keeps the in-memory data."""
        temp_db.insert_entry(make_entry(id="a"))
        temp_db.disconnect()
        assert [e.id for e in temp_db.list_entries()] == ["a"]

    def test_failed_commit_is_rolled_back(self, temp_db, make_entry):
        """Test the database stays usable after a commit fails."""
        temp_db.insert_entry(make_entry(id="a"))

        with pytest.raises(OverflowError):
            temp_db.insert_entry(make_entry(id="b", gross_weight_kg=10**20))

        assert [e.id for e in temp_db.list_entries()] == ["a"]
        temp_db.insert_entry(make_entry(id="c"))
        assert [e.id for e in temp_db.list_entries()] == ["c", "a"]
