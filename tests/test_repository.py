"""Tests for the entry repository."""

import pytest
from datetime import date
from decimal import Decimal

from weighstation.domain.errors import ConflictError, NotFoundError
from weighstation.domain.seed import SEED_ENTRIES


class TestCreate:
    """Tests for creating entries."""

    def test_create_mints_id(self, repository, make_entry):
        """Test that an entry without ID gets a fresh one."""
        entry = repository.create(make_entry())

        assert entry.id
        assert repository.get(entry.id) == entry

    def test_minted_ids_are_unique(self, repository, make_entry):
        """Test that identical entries still get distinct IDs."""
        ids = {repository.create(make_entry()).id for _ in range(20)}
        assert len(ids) == 20

    def test_create_keeps_supplied_id(self, repository, make_entry):
        """Test that a supplied ID is used as is."""
        entry = repository.create(make_entry(id="manual"))
        assert entry.id == "manual"

    def test_create_duplicate_id(self, repository, make_entry):
        """Test that a supplied ID already in use is a conflict."""
        repository.create(make_entry(id="manual"))
        with pytest.raises(ConflictError, match="already exists"):
            repository.create(make_entry(id="manual"))
        assert len(repository.list_entries()) == 1

    def test_create_goes_first(self, repository, make_entry):
        """Test most-recent-first ordering."""
        first = repository.create(make_entry(plate_number="FIRST"))
        second = repository.create(make_entry(plate_number="SECOND"))

        assert [e.id for e in repository.list_entries()] == [second.id, first.id]

    def test_create_recomputes_net_weight(self, repository, make_entry):
        """Test a stored net weight always matches gross and empty."""
        entry = repository.create(
            make_entry(gross_weight_kg=30000, empty_weight_kg=10000, net_weight_kg=1)
        )
        assert entry.net_weight_kg == 20000


class TestUpdate:
    """Tests for updating entries."""

    def test_update_replaces_in_place(self, repository, make_entry):
        """Test update replaces every field and keeps the position."""
        a = repository.create(make_entry(plate_number="A"))
        b = repository.create(make_entry(plate_number="B"))
        c = repository.create(make_entry(plate_number="C"))

        updated = repository.update(
            b.id,
            make_entry(
                plate_number="B2",
                gross_weight_kg=9000,
                empty_weight_kg=4000,
                net_weight_kg=0,
                date=date(2024, 1, 2),
                charge=Decimal("100"),
                check_number="",
            ),
        )

        assert updated.id == b.id
        assert updated.plate_number == "B2"
        assert updated.net_weight_kg == 5000
        assert updated.check_number == ""
        entries = repository.list_entries()
        assert [e.id for e in entries] == [c.id, b.id, a.id]
        assert entries[0] == c
        assert entries[2] == a

    def test_update_ignores_candidate_id(self, repository, make_entry):
        """Test the target ID wins over the ID carried by the new values."""
        a = repository.create(make_entry())
        updated = repository.update(a.id, make_entry(id="other"))
        assert updated.id == a.id
        assert repository.get("other") is None

    def test_update_missing(self, repository, make_entry):
        """Test updating a missing entry raises NotFoundError and changes nothing."""
        repository.create(make_entry())
        before = repository.list_entries()

        with pytest.raises(NotFoundError, match="not found"):
            repository.update("missing", make_entry())

        assert repository.list_entries() == before


class TestDelete:
    """Tests for deleting entries."""

    def test_delete(self, repository, make_entry):
        """Test delete removes the entry and keeps the rest in order."""
        a = repository.create(make_entry())
        b = repository.create(make_entry())
        c = repository.create(make_entry())

        assert repository.delete(b.id) is True
        assert [e.id for e in repository.list_entries()] == [c.id, a.id]

    def test_delete_missing(self, repository, make_entry):
        """Test deleting a missing entry is a no-op."""
        repository.create(make_entry())
        assert repository.delete("missing") is False
        assert len(repository.list_entries()) == 1


class TestGetAndReset:
    """Tests for lookups and reset."""

    def test_get_none(self, repository):
        """Test looking up no ID."""
        assert repository.get(None) is None
        assert repository.get("missing") is None

    def test_reset_loads_seed_in_order(self, repository, make_entry):
        """Test reset replaces the whole log with the seed, in seed order."""
        repository.create(make_entry())

        entries = repository.reset(SEED_ENTRIES)

        assert entries == list(SEED_ENTRIES)
        assert repository.list_entries() == list(SEED_ENTRIES)

    def test_reset_then_create_goes_first(self, repository, make_entry):
        """Test new entries still go first after a reset."""
        repository.reset(SEED_ENTRIES)
        entry = repository.create(make_entry())
        assert [e.id for e in repository.list_entries()] == [entry.id, "1", "2"]
