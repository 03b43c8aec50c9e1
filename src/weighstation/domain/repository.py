"""Entry repository: the ordered weighing log."""

import logging
import uuid
from dataclasses import replace
from typing import TYPE_CHECKING, Iterable, Optional

from weighstation.domain.entities import Entry
from weighstation.domain.errors import (
    ConflictError,
    NotFoundError,
    duplicate_entry_id,
    entry_not_found,
)
from weighstation.domain.weights import compute_net

if TYPE_CHECKING:
    from weighstation.database.base import Database

logger = logging.getLogger(__name__)


def new_entry_id() -> str:
    """Mint a fresh, unique entry ID."""
    return uuid.uuid4().hex


class EntryRepository:
    """Service for managing the ordered collection of entries.

    New entries go to the front; updates keep an entry's position; deleting
    an entry keeps the order of the rest.
    """

    def __init__(self, db: "Database"):
        """Initialize entry repository.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _with_net_weight(entry: Entry) -> Entry:
        net = compute_net(entry.gross_weight_kg, entry.empty_weight_kg)
        if net == entry.net_weight_kg:
            return entry
        return replace(entry, net_weight_kg=net)

    def create(self, entry: Entry) -> Entry:
        """Insert an entry at the front of the log.

        Args:
            entry: Entry to insert. An empty ID is replaced by a freshly
                minted one.

        Returns:
            The stored entry

        Raises:
            ConflictError: If an entry with the supplied ID already exists
        """
        if not entry.id:
            entry = replace(entry, id=new_entry_id())
        elif self.db.entry_exists(entry.id):
            raise ConflictError(duplicate_entry_id(entry.id))

        entry = self._with_net_weight(entry)
        self.db.insert_entry(entry)
        logger.info("Created entry %s (%s)", entry.id, entry.plate_number)
        return self.db.get_entry(entry.id)

    def update(self, entry_id: str, entry: Entry) -> Entry:
        """Replace the entry with the given ID, keeping its position.

        Args:
            entry_id: ID of the entry to replace
            entry: New field values; its own ID is ignored

        Returns:
            The stored entry

        Raises:
            NotFoundError: If no entry has this ID
        """
        if not self.db.entry_exists(entry_id):
            raise NotFoundError(entry_not_found(entry_id))

        entry = self._with_net_weight(replace(entry, id=entry_id))
        self.db.replace_entry(entry)
        logger.info("Updated entry %s (%s)", entry.id, entry.plate_number)
        return self.db.get_entry(entry_id)

    def delete(self, entry_id: str) -> bool:
        """Delete an entry. Returns False if there was nothing to delete."""
        if not self.db.entry_exists(entry_id):
            logger.debug("Nothing to delete: %s", entry_not_found(entry_id))
            return False

        self.db.delete_entry(entry_id)
        logger.info("Deleted entry %s", entry_id)
        return True

    def get(self, entry_id: Optional[str]) -> Optional[Entry]:
        """Get entry by ID, or None if it does not exist."""
        if entry_id is None:
            return None
        return self.db.get_entry(entry_id)

    def list_entries(self) -> list[Entry]:
        """List all entries, most recently created first."""
        return self.db.list_entries()

    def reset(self, seed: Iterable[Entry]) -> list[Entry]:
        """Replace the whole log with the given entries, in the given order."""
        self.db.delete_all_entries()
        # Inserting at the front reverses order, so insert back to front.
        for entry in reversed(list(seed)):
            self.db.insert_entry(self._with_net_weight(entry))
        entries = self.db.list_entries()
        logger.info("Reset log to %d entries", len(entries))
        return entries
