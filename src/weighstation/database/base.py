"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from weighstation.domain.entities import Entry


class Database(ABC):
    """Abstract database interface for the weighing log.

    Entries are kept in display order: most recently created first.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def insert_entry(self, entry: Entry) -> None:
        """Insert an entry in front of all existing entries."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def entry_exists(self, entry_id: str) -> bool:
        """Check if an entry with the given ID exists."""
        pass

    @abstractmethod
    def replace_entry(self, entry: Entry) -> None:
        """Replace all fields of the entry with the same ID, keeping its position."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""
        pass

    @abstractmethod
    def delete_all_entries(self) -> None:
        """Delete every entry."""
        pass

    @abstractmethod
    def list_entries(self) -> list[Entry]:
        """List all entries, most recently created first."""
        pass
