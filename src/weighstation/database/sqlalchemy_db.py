"""Generic SQLAlchemy database implementation."""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from weighstation.database.base import Database
from weighstation.database.models import Entry, create_session_factory
from weighstation.database.mappers import apply_entry, entry_to_domain
from weighstation.domain.entities import Entry as DomainEntry
from weighstation.domain.errors import NotFoundError, entry_not_found


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite://' for an
                in-memory database)
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _get_orm_entry(self, entry_id: str) -> Optional[Entry]:
        session = self._get_session()
        return session.query(Entry).filter(Entry.id == entry_id).first()

    def _commit(self) -> None:
        """Commit the session. A failed commit is rolled back and re-raised."""
        session = self._get_session()
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def insert_entry(self, entry: DomainEntry) -> None:
        """Insert an entry in front of all existing entries."""
        session = self._get_session()
        front = session.query(func.min(Entry.position)).scalar()
        position = 0 if front is None else front - 1
        session.add(apply_entry(Entry(position=position), entry))
        self._commit()

    def get_entry(self, entry_id: str) -> Optional[DomainEntry]:
        """Get entry by ID."""
        orm_entry = self._get_orm_entry(entry_id)
        if orm_entry is None:
            return None
        return entry_to_domain(orm_entry)

    def entry_exists(self, entry_id: str) -> bool:
        """Check if an entry with the given ID exists."""
        session = self._get_session()
        return session.query(Entry).filter(Entry.id == entry_id).count() > 0

    def replace_entry(self, entry: DomainEntry) -> None:
        """Replace all fields of the entry with the same ID, keeping its position."""
        orm_entry = self._get_orm_entry(entry.id)
        if orm_entry is None:
            raise NotFoundError(entry_not_found(entry.id))
        apply_entry(orm_entry, entry)
        self._commit()

    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""
        orm_entry = self._get_orm_entry(entry_id)
        if orm_entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        session = self._get_session()
        session.delete(orm_entry)
        self._commit()

    def delete_all_entries(self) -> None:
        """Delete every entry."""
        session = self._get_session()
        session.query(Entry).delete()
        self._commit()

    def list_entries(self) -> list[DomainEntry]:
        """List all entries, most recently created first."""
        session = self._get_session()
        entries = session.query(Entry).order_by(Entry.position).all()
        return [entry_to_domain(entry) for entry in entries]
