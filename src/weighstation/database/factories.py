"""Database factory functions for creating database instances."""

from typing import Optional

from weighstation.config import Config
from weighstation.database.sqlalchemy_db import SQLAlchemyDatabase


def create_memory_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a database instance for one operator session.

    Args:
        database_url: SQLAlchemy URL. Defaults to Config.DATABASE_URL, an
            in-memory SQLite database that disappears with the session.

    Returns:
        SQLAlchemyDatabase instance
    """
    return SQLAlchemyDatabase(database_url or Config.DATABASE_URL)
