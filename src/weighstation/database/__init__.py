"""Database layer for weighstation."""

from weighstation.database.base import Database
from weighstation.database.factories import create_memory_database

__all__ = ["Database", "create_memory_database"]
