"""Shared pytest fixtures for weighstation tests."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from weighstation.database.factories import create_memory_database
from weighstation.domain.entities import Entry
from weighstation.domain.form import FormState
from weighstation.domain.repository import EntryRepository
from weighstation.station import WeighStation

TODAY = date(2024, 7, 1)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches, so no test writes to a closed stream."""
    yield
    logger = logging.getLogger("weighstation")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def temp_db():
    """Create an in-memory database for testing."""
    db = create_memory_database()
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()


@pytest.fixture
def repository(temp_db):
    """Create an EntryRepository with an empty database."""
    return EntryRepository(temp_db)


@pytest.fixture
def form():
    """Create an empty FormState."""
    return FormState()


@pytest.fixture
def station(temp_db):
    """Create a WeighStation loaded with the seed log and a fixed 'today'."""
    store = WeighStation(temp_db, today=lambda: TODAY)
    yield store
    store.close()


@pytest.fixture
def make_entry():
    """Build an Entry with sensible defaults."""

    def _make_entry(**overrides):
        values = {
            "id": "",
            "plate_number": "01A 123 BC",
            "gross_weight_kg": 25000,
            "empty_weight_kg": 10000,
            "net_weight_kg": 15000,
            "date": date(2024, 6, 20),
            "charge": Decimal("35000"),
            "check_number": "CHK-0200",
        }
        values.update(overrides)
        return Entry(**values)

    return _make_entry


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
