"""Tests for date parsing of the draft date field."""

import pytest
from datetime import date, timedelta

from weighstation.utils.date_parser import parse_date, parse_entry_date

TODAY = date(2024, 7, 1)


def test_parse_absolute_date():
    """Test parsing ISO dates."""
    assert parse_date("2024-06-17") == date(2024, 6, 17)


def test_parse_long_date():
    """Test parsing a written-out date."""
    assert parse_date("June 18, 2024") == date(2024, 6, 18)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()
    assert parse_date(" Today ", today=TODAY) == TODAY


def test_parse_yesterday_and_tomorrow():
    """Test parsing 'yesterday' and 'tomorrow'."""
    assert parse_date("yesterday", today=TODAY) == TODAY - timedelta(days=1)
    assert parse_date("tomorrow", today=TODAY) == TODAY + timedelta(days=1)


def test_parse_invalid_date():
    """Test that unparseable text raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_entry_date_blank_is_today():
    """Test that a blank draft date means today."""
    assert parse_entry_date("", today=TODAY) == TODAY
    assert parse_entry_date("   ", today=TODAY) == TODAY
    assert parse_entry_date(None, today=TODAY) == TODAY


def test_entry_date_parses_text():
    """Test that a filled-in draft date is parsed."""
    assert parse_entry_date("2024-06-18", today=TODAY) == date(2024, 6, 18)


def test_entry_date_invalid_falls_back_to_today(caplog):
    """Test that an unparseable draft date is logged and replaced by today."""
    with caplog.at_level("WARNING", logger="weighstation"):
        assert parse_entry_date("31st of Smarch", today=TODAY) == TODAY
    assert "Could not parse date" in caplog.text
