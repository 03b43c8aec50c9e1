"""Date parsing utilities."""

import logging
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports ISO dates ("2024-06-17"), other absolute formats understood by
    dateutil ("June 17, 2024") and the relative words "today", "yesterday"
    and "tomorrow".

    Args:
        date_str: Date string in various formats
        today: Reference date for relative words (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_entry_date(date_str: Optional[str], today: Optional[date] = None) -> date:
    """Parse the date field of a draft.

    Blank text means today. Text that cannot be parsed also falls back to
    today; it is logged, not rejected.
    """
    today = today or date.today()
    if date_str is None or not date_str.strip():
        return today

    try:
        return parse_date(date_str, today=today)
    except ValueError as e:
        logger.warning("%s; using %s", e, today.isoformat())
        return today
