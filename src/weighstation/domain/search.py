"""Search filter over the weighing log."""

from typing import Iterable

from weighstation.domain.entities import Entry
from weighstation.utils.number_parser import format_number

# Fields the search looks at.
SEARCH_FIELDS = (
    "plate_number",
    "check_number",
    "date",
    "gross_weight_kg",
    "empty_weight_kg",
    "net_weight_kg",
    "charge",
)


def entry_field_text(entry: Entry, field: str) -> str:
    """Return the textual form of one entry field, as searched and displayed."""
    value = getattr(entry, field)
    if field == "date":
        return value.isoformat()
    if field in ("gross_weight_kg", "empty_weight_kg", "net_weight_kg", "charge"):
        return format_number(value)
    return value or ""


def entry_matches(entry: Entry, query: str) -> bool:
    """Check if any searched field contains the query, ignoring case.

    The query is used as given; callers strip it first.
    """
    term = query.lower()
    return any(term in entry_field_text(entry, field).lower() for field in SEARCH_FIELDS)


def filter_entries(entries: Iterable[Entry], query: str) -> list[Entry]:
    """Filter entries by a case-insensitive substring query.

    A blank query returns every entry. Order is always preserved.
    """
    entries = list(entries)
    term = (query or "").strip()
    if not term:
        return entries
    return [entry for entry in entries if entry_matches(entry, term)]
