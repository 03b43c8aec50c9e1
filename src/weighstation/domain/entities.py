"""Domain model entities for weighstation.

These are pure data classes representing the weighing log, independent of
the database schema and of any presentation layer.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Entry:
    """One committed freight-weighing record."""

    id: str
    plate_number: str
    gross_weight_kg: int
    empty_weight_kg: int
    net_weight_kg: int
    date: date
    charge: Decimal
    check_number: str


# Draft fields in form order. net_weight_kg is derived, never edited.
DRAFT_FIELDS = (
    "plate_number",
    "gross_weight_kg",
    "empty_weight_kg",
    "date",
    "charge",
    "check_number",
)

# Entry fields shown in the log table, in column order.
DISPLAY_FIELDS = (
    "plate_number",
    "gross_weight_kg",
    "empty_weight_kg",
    "net_weight_kg",
    "date",
    "charge",
    "check_number",
)


@dataclass(frozen=True)
class Draft:
    """In-progress form content. All values are raw text."""

    plate_number: str = ""
    gross_weight_kg: str = ""
    empty_weight_kg: str = ""
    date: str = ""
    charge: str = ""
    check_number: str = ""
    edit_target_id: Optional[str] = None


@dataclass(frozen=True)
class Span:
    """A piece of displayed text, flagged when it matched the search query."""

    text: str
    matched: bool = False


@dataclass(frozen=True)
class EntryRow:
    """An entry together with the highlight spans for each displayed field."""

    entry: Entry
    spans: dict[str, list[Span]] = field(default_factory=dict)
