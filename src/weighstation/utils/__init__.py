"""Utility functions for weighstation."""

from weighstation.utils.date_parser import parse_date, parse_entry_date
from weighstation.utils.number_parser import (
    format_number,
    parse_charge,
    parse_number,
    parse_weight,
)

__all__ = [
    "parse_date",
    "parse_entry_date",
    "format_number",
    "parse_charge",
    "parse_number",
    "parse_weight",
]
