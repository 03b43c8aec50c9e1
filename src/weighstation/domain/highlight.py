"""Search highlighting: split display text into matched and unmatched spans."""

import re
from typing import Any

from weighstation.domain.entities import DISPLAY_FIELDS, Entry, Span
from weighstation.domain.search import entry_field_text


def highlight(value: Any, query: str) -> list[Span]:
    """Split the text of value around every occurrence of query.

    Occurrences are found left to right, case-insensitively and without
    overlapping. The query is matched literally. Joining the span texts
    gives back the original text.

    Args:
        value: Value to display (converted with str())
        query: Search query; surrounding whitespace is ignored

    Returns:
        List of spans. A blank query gives a single unmatched span.
    """
    content = "" if value is None else str(value)
    term = (query or "").strip()
    if not term:
        return [Span(content)]

    # With a capturing group, re.split puts every match at an odd index.
    parts = re.split(f"({re.escape(term)})", content, flags=re.IGNORECASE)
    return [Span(part, matched=index % 2 == 1) for index, part in enumerate(parts) if part]


def highlight_entry(entry: Entry, query: str) -> dict[str, list[Span]]:
    """Return highlight spans for each displayed field of an entry."""
    return {field: highlight(entry_field_text(entry, field), query) for field in DISPLAY_FIELDS}
