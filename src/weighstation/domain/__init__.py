"""Domain layer for weighstation."""

from weighstation.domain.form import FormState
from weighstation.domain.highlight import highlight, highlight_entry
from weighstation.domain.repository import EntryRepository
from weighstation.domain.search import filter_entries
from weighstation.domain.weights import compute_net

__all__ = [
    "FormState",
    "highlight",
    "highlight_entry",
    "EntryRepository",
    "filter_entries",
    "compute_net",
]
