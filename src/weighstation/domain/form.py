"""Form state: the draft entry being typed in."""

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from weighstation.domain.entities import DRAFT_FIELDS, Draft, Entry
from weighstation.domain.errors import (
    ValidationError,
    plate_number_required,
    unknown_draft_field,
)
from weighstation.domain.weights import compute_net
from weighstation.utils.date_parser import parse_entry_date
from weighstation.utils.number_parser import format_number, parse_charge, parse_weight

logger = logging.getLogger(__name__)


class FormState:
    """Holds the draft and the ID of the entry it will replace, if any.

    The draft is raw text and is only validated by build_entry().
    """

    def __init__(self):
        self.draft = Draft()

    @property
    def edit_target_id(self) -> Optional[str]:
        return self.draft.edit_target_id

    @property
    def is_editing(self) -> bool:
        return self.draft.edit_target_id is not None

    @property
    def net_weight_kg(self) -> int:
        """Live net weight for the current draft text."""
        return compute_net(self.draft.gross_weight_kg, self.draft.empty_weight_kg)

    def set_field(self, field: str, raw_value: Optional[str]) -> None:
        """Store raw text for one draft field.

        Raises:
            ValidationError: If the draft has no such field
        """
        if field not in DRAFT_FIELDS:
            raise ValidationError(unknown_draft_field(field))
        self.draft = replace(self.draft, **{field: raw_value or ""})

    def load_from_entry(self, entry: Entry) -> None:
        """Fill the draft from an existing entry and make it the edit target."""
        self.draft = Draft(
            plate_number=entry.plate_number,
            gross_weight_kg=str(entry.gross_weight_kg),
            empty_weight_kg=str(entry.empty_weight_kg),
            date=entry.date.isoformat(),
            charge=format_number(entry.charge),
            check_number=entry.check_number,
            edit_target_id=entry.id,
        )

    def clear(self) -> None:
        """Reset the draft to empty and drop the edit target."""
        self.draft = Draft()

    def build_entry(self, today: Optional[date] = None) -> Entry:
        """Convert the draft into a candidate entry.

        The ID is the edit target, or empty for a new entry (the repository
        mints one). The draft itself is left untouched.

        Args:
            today: Date used when the draft has no date (defaults to date.today())

        Returns:
            Candidate entry

        Raises:
            ValidationError: If the plate number is blank
        """
        draft = self.draft
        plate_number = draft.plate_number.strip().upper()
        if not plate_number:
            raise ValidationError(plate_number_required())

        gross = parse_weight(draft.gross_weight_kg)
        empty = parse_weight(draft.empty_weight_kg)
        return Entry(
            id=draft.edit_target_id or "",
            plate_number=plate_number,
            gross_weight_kg=gross,
            empty_weight_kg=empty,
            net_weight_kg=compute_net(gross, empty),
            date=parse_entry_date(draft.date, today=today),
            charge=parse_charge(draft.charge),
            check_number=draft.check_number.strip().upper(),
        )
