"""Session store for the weighing screen.

WeighStation owns everything one operator session works with: the entry
log, the draft being typed, the selected row and the search query. The
presentation layer calls its action methods and renders what it returns;
it keeps no state of its own.
"""

import logging
from datetime import date
from typing import Callable, Iterable, Optional

from weighstation.database.base import Database
from weighstation.database.factories import create_memory_database
from weighstation.domain.entities import Draft, Entry, EntryRow
from weighstation.domain.errors import NotFoundError, ValidationError
from weighstation.domain.form import FormState
from weighstation.domain.highlight import highlight_entry
from weighstation.domain.repository import EntryRepository
from weighstation.domain.search import filter_entries
from weighstation.domain.seed import SEED_ENTRIES

logger = logging.getLogger(__name__)

Listener = Callable[["WeighStation"], None]


class WeighStation:
    """Store holding the entry log, draft, selection and search query.

    Every action runs to completion and then notifies subscribers. Actions
    that cannot apply (no selection, stale ID, blank plate number) leave the
    state untouched and notify nobody.
    """

    def __init__(
        self,
        db: Optional[Database] = None,
        seed: Iterable[Entry] = SEED_ENTRIES,
        today: Optional[Callable[[], date]] = None,
    ):
        """Initialize the store and load the seed log.

        Args:
            db: Database instance (defaults to a fresh in-memory database)
            seed: Entries loaded at start and on reload
            today: Callable returning the current date, for drafts without one
        """
        if db is None:
            db = create_memory_database()
            db.connect()
            db.initialize_schema()
        self.db = db
        self.repository = EntryRepository(db)
        self.form = FormState()
        self.seed = tuple(seed)
        self.selected_id: Optional[str] = None
        self.query = ""
        # Environmental status shown by the screen; nothing in the log drives it.
        self.alarm_active = True
        self._today = today or date.today
        self._listeners: list[Listener] = []

        self.repository.reset(self.seed)

    def close(self) -> None:
        """Release the database session."""
        self.db.disconnect()

    # Observers
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # Form
    @property
    def draft(self) -> Draft:
        return self.form.draft

    @property
    def edit_target_id(self) -> Optional[str]:
        return self.form.edit_target_id

    @property
    def net_weight_preview(self) -> int:
        """Net weight for what is currently typed in the form."""
        return self.form.net_weight_kg

    def set_field(self, field: str, raw_value: Optional[str]) -> None:
        """Store raw text typed into one form field."""
        self.form.set_field(field, raw_value)
        self._notify()

    def create_mode(self) -> None:
        """Start a new entry: empty form, no edit target."""
        self.form.clear()
        self._notify()

    def edit_selected(self) -> Optional[Entry]:
        """Load the selected entry into the form for editing.

        Returns:
            The entry being edited, or None if nothing (existing) is selected
        """
        entry = self.repository.get(self.selected_id)
        if entry is None:
            logger.debug("Edit ignored: no entry selected")
            return None

        self.form.load_from_entry(entry)
        self._notify()
        return entry

    def submit(self) -> Optional[Entry]:
        """Commit the draft as a new entry or over its edit target.

        On success the form is cleared and the committed entry selected. A
        draft without a plate number, or whose edit target no longer exists,
        is left as it is.

        Returns:
            The committed entry, or None if nothing was committed
        """
        try:
            candidate = self.form.build_entry(today=self._today())
        except ValidationError as e:
            logger.warning("Submit rejected: %s", e)
            return None

        try:
            if self.form.is_editing:
                entry = self.repository.update(self.form.edit_target_id, candidate)
            else:
                entry = self.repository.create(candidate)
        except NotFoundError as e:
            logger.warning("Submit rejected: %s", e)
            return None

        self.form.clear()
        self.selected_id = entry.id
        self._notify()
        return entry

    # Log
    def delete(self, entry_id: str) -> bool:
        """Delete an entry, ending the edit session if it was the edit target."""
        if not self.repository.delete(entry_id):
            return False

        if self.form.edit_target_id == entry_id:
            self.form.clear()
        if self.selected_id == entry_id:
            self.selected_id = None
        self._notify()
        return True

    def delete_selected(self) -> bool:
        """Delete the selected entry. Returns False if nothing was deleted."""
        if self.selected_id is None:
            logger.debug("Delete ignored: no entry selected")
            return False
        return self.delete(self.selected_id)

    def reload(self) -> None:
        """Restore the seed log and clear selection, form and query."""
        self.repository.reset(self.seed)
        self.form.clear()
        self.selected_id = None
        self.query = ""
        self._notify()

    # Selection
    def select(self, entry_id: Optional[str]) -> None:
        """Select an entry, or clear the selection with None.

        The ID is not checked; a stale ID simply selects nothing.
        """
        self.selected_id = entry_id
        logger.debug("Selected %s", entry_id)
        self._notify()

    def row_clicked(self, entry_id: str) -> None:
        self.select(entry_id)

    def clear_selection(self) -> None:
        self.select(None)

    @property
    def selected_entry(self) -> Optional[Entry]:
        return self.repository.get(self.selected_id)

    # Search
    def set_query(self, text: Optional[str]) -> None:
        """Set the search query. Matching ignores surrounding whitespace."""
        self.query = text or ""
        logger.debug("Search query %r", self.query)
        self._notify()

    # Output
    @property
    def entries(self) -> list[Entry]:
        """Every entry in the log, most recent first."""
        return self.repository.list_entries()

    def visible_entries(self) -> list[Entry]:
        """Entries matching the current query, in log order."""
        return filter_entries(self.repository.list_entries(), self.query)

    def rows(self) -> list[EntryRow]:
        """Visible entries with highlight spans for each displayed field."""
        return [
            EntryRow(entry=entry, spans=highlight_entry(entry, self.query))
            for entry in self.visible_entries()
        ]

    def print_snapshot(self) -> list[Entry]:
        """Entries as currently displayed, for printing."""
        return self.visible_entries()
