"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested entry does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate entry ID."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def duplicate_entry_id(entry_id: str) -> str:
    """Return message for an entry ID that is already taken."""
    return f"Entry with ID '{entry_id}' already exists"


def plate_number_required() -> str:
    """Return message for a draft submitted without a plate number."""
    return "Plate number is required"


def unknown_draft_field(field: str) -> str:
    """Return message for an edit to a field the draft does not have."""
    return f"Unknown field '{field}'"
