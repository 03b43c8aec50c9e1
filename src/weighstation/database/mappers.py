"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from weighstation.domain import entities as domain
from weighstation.database.models import Entry as ORMEntry


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    return domain.Entry(
        id=orm_entry.id,
        plate_number=orm_entry.plate_number,
        gross_weight_kg=orm_entry.gross_weight_kg,
        empty_weight_kg=orm_entry.empty_weight_kg,
        net_weight_kg=orm_entry.net_weight_kg,
        date=orm_entry.date,
        charge=Decimal(orm_entry.charge),
        check_number=orm_entry.check_number or "",
    )


def apply_entry(orm_entry: ORMEntry, entry: domain.Entry) -> ORMEntry:
    """Copy every field of a domain Entry onto a SQLAlchemy Entry model."""
    orm_entry.id = entry.id
    orm_entry.plate_number = entry.plate_number
    orm_entry.gross_weight_kg = entry.gross_weight_kg
    orm_entry.empty_weight_kg = entry.empty_weight_kg
    orm_entry.net_weight_kg = entry.net_weight_kg
    orm_entry.date = entry.date
    orm_entry.charge = entry.charge
    orm_entry.check_number = entry.check_number
    return orm_entry
