"""Initial weighing log loaded at session start and on reload."""

from datetime import date
from decimal import Decimal

from weighstation.domain.entities import Entry

SEED_ENTRIES = (
    Entry(
        id="1",
        plate_number="30A 777 AA",
        gross_weight_kg=32000,
        empty_weight_kg=12000,
        net_weight_kg=20000,
        date=date(2024, 6, 17),
        charge=Decimal("30000"),
        check_number="CHK-0092",
    ),
    Entry(
        id="2",
        plate_number="80B 905 BB",
        gross_weight_kg=28000,
        empty_weight_kg=11000,
        net_weight_kg=17000,
        date=date(2024, 6, 18),
        charge=Decimal("40000"),
        check_number="CHK-0118",
    ),
)
