"""Display formatting for the weighing log."""

from decimal import Decimal, ROUND_HALF_UP

import click

from weighstation.config import Config
from weighstation.domain.entities import DISPLAY_FIELDS, Draft, EntryRow, Span
from weighstation.station import WeighStation

COLUMNS = {
    "plate_number": ("Plate", 12),
    "gross_weight_kg": ("Gross kg", 9),
    "empty_weight_kg": ("Empty kg", 9),
    "net_weight_kg": ("Net kg", 9),
    "date": ("Date", 10),
    "charge": ("Charge", 12),
    "check_number": ("Check #", 10),
}


def format_weight(kg: int) -> str:
    """Format a weight with thousands separators, e.g. 32,000."""
    return f"{kg:,}"


def format_charge(amount: Decimal) -> str:
    """Format a charge in the station currency with no fractional digits."""
    whole = Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{Config.CURRENCY} {int(whole):,}"


def render_spans(spans: list[Span]) -> str:
    """Join spans, coloring the parts that matched the search."""
    return "".join(
        click.style(span.text, fg="red", bold=True) if span.matched else span.text
        for span in spans
    )


def _pad(styled: str, plain: str, width: int) -> str:
    # ANSI codes take no room on screen, so pad by the plain text length.
    return styled + " " * max(width - len(plain), 0)


def render_header() -> str:
    cells = [f"{'':<2}{'ID':<10}"]
    cells.extend(f"{title:<{width}}" for title, width in COLUMNS.values())
    return " ".join(cells)


def render_row(row: EntryRow, selected: bool = False) -> str:
    """Render one log row from its highlight spans."""
    marker = "* " if selected else "  "
    cells = [f"{marker}{row.entry.id[:10]:<10}"]
    for field in DISPLAY_FIELDS:
        spans = row.spans[field]
        plain = "".join(span.text for span in spans)
        cells.append(_pad(render_spans(spans), plain, COLUMNS[field][1]))
    return " ".join(cells)


def render_table(station: WeighStation) -> list[str]:
    """Render the visible log as lines of text."""
    lines = []
    if station.alarm_active:
        lines.append(click.style("ALARM ACTIVE", fg="red", bold=True))
    if station.query.strip():
        lines.append(f"Search: {station.query.strip()}")

    rows = station.rows()
    lines.append(render_header())
    lines.append("-" * 100)
    if not rows:
        lines.append("No matching caravans found.")
    for row in rows:
        lines.append(render_row(row, selected=row.entry.id == station.selected_id))
    return lines


def render_draft(draft: Draft, net_weight_kg: int) -> str:
    """Render the form contents on one line."""
    mode = f"Editing {draft.edit_target_id}" if draft.edit_target_id else "New entry"
    return (
        f"{mode}: plate={draft.plate_number!r} gross={draft.gross_weight_kg!r} "
        f"empty={draft.empty_weight_kg!r} net={net_weight_kg} date={draft.date!r} "
        f"charge={draft.charge!r} check={draft.check_number!r}"
    )


def render_manifest(station: WeighStation) -> list[str]:
    """Render the displayed entries for printing, with formatted numbers."""
    lines = [f"{Config.APP_NAME} - Manifest"]
    lines.append(
        f"{'Plate':<12} {'Gross':>10} {'Empty':>10} {'Net':>10} {'Date':<10} {'Charge':>14} {'Check #':<10}"
    )
    lines.append("=" * 86)
    entries = station.print_snapshot()
    for entry in entries:
        lines.append(
            f"{entry.plate_number:<12} {format_weight(entry.gross_weight_kg):>10} "
            f"{format_weight(entry.empty_weight_kg):>10} {format_weight(entry.net_weight_kg):>10} "
            f"{entry.date.isoformat():<10} {format_charge(entry.charge):>14} {entry.check_number:<10}"
        )
    lines.append("=" * 86)
    lines.append(f"{len(entries)} entr{'y' if len(entries) == 1 else 'ies'}")
    return lines
