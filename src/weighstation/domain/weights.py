"""Net weight calculation."""

from weighstation.utils.number_parser import NumberInput, parse_weight


def compute_net(gross: NumberInput, empty: NumberInput) -> int:
    """Return the net weight: gross minus empty weight, floored at zero.

    Accepts raw form text as well as numbers; anything that does not parse
    as a number counts as zero. Used both for the live form preview and
    when an entry is committed, so both always agree.
    """
    return max(parse_weight(gross) - parse_weight(empty), 0)
