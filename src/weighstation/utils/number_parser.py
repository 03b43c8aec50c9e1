"""Numeric parsing utilities.

Form fields arrive as free text. Blank or malformed numbers are not an
error: they are read as zero, and negative values are clamped to zero.
Numbers too large to store are read as zero as well.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

NumberInput = Union[str, int, float, Decimal, None]

# Largest values the entries table stores: an INTEGER weight column and a
# Numeric(12, 2) charge column.
MAX_WEIGHT_KG = 10**9
MAX_CHARGE = Decimal("9999999999.99")
CHARGE_PLACES = Decimal("0.01")


def parse_number(value: NumberInput) -> Decimal:
    """Parse a number, treating blank or malformed input as zero.

    Handles various formats:
    - "32000"
    - " 32000 "
    - "32,000"
    - "1e3"
    - "" or None (zero)
    - "abc", "NaN", "Infinity" (zero)

    Args:
        value: Raw text or an already numeric value

    Returns:
        Decimal value, never NaN or infinite
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return Decimal(0)
        try:
            number = Decimal(text)
        except InvalidOperation:
            return Decimal(0)

    if not number.is_finite():
        return Decimal(0)
    return number


def parse_weight(value: NumberInput) -> int:
    """Parse a weight in kilograms as a non-negative integer.

    Fractional kilograms are truncated. Weights above MAX_WEIGHT_KG are
    read as zero, like any other malformed input.
    """
    number = parse_number(value)
    if number < 0 or number > MAX_WEIGHT_KG:
        return 0
    return int(number)


def parse_charge(value: NumberInput) -> Decimal:
    """Parse a monetary amount as a non-negative Decimal in whole cents.

    Amounts are rounded half up to CHARGE_PLACES, the precision they are
    stored with. Amounts above MAX_CHARGE are read as zero.
    """
    number = parse_number(value)
    if number < 0 or number > MAX_CHARGE:
        return Decimal(0)
    return number.quantize(CHARGE_PLACES, rounding=ROUND_HALF_UP)


def format_number(value: Optional[Union[int, Decimal]]) -> str:
    """Render a number as plain text: no exponent, no trailing zeros.

    Examples: 32000 -> "32000", Decimal("30000.00") -> "30000",
    Decimal("1250.50") -> "1250.5".
    """
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if not value.is_finite():
        return str(value)
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")
