"""
Decimal utilities for monetary rounding.

Financial answers arrive as floats or strings from the client; all
arithmetic on them is done in Decimal and rounded to cents half-up.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

Numeric = Union[int, float, str, Decimal]

MONEY_PLACES = Decimal("0.01")


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"Boolean is not an amount: {value!r}")
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        value = value.replace("$", "").replace(",", "").strip()
    return Decimal(value)


def money(value: Numeric) -> Decimal:
    """Round value to cents using ROUND_HALF_UP."""
    return to_decimal(value).quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
