"""
Answer value helpers.

Answers arrive from the client as loosely-typed JSON (strings, numbers,
booleans, lists of strings). These helpers give every consumer the same
notion of "empty", "number" and "text" for such values.
"""

import math
from typing import Any


def is_empty(value: Any) -> bool:
    """True for None, empty string and empty list. Zero and False are not empty."""
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    if isinstance(value, (list, tuple)) and len(value) == 0:
        return True
    return False


def to_number(value: Any) -> float:
    """
    Coerce an answer to a float.

    Missing, blank and non-numeric values become NaN so that any ordered
    comparison against them is false.
    """
    if value is None or isinstance(value, (list, tuple, dict)):
        return math.nan
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        return math.nan
    try:
        number = float(text)
    except ValueError:
        return math.nan
    if math.isnan(number):
        return math.nan
    return number


def stringify(value: Any) -> str:
    """Render an answer as text (booleans lower-case, integral floats without .0)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(v) for v in value)
    return str(value)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that does not treat booleans as numbers or numbers as strings."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    if isinstance(left, str) != isinstance(right, str):
        return False
    return left == right
