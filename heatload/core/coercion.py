"""
Boundary coercion of user-entered values.

Numbers typed into a form arrive as strings, empty strings or nothing at all.
Anything that cannot be read as a finite number is stored as 0 so that no
missing or NaN value ever reaches the project state.
"""

import math
from typing import Any


def coerce_number(value: Any) -> float:
    """
    Coerce a value to a finite float, falling back to 0.0.

    Args:
        value: Raw input (number, numeric string, empty string, None, ...)

    Returns:
        The numeric value, or 0.0 if the input is not a finite number

    Example:
        >>> coerce_number("12.5")
        12.5
        >>> coerce_number("")
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except (ValueError, OverflowError):
            return 0.0
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_int(value: Any) -> int:
    """Coerce a value to an int (truncating), falling back to 0."""
    return int(coerce_number(value))


def coerce_text(value: Any) -> str:
    """Coerce a value to a string; None becomes an empty string."""
    if value is None:
        return ""
    return str(value)
