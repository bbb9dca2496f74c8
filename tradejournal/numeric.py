"""Numeric parsing with zero fallback.

Trade prices and P&L may be stored as text. Every value that does not
parse to a finite number is treated as 0 so that no aggregate ever
becomes NaN or raises.
"""

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def parse_number(value: Any, default: float = 0.0) -> float:
    """Parse a value into a finite float.

    Args:
        value: A number, numeric string, Decimal or None.
        default: Returned when the value is absent or not a finite number.

    Returns:
        The parsed float, or ``default``.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    elif not isinstance(value, (int, float, Decimal)):
        return default

    try:
        number = float(value)
    except (InvalidOperation, OverflowError, ValueError):
        return default

    if math.isnan(number) or math.isinf(number):
        return default
    return number


def is_blank(value: Any) -> bool:
    """Check whether a raw field value counts as absent."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_optional_number(value: Any) -> Optional[float]:
    """Parse a value that may legitimately be absent.

    Absent (None or blank text) stays None; anything present is parsed
    with :func:`parse_number`, so unparseable text becomes 0.0.
    """
    if is_blank(value):
        return None
    return parse_number(value)


def parse_quantity(value: Any) -> int:
    """Parse a trade quantity into a non-negative integer."""
    return max(0, int(parse_number(value)))


def safe_div(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 instead of failing on a zero denominator."""
    if not denominator:
        return 0.0
    return numerator / denominator
