from __future__ import annotations

import math

from src.domain.models import GlobeCoordinateValue

# Beyond this a float carries no further decimal digits.
MAX_FRACTION_DIGITS = 17


def fraction_digits_for(precision: float) -> int:
    """Decimal places needed so the written value is at least as precise."""

    digits = math.ceil(-math.log10(precision) - 1e-9)
    return min(max(0, digits), MAX_FRACTION_DIGITS)


def format_coordinate(value: GlobeCoordinateValue) -> str:
    """Render ``value`` as decimal degrees that parse back to the same point."""

    digits = fraction_digits_for(value.precision)
    latitude = _fixed(value.latitude, digits)
    longitude = _fixed(value.longitude, digits)
    return f"{latitude}, {longitude}"


def _fixed(number: float, digits: int) -> str:
    text = f"{number:.{digits}f}"
    # Avoid "-0.00", which reads as a distinct value.
    if float(text) == 0.0:
        text = text.lstrip("-")
    return text
