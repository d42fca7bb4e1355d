from __future__ import annotations

import math
from decimal import Decimal

from src.domain.models import GrammarKind, LatLongValue

ARCMINUTE = 1.0 / 60.0
ARCSECOND = 1.0 / 3600.0

# Significant digits kept when a computed angle is written out as text.
_RENDER_DIGITS = 14


def digits_after_separator(text: str) -> int:
    """Count the characters after the first ``.`` (0 when there is none)."""

    _, separator, fraction = text.partition(".")
    return len(fraction) if separator else 0


def render_number(value: float) -> str:
    """Positional text for a computed float, e.g. 37830.0 -> "37830.0".

    The value is first rounded to 14 significant digits so binary noise such
    as 37815.50000000001 does not count as recorded digits.
    """

    rounded = float(f"{value:.{_RENDER_DIGITS}g}")
    return format(Decimal(repr(rounded)), "f")


def decimal_precision(degree_text: str) -> float:
    digits = digits_after_separator(degree_text)
    if digits == 0:
        return 1.0
    return 10.0 ** -digits


def degree_minute_precision(degree: float) -> float:
    minutes = degree * 60

    # A minutes component is present, so an arcminute is the coarsest unit.
    if minutes - math.floor(minutes) > 0:
        seconds = minutes * 60
        return 10.0 ** -digits_after_separator(render_number(seconds)) / 3600
    return ARCMINUTE


def degree_minute_second_precision(degree: float, seconds_text: str) -> float:
    if degree - math.floor(degree) > 0:
        return 10.0 ** -digits_after_separator(seconds_text) / 3600
    return ARCSECOND


def axis_precision(grammar: GrammarKind, degree: float, axis_text: str) -> float:
    if grammar in (GrammarKind.FLOAT, GrammarKind.DECIMAL_DEGREE):
        return decimal_precision(axis_text)
    if grammar is GrammarKind.DEGREE_MINUTE:
        return degree_minute_precision(degree)
    if grammar is GrammarKind.DEGREE_MINUTE_SECOND:
        return degree_minute_second_precision(degree, axis_text)
    raise ValueError(f"Unknown grammar: {grammar}")


def detect_precision(
    lat_long: LatLongValue,
    grammar: GrammarKind,
    latitude_text: str,
    longitude_text: str,
    explicit_precision: float | None = None,
) -> float:
    """Precision implied by how the coordinate was written.

    An explicit precision wins outright. Otherwise each axis is measured on
    its own and the smaller (more precise) of the two is returned.
    """

    if explicit_precision is not None:
        return explicit_precision

    return min(
        axis_precision(grammar, lat_long.latitude, latitude_text),
        axis_precision(grammar, lat_long.longitude, longitude_text),
    )
