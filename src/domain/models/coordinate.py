from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .geo import DEFAULT_GLOBE, LatLongValue


class GrammarKind(str, Enum):
    FLOAT = "float"
    DECIMAL_DEGREE = "decimal_degree"
    DEGREE_MINUTE = "degree_minute"
    DEGREE_MINUTE_SECOND = "degree_minute_second"


@dataclass(frozen=True, slots=True)
class RawLatLong:
    """What a grammar produced, plus the numeric text each axis was written with.

    This is the degree text for decimal notations and the seconds text for
    degree-minute-second notation.
    """

    lat_long: LatLongValue
    latitude_text: str
    longitude_text: str


@dataclass(frozen=True, slots=True)
class ParsedCoordinate:
    lat_long: LatLongValue
    precision: float
    grammar: GrammarKind


@dataclass(frozen=True, slots=True)
class ParserOptions:
    globe: str = DEFAULT_GLOBE
    precision: float | None = None  # overrides detection when set

    def __post_init__(self) -> None:
        if self.precision is not None and not (
            math.isfinite(self.precision) and self.precision > 0
        ):
            raise ValueError(f"Invalid precision: {self.precision}")
