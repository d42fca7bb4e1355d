from .coordinate import GrammarKind, ParsedCoordinate, ParserOptions, RawLatLong
from .geo import DEFAULT_GLOBE, GlobeCoordinateValue, LatLongValue

__all__ = [
    "DEFAULT_GLOBE",
    "GlobeCoordinateValue",
    "GrammarKind",
    "LatLongValue",
    "ParsedCoordinate",
    "ParserOptions",
    "RawLatLong",
]
