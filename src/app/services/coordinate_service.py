from __future__ import annotations

from dataclasses import dataclass

from src.domain.algorithms.formatting import format_coordinate
from src.domain.models import (
    DEFAULT_GLOBE,
    GlobeCoordinateValue,
    GrammarKind,
    LatLongValue,
    ParserOptions,
)

from .globe_coordinate_parser import GlobeCoordinateParser


@dataclass(slots=True)
class CoordinateService:
    """Application service (use case) for reading and writing coordinates."""

    default_globe: str = DEFAULT_GLOBE

    def parse(
        self,
        *,
        text: str,
        globe: str | None = None,
        precision: float | None = None,
    ) -> tuple[GlobeCoordinateValue, GrammarKind]:
        options = ParserOptions(globe=globe or self.default_globe, precision=precision)
        return GlobeCoordinateParser(options=options).parse_with_grammar(text)

    def format(
        self,
        *,
        latitude: float,
        longitude: float,
        precision: float,
        globe: str | None = None,
    ) -> str:
        value = GlobeCoordinateValue(
            lat_long=LatLongValue(latitude=latitude, longitude=longitude),
            precision=precision,
            globe=globe or self.default_globe,
        )
        return format_coordinate(value)
