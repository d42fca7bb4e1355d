from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.domain.algorithms.precision import detect_precision
from src.domain.exceptions import GrammarMismatch, UnrecognizedFormat
from src.domain.grammars import CoordinateGrammar, default_grammars
from src.domain.models import (
    GlobeCoordinateValue,
    GrammarKind,
    ParsedCoordinate,
    ParserOptions,
    RawLatLong,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GlobeCoordinateParser:
    """Reads free-text coordinates and detects the precision they were written at.

    Grammars are tried in order and the first one that accepts the text wins;
    later grammars are never consulted.
    """

    options: ParserOptions = field(default_factory=ParserOptions)
    grammars: tuple[CoordinateGrammar, ...] = field(default_factory=default_grammars)

    def parse(self, text: str) -> GlobeCoordinateValue:
        value, _ = self.parse_with_grammar(text)
        return value

    def parse_with_grammar(
        self, text: str
    ) -> tuple[GlobeCoordinateValue, GrammarKind]:
        parsed = self.parse_coordinate(text)
        value = GlobeCoordinateValue(
            lat_long=parsed.lat_long,
            precision=parsed.precision,
            globe=self.options.globe,
        )
        return value, parsed.grammar

    def parse_coordinate(self, text: str) -> ParsedCoordinate:
        raw, grammar = self.parse_lat_long(text)
        precision = detect_precision(
            raw.lat_long,
            grammar,
            raw.latitude_text,
            raw.longitude_text,
            explicit_precision=self.options.precision,
        )
        return ParsedCoordinate(
            lat_long=raw.lat_long, precision=precision, grammar=grammar
        )

    def parse_lat_long(self, text: str) -> tuple[RawLatLong, GrammarKind]:
        if not isinstance(text, str):
            raise TypeError(
                f"Coordinate text must be a string, got {type(text).__name__}"
            )

        for grammar in self.grammars:
            try:
                raw = grammar.parse(text)
            except GrammarMismatch:
                continue

            logger.debug(
                "Coordinate %r matched the %s grammar", text, grammar.kind.value
            )
            return raw, grammar.kind

        logger.info("No coordinate grammar matched %r", text)
        raise UnrecognizedFormat(text)
