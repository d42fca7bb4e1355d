from __future__ import annotations

import re

from src.domain.models import GrammarKind

from .base import (
    DEGREE_SYMBOL,
    MINUTE_SYMBOL,
    NUMBER,
    CoordinateGrammar,
    checked_sexagesimal,
)


class DegreeMinuteGrammar(CoordinateGrammar):
    """Whole degrees and decimal minutes: ``55° 45.20' N, 37° 37.06' E``."""

    kind = GrammarKind.DEGREE_MINUTE

    def _axis_body(self, prefix: str) -> str:
        return (
            rf"(?P<{prefix}_deg>\d+)\s*{DEGREE_SYMBOL}\s*"
            rf"(?P<{prefix}_min>{NUMBER})\s*{MINUTE_SYMBOL}"
        )

    def _read_axis(
        self, match: re.Match[str], prefix: str, text: str
    ) -> tuple[float, str]:
        degrees = int(match.group(f"{prefix}_deg"))
        minutes = checked_sexagesimal(match.group(f"{prefix}_min"), text)
        value = degrees + minutes / 60.0
        return value, repr(value)
