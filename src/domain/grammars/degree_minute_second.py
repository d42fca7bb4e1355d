from __future__ import annotations

import re

from src.domain.models import GrammarKind

from .base import (
    DEGREE_SYMBOL,
    MINUTE_SYMBOL,
    NUMBER,
    SECOND_SYMBOL,
    CoordinateGrammar,
    checked_sexagesimal,
)


class DegreeMinuteSecondGrammar(CoordinateGrammar):
    """Whole degrees, whole minutes and decimal seconds.

    ``55° 45' 20.8296" N, 37° 37' 3.4788" E``; two apostrophes may stand in
    for the double quote.
    """

    kind = GrammarKind.DEGREE_MINUTE_SECOND

    def _axis_body(self, prefix: str) -> str:
        return (
            rf"(?P<{prefix}_deg>\d+)\s*{DEGREE_SYMBOL}\s*"
            rf"(?P<{prefix}_min>\d+)\s*{MINUTE_SYMBOL}\s*"
            rf"(?P<{prefix}_sec>{NUMBER})\s*{SECOND_SYMBOL}"
        )

    def _read_axis(
        self, match: re.Match[str], prefix: str, text: str
    ) -> tuple[float, str]:
        degrees = int(match.group(f"{prefix}_deg"))
        minutes = checked_sexagesimal(match.group(f"{prefix}_min"), text)
        seconds = checked_sexagesimal(match.group(f"{prefix}_sec"), text)
        value = degrees + minutes / 60.0 + seconds / 3600.0
        # Precision is read off the seconds as written.
        return value, match.group(f"{prefix}_sec")
