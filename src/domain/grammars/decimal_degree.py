from __future__ import annotations

import re

from src.domain.models import GrammarKind

from .base import DEGREE_SYMBOL, NUMBER, CoordinateGrammar


class DecimalDegreeGrammar(CoordinateGrammar):
    """Decimal degrees with a degree sign: ``55.7557860° N, 37.6176330° W``."""

    kind = GrammarKind.DECIMAL_DEGREE

    def _axis_body(self, prefix: str) -> str:
        return rf"(?P<{prefix}_deg>{NUMBER})\s*{DEGREE_SYMBOL}"

    def _read_axis(
        self, match: re.Match[str], prefix: str, text: str
    ) -> tuple[float, str]:
        degree_text = match.group(f"{prefix}_deg")
        return float(degree_text), degree_text
