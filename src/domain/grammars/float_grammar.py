from __future__ import annotations

import re

from src.domain.models import GrammarKind

from .base import NUMBER, CoordinateGrammar


class FloatGrammar(CoordinateGrammar):
    """Plain signed numbers: ``-55.7557860, -37.6176330`` or ``5.5 N 37 W``."""

    kind = GrammarKind.FLOAT

    def _axis_body(self, prefix: str) -> str:
        return rf"(?P<{prefix}_deg>{NUMBER})"

    def _read_axis(
        self, match: re.Match[str], prefix: str, text: str
    ) -> tuple[float, str]:
        degree_text = match.group(f"{prefix}_deg")
        return float(degree_text), degree_text
