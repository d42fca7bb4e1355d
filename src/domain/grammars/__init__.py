from .base import CoordinateGrammar
from .decimal_degree import DecimalDegreeGrammar
from .degree_minute import DegreeMinuteGrammar
from .degree_minute_second import DegreeMinuteSecondGrammar
from .float_grammar import FloatGrammar


def default_grammars() -> tuple[CoordinateGrammar, ...]:
    """Grammars in the order they are tried; the first match wins."""

    return (
        FloatGrammar(),
        DegreeMinuteSecondGrammar(),
        DegreeMinuteGrammar(),
        DecimalDegreeGrammar(),
    )


__all__ = [
    "CoordinateGrammar",
    "DecimalDegreeGrammar",
    "DegreeMinuteGrammar",
    "DegreeMinuteSecondGrammar",
    "FloatGrammar",
    "default_grammars",
]
