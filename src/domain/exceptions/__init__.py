from .parsing import (
    COORDINATE_FORMAT,
    CoordinateParseError,
    GrammarMismatch,
    UnrecognizedFormat,
)

__all__ = [
    "COORDINATE_FORMAT",
    "CoordinateParseError",
    "GrammarMismatch",
    "UnrecognizedFormat",
]
