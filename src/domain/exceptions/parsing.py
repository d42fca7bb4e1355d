from __future__ import annotations

COORDINATE_FORMAT = "coordinate"


class CoordinateParseError(ValueError):
    """Base exception for text that could not be read as a coordinate."""

    def __init__(
        self, message: str, text: str, format_name: str = COORDINATE_FORMAT
    ) -> None:
        super().__init__(message)
        self.text = text
        self.format_name = format_name


class GrammarMismatch(CoordinateParseError):
    """Raised by a single grammar when the text is not written in its notation."""


class UnrecognizedFormat(CoordinateParseError):
    """Raised when none of the known grammars accepts the text."""

    def __init__(self, text: str, format_name: str = COORDINATE_FORMAT) -> None:
        super().__init__(
            "The format of the coordinate could not be determined.",
            text,
            format_name,
        )
