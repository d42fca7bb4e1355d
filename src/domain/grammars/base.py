from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from functools import cached_property

from src.domain.exceptions import GrammarMismatch
from src.domain.models import GrammarKind, LatLongValue, RawLatLong

# Latitude first, then longitude: "a, b", "a,b" or "a b".
AXIS_SEPARATOR = r"(?:\s*,\s*|\s+)"
NUMBER = r"\d+(?:\.\d+)?"
DEGREE_SYMBOL = "°"
MINUTE_SYMBOL = r"['′]"
SECOND_SYMBOL = r"(?:\"|″|'')"


class CoordinateGrammar(ABC):
    """One textual notation for a latitude/longitude pair.

    Subclasses describe a single axis with named groups prefixed by ``lat_``
    or ``lon_``; the base class handles signs, hemisphere letters and the
    separator between the two axes.
    """

    kind: GrammarKind

    @abstractmethod
    def _axis_body(self, prefix: str) -> str:
        """Regex for the unsigned angle of one axis."""

    @abstractmethod
    def _read_axis(
        self, match: re.Match[str], prefix: str, text: str
    ) -> tuple[float, str]:
        """Return the unsigned angle and the text its precision is read from."""

    @cached_property
    def _pattern(self) -> re.Pattern[str]:
        lat = self._signed_axis("lat", "NS")
        lon = self._signed_axis("lon", "EW")
        return re.compile(lat + AXIS_SEPARATOR + lon, re.ASCII)

    def _signed_axis(self, prefix: str, hemispheres: str) -> str:
        return (
            rf"(?P<{prefix}_sign>[+-])?"
            + self._axis_body(prefix)
            + rf"(?:\s*(?P<{prefix}_hem>[{hemispheres}]))?"
        )

    def parse(self, text: str) -> RawLatLong:
        match = self._pattern.fullmatch(text.strip())
        if match is None:
            raise GrammarMismatch(f"Not a {self.kind.value} coordinate", text)

        try:
            latitude, latitude_text = self._axis(match, "lat", text)
            longitude, longitude_text = self._axis(match, "lon", text)
        except GrammarMismatch:
            raise
        except (OverflowError, ValueError) as exc:
            raise GrammarMismatch(f"Angle too large to read: {exc}", text) from exc

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise GrammarMismatch("Angle too large to read", text)

        return RawLatLong(
            lat_long=LatLongValue(latitude=latitude, longitude=longitude),
            latitude_text=latitude_text,
            longitude_text=longitude_text,
        )

    def _axis(self, match: re.Match[str], prefix: str, text: str) -> tuple[float, str]:
        sign = match.group(f"{prefix}_sign")
        hemisphere = match.group(f"{prefix}_hem")
        if sign and hemisphere:
            raise GrammarMismatch("Both a sign and a hemisphere were given", text)

        degrees, degree_text = self._read_axis(match, prefix, text)
        if sign == "-" or hemisphere in ("S", "W"):
            return -degrees, "-" + degree_text
        return degrees, degree_text


def checked_sexagesimal(value: str, text: str) -> float:
    """Minutes and seconds must stay below 60."""

    number = float(value)
    if number >= 60.0:
        raise GrammarMismatch(f"Sexagesimal component out of range: {value}", text)
    return number
