from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_GLOBE = "http://www.wikidata.org/entity/Q2"


@dataclass(frozen=True, slots=True)
class LatLongValue:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.latitude):
            raise ValueError(f"Invalid latitude: {self.latitude}")
        if not math.isfinite(self.longitude):
            raise ValueError(f"Invalid longitude: {self.longitude}")


@dataclass(frozen=True, slots=True)
class GlobeCoordinateValue:
    """A lat/long pair on a given globe, with the precision it was recorded at."""

    lat_long: LatLongValue
    precision: float
    globe: str = DEFAULT_GLOBE

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat_long.latitude <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat_long.latitude}")
        if not (-180.0 <= self.lat_long.longitude <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lat_long.longitude}")
        if not (math.isfinite(self.precision) and self.precision > 0):
            raise ValueError(f"Invalid precision: {self.precision}")
        if not self.globe:
            raise ValueError("Globe must be a non-empty string")

    @property
    def latitude(self) -> float:
        return self.lat_long.latitude

    @property
    def longitude(self) -> float:
        return self.lat_long.longitude
