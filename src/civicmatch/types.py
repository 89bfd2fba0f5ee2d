from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .exceptions import InvalidCoordinateError


BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
MAX_PRECISION = 12

# Approximate cell width per geohash length. Precision 3 is the ~150 km
# band used for coarse jurisdiction matching, precision 4 the ~20-40 km band.
GEOHASH_CELL_KM: List[Tuple[int, float]] = [
    (1, 5000.0),
    (2, 1250.0),
    (3, 156.0),
    (4, 39.1),
    (5, 4.89),
    (6, 1.22),
    (7, 0.153),
    (8, 0.0382),
    (9, 0.00477),
    (10, 0.00119),
    (11, 0.000149),
    (12, 0.0000372),
]


class IssueCategory(str, Enum):
    POTHOLE = "pothole"
    GARBAGE = "garbage"
    STREETLIGHT = "streetlight"
    DRAINAGE = "drainage"
    WATER_SUPPLY = "water_supply"
    SEWAGE = "sewage"
    TRAFFIC_SIGNAL = "traffic_signal"
    ENCROACHMENT = "encroachment"
    STRAY_ANIMALS = "stray_animals"
    PARKS = "parks"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> "IssueCategory | None":
        if isinstance(value, str):
            normalized = value.strip().lower().replace(" ", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class JurisdictionType(str, Enum):
    NATIONAL = "national"
    STATE = "state"
    CITY = "city"
    DEPARTMENT = "department"


class MatchReason(str, Enum):
    GEOHASH_CATEGORY = "GeohashCategory"
    CITY_CATEGORY = "CityCategory"
    STATE_CATEGORY = "StateCategory"
    NATIONAL_FALLBACK = "NationalFallback"


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{self.lat},{self.lng}"

    def validate(self) -> "Coordinate":
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise InvalidCoordinateError(f"coordinate must be finite: {self}")
        if abs(self.lat) > 90.0:
            raise InvalidCoordinateError(f"latitude out of range: {self.lat}")
        if abs(self.lng) > 180.0:
            raise InvalidCoordinateError(f"longitude out of range: {self.lng}")
        return self

    @classmethod
    def from_string(cls, value: str) -> "Coordinate":
        parts = value.split(",", 1)
        if len(parts) != 2:
            raise ValueError("Coordinate string must be 'lat,lng'")
        lat = float(parts[0].strip())
        lng = float(parts[1].strip())
        return cls(lat=lat, lng=lng)


@dataclass(frozen=True)
class BoundingBox:
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            lat=(self.lat_min + self.lat_max) / 2,
            lng=(self.lon_min + self.lon_max) / 2,
        )

    def contains(self, coord: Coordinate) -> bool:
        return (
            self.lat_min <= coord.lat <= self.lat_max
            and self.lon_min <= coord.lng <= self.lon_max
        )


@dataclass(frozen=True)
class DecodedGeohash:
    """Center of a geohash cell plus its extent.

    ``lat_error`` and ``lng_error`` are the full widths of the cell on each
    axis, not half-widths.
    """

    center: Coordinate
    lat_error: float
    lng_error: float
    bounds: BoundingBox
