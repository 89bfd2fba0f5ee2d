from __future__ import annotations

import math
from typing import Callable, Iterable, List, Optional, TypeVar

from .types import Coordinate

EARTH_RADIUS_KM = 6371.0

T = TypeVar("T")


def haversine(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates, in kilometers."""
    phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlambda = math.radians(b.lng - a.lng)

    h = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # Rounding can push h a hair past 1 for antipodal points.
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def sort_by_distance(
    items: Iterable[T],
    origin: Coordinate,
    key: Callable[[T], Optional[Coordinate]],
) -> List[T]:
    """Order items nearest first. Items without a coordinate go last."""

    def distance(item: T) -> float:
        coord = key(item)
        if coord is None:
            return float("inf")
        return haversine(origin, coord)

    return sorted(items, key=distance)


def format_distance(distance_km: Optional[float]) -> str:
    if distance_km is None or not math.isfinite(distance_km):
        return ""
    if distance_km < 0.1:
        return "< 0.1 km"
    if distance_km > 999:
        return "> 999 km"
    return f"{distance_km:.1f} km"
