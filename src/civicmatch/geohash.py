"""Geohash encoding, decoding and neighbor lookup.

Bits are interleaved longitude first, most significant bit first, five bits
per base32 character.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from .exceptions import InvalidGeohashError, InvalidPrecisionError
from .types import (
    BASE32,
    GEOHASH_CELL_KM,
    MAX_PRECISION,
    BoundingBox,
    Coordinate,
    DecodedGeohash,
)


_BASE32_MAP = {c: i for i, c in enumerate(BASE32)}
_BITS = (16, 8, 4, 2, 1)

# Indexed by len(geohash) % 2.
_NEIGHBORS: Dict[str, Tuple[str, str]] = {
    "top": ("p0r21436x8zb9dcf5h7kjnmqesgutwvy", "bc01fg45238967deuvhjyznpkmstqrwx"),
    "bottom": ("14365h7k9dcfesgujnmqp0r2twvyx8zb", "238967debc01fg45kmstqrwxuvhjyznp"),
    "right": ("bc01fg45238967deuvhjyznpkmstqrwx", "p0r21436x8zb9dcf5h7kjnmqesgutwvy"),
    "left": ("238967debc01fg45kmstqrwxuvhjyznp", "14365h7k9dcfesgujnmqp0r2twvyx8zb"),
}
_BORDERS: Dict[str, Tuple[str, str]] = {
    "top": ("prxz", "bcfguvyz"),
    "bottom": ("028b", "0145hjnp"),
    "right": ("bcfguvyz", "prxz"),
    "left": ("0145hjnp", "028b"),
}

DIRECTIONS = tuple(_NEIGHBORS)


class Neighbors(NamedTuple):
    top: str
    bottom: str
    right: str
    left: str
    top_right: str
    top_left: str
    bottom_right: str
    bottom_left: str


def _check_precision(precision: int) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise InvalidPrecisionError(f"precision must be an int, got {precision!r}")
    if not 1 <= precision <= MAX_PRECISION:
        raise InvalidPrecisionError(
            f"precision must be between 1 and {MAX_PRECISION}, got {precision}"
        )
    return precision


def _check_geohash(geohash: str) -> str:
    if not isinstance(geohash, str) or not geohash:
        raise InvalidGeohashError("geohash must be a non-empty string")
    for ch in geohash:
        if ch not in _BASE32_MAP:
            raise InvalidGeohashError(
                f"invalid geohash character {ch!r} in {geohash!r}"
            )
    return geohash


def encode(coord: Coordinate, precision: int = MAX_PRECISION) -> str:
    coord.validate()
    _check_precision(precision)

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]
    bit = 0
    ch = 0
    even = True
    geohash = []

    while len(geohash) < precision:
        if even:
            mid = (lon_range[0] + lon_range[1]) / 2
            if coord.lng > mid:
                ch |= _BITS[bit]
                lon_range[0] = mid
            else:
                lon_range[1] = mid
        else:
            mid = (lat_range[0] + lat_range[1]) / 2
            if coord.lat > mid:
                ch |= _BITS[bit]
                lat_range[0] = mid
            else:
                lat_range[1] = mid
        even = not even
        if bit < 4:
            bit += 1
        else:
            geohash.append(BASE32[ch])
            bit = 0
            ch = 0

    return "".join(geohash)


def bounds(geohash: str) -> BoundingBox:
    _check_geohash(geohash)

    lat_range = [-90.0, 90.0]
    lon_range = [-180.0, 180.0]
    even = True

    for c in geohash:
        cd = _BASE32_MAP[c]
        for mask in _BITS:
            target = lon_range if even else lat_range
            mid = (target[0] + target[1]) / 2
            if cd & mask:
                target[0] = mid
            else:
                target[1] = mid
            even = not even

    return BoundingBox(
        lat_min=lat_range[0],
        lat_max=lat_range[1],
        lon_min=lon_range[0],
        lon_max=lon_range[1],
    )


def decode(geohash: str) -> DecodedGeohash:
    box = bounds(geohash)
    return DecodedGeohash(
        center=box.center,
        lat_error=box.lat_max - box.lat_min,
        lng_error=box.lon_max - box.lon_min,
        bounds=box,
    )


def _adjacent(geohash: str, direction: str) -> str:
    last = geohash[-1]
    parent = geohash[:-1]
    parity = len(geohash) % 2
    if last in _BORDERS[direction][parity] and parent:
        parent = _adjacent(parent, direction)
    return parent + BASE32[_NEIGHBORS[direction][parity].index(last)]


def adjacent(geohash: str, direction: str) -> str:
    """Return the cell next to ``geohash`` in ``direction``.

    Crossing a cell border steps the parent prefix first, recursively, so
    the result always has the same length as the input.
    """
    if direction not in _NEIGHBORS:
        raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
    return _adjacent(_check_geohash(geohash), direction)


def neighbors(geohash: str) -> Neighbors:
    _check_geohash(geohash)
    top = _adjacent(geohash, "top")
    bottom = _adjacent(geohash, "bottom")
    return Neighbors(
        top=top,
        bottom=bottom,
        right=_adjacent(geohash, "right"),
        left=_adjacent(geohash, "left"),
        top_right=_adjacent(top, "right"),
        top_left=_adjacent(top, "left"),
        bottom_right=_adjacent(bottom, "right"),
        bottom_left=_adjacent(bottom, "left"),
    )


def precision_for_km(radius_km: float) -> int:
    """Finest precision whose cells are still at least ``radius_km`` wide."""
    if radius_km <= 0:
        return 9
    for precision, size_km in reversed(GEOHASH_CELL_KM):
        if size_km >= radius_km:
            return precision
    return 1
