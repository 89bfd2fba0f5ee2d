import random

import pytest

from civicmatch import (
    Coordinate,
    InvalidCoordinateError,
    InvalidGeohashError,
    InvalidPrecisionError,
    bounds,
    decode,
    encode,
    precision_for_km,
)
from civicmatch.types import BASE32

BANGALORE = Coordinate(12.9716, 77.5946)


def test_encode_bangalore_reference_cell() -> None:
    assert encode(BANGALORE, 4) == "tdr1"
    assert encode(BANGALORE, 12).startswith("tdr1")


@pytest.mark.parametrize(
    "coord, expected",
    [
        (Coordinate(19.0760, 72.8777), "te7u"),
        (Coordinate(28.7041, 77.1025), "ttng"),
    ],
)
def test_encode_launch_cities(coord: Coordinate, expected: str) -> None:
    assert encode(coord, 4) == expected


def test_encode_is_longitude_first() -> None:
    # East of the meridian and south of the equator: first bit 1, second 0.
    assert encode(Coordinate(-10.0, 10.0), 1) == "k"
    assert encode(Coordinate(10.0, -10.0), 1) == "e"


def test_encode_rejects_out_of_range_coordinates() -> None:
    with pytest.raises(InvalidCoordinateError):
        encode(Coordinate(90.5, 0.0), 5)
    with pytest.raises(InvalidCoordinateError):
        encode(Coordinate(0.0, -180.01), 5)
    with pytest.raises(InvalidCoordinateError):
        encode(Coordinate(float("nan"), 0.0), 5)


@pytest.mark.parametrize("precision", [0, -1, 13])
def test_encode_rejects_bad_precision(precision: int) -> None:
    with pytest.raises(InvalidPrecisionError):
        encode(BANGALORE, precision)


def test_decode_reports_full_width_errors() -> None:
    decoded = decode("s")
    assert decoded.bounds.lon_min == 0.0
    assert decoded.bounds.lon_max == 45.0
    assert decoded.bounds.lat_min == 0.0
    assert decoded.bounds.lat_max == 45.0
    assert decoded.lng_error == 45.0
    assert decoded.lat_error == 45.0
    assert decoded.center == Coordinate(22.5, 22.5)


def test_decode_rejects_characters_outside_alphabet() -> None:
    for bad in ("a", "tdri", "tdrl", "tdro", "TDR1", ""):
        with pytest.raises(InvalidGeohashError):
            decode(bad)


def test_round_trip_stays_inside_cell() -> None:
    rng = random.Random(1337)
    for _ in range(200):
        coord = Coordinate(rng.uniform(-90, 90), rng.uniform(-180, 180))
        previous = None
        for precision in range(1, 13):
            geohash = encode(coord, precision)
            assert len(geohash) == precision
            assert set(geohash) <= set(BASE32)

            decoded = decode(geohash)
            assert decoded.bounds.contains(coord)
            assert decoded.bounds.contains(decoded.center)
            assert decoded.bounds.lat_min <= decoded.bounds.lat_max
            assert decoded.bounds.lon_min <= decoded.bounds.lon_max

            if previous is not None:
                assert decoded.lat_error <= previous.lat_error
                assert decoded.lng_error <= previous.lng_error
            previous = decoded


def test_bounds_of_longer_hash_nest_inside_prefix() -> None:
    outer = bounds("tdr")
    inner = bounds("tdr1")
    assert outer.lat_min <= inner.lat_min <= inner.lat_max <= outer.lat_max
    assert outer.lon_min <= inner.lon_min <= inner.lon_max <= outer.lon_max


def test_precision_for_km() -> None:
    assert precision_for_km(150) == 3
    assert precision_for_km(20) == 4
    assert precision_for_km(10) == 4
    assert precision_for_km(1) == 6
    assert precision_for_km(6000) == 1
    assert precision_for_km(0) == 9
