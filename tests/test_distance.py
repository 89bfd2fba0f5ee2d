import math

import pytest

from civicmatch import Coordinate, format_distance, haversine, sort_by_distance
from civicmatch.distance import EARTH_RADIUS_KM

BANGALORE = Coordinate(12.9716, 77.5946)
MUMBAI = Coordinate(19.0760, 72.8777)


def test_distance_to_self_is_zero() -> None:
    assert haversine(BANGALORE, BANGALORE) == 0.0
    assert haversine(Coordinate(-90.0, 0.0), Coordinate(-90.0, 0.0)) == 0.0


def test_distance_is_symmetric() -> None:
    assert haversine(BANGALORE, MUMBAI) == pytest.approx(haversine(MUMBAI, BANGALORE))


def test_one_degree_of_latitude() -> None:
    distance = haversine(Coordinate(10.0, 77.0), Coordinate(11.0, 77.0))
    assert distance == pytest.approx(111.19, rel=0.01)


def test_bangalore_to_mumbai() -> None:
    assert haversine(BANGALORE, MUMBAI) == pytest.approx(845, rel=0.02)


def test_antipodal_points_are_stable() -> None:
    distance = haversine(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
    assert not math.isnan(distance)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)

    nearly = haversine(Coordinate(45.0, 10.0), Coordinate(-45.0, -170.0))
    assert nearly == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_sort_by_distance_puts_missing_coordinates_last() -> None:
    issues = [
        {"id": "mumbai", "at": MUMBAI},
        {"id": "nowhere", "at": None},
        {"id": "indiranagar", "at": Coordinate(12.9784, 77.6408)},
    ]
    ordered = sort_by_distance(issues, BANGALORE, key=lambda issue: issue["at"])
    assert [issue["id"] for issue in ordered] == ["indiranagar", "mumbai", "nowhere"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (float("nan"), ""),
        (float("inf"), ""),
        (0.05, "< 0.1 km"),
        (1.54, "1.5 km"),
        (1000.0, "> 999 km"),
    ],
)
def test_format_distance(value, expected: str) -> None:
    assert format_distance(value) == expected
