import random

import pytest

from civicmatch import Coordinate, InvalidGeohashError, adjacent, bounds, encode, neighbors


def test_single_character_neighbors() -> None:
    result = neighbors("s")
    assert result.top == "u"
    assert result.bottom == "k"
    assert result.right == "t"
    assert result.left == "e"
    assert result.top_right == "v"
    assert result.top_left == "g"
    assert result.bottom_right == "m"
    assert result.bottom_left == "7"


def test_neighbors_keep_precision() -> None:
    for cell in neighbors("tdr1"):
        assert len(cell) == 4
    assert "tdr1" not in neighbors("tdr1")
    assert len(set(neighbors("tdr1"))) == 8


def test_border_crossing_steps_parent() -> None:
    # "sz" sits in the top right corner of "s".
    top = adjacent("sz", "top")
    assert top.startswith("u")
    assert bounds(top).lat_min == bounds("sz").lat_max
    assert bounds(top).lon_min == bounds("sz").lon_min

    right = adjacent("sz", "right")
    assert right.startswith("t")
    assert bounds(right).lon_min == bounds("sz").lon_max


def test_right_of_antimeridian_wraps() -> None:
    assert adjacent("z", "right") == "b"
    assert adjacent("b", "left") == "z"


def test_bottom_then_top_returns_to_cell() -> None:
    rng = random.Random(42)
    for _ in range(150):
        coord = Coordinate(rng.uniform(-80, 80), rng.uniform(-170, 170))
        cell = encode(coord, rng.randint(2, 9))

        below = neighbors(cell).bottom
        assert neighbors(below).top == cell

        left = neighbors(cell).left
        assert neighbors(left).right == cell


def test_neighbor_cells_touch_the_original() -> None:
    rng = random.Random(7)
    for _ in range(100):
        coord = Coordinate(rng.uniform(-80, 80), rng.uniform(-165, 165))
        cell = encode(coord, rng.randint(2, 8))
        box = bounds(cell)
        result = neighbors(cell)

        assert bounds(result.top).lat_min == box.lat_max
        assert bounds(result.bottom).lat_max == box.lat_min
        assert bounds(result.right).lon_min == box.lon_max
        assert bounds(result.left).lon_max == box.lon_min

        top_right = bounds(result.top_right)
        assert top_right.lat_min == box.lat_max
        assert top_right.lon_min == box.lon_max
        bottom_left = bounds(result.bottom_left)
        assert bottom_left.lat_max == box.lat_min
        assert bottom_left.lon_max == box.lon_min


def test_invalid_characters_rejected() -> None:
    with pytest.raises(InvalidGeohashError):
        neighbors("tdra")
    with pytest.raises(InvalidGeohashError):
        adjacent("", "top")


def test_unknown_direction_rejected() -> None:
    with pytest.raises(ValueError):
        adjacent("tdr1", "up")
