import pytest

from yegfinder.geo import (
    LAT_NORTH,
    LAT_SOUTH,
    LON_EAST,
    LON_WEST,
    MAP_HEIGHT,
    MAP_WIDTH,
    arduino_map,
    constrain,
    lat_to_y,
    lon_to_x,
)


def test_map_endpoints():
    assert arduino_map(10, 10, 20, 300, 400) == 300
    assert arduino_map(20, 10, 20, 300, 400) == 400


def test_map_midpoint():
    assert arduino_map(5, 0, 10, 0, 100) == 50


def test_map_truncates_toward_zero():
    assert arduino_map(-1, 0, 3, 0, 1) == 0


def test_map_reversed_output_range():
    assert arduino_map(0, 0, 100, 99, 0) == 99
    assert arduino_map(100, 0, 100, 99, 0) == 0


def test_map_empty_range_raises():
    with pytest.raises(ZeroDivisionError):
        arduino_map(1, 5, 5, 0, 10)


@pytest.mark.parametrize("value", [-50, 0, 7, 13, 100])
def test_constrain_within_bounds(value):
    result = constrain(value, 0, 13)
    assert 0 <= result <= 13
    if 0 <= value <= 13:
        assert result == value


def test_constrain_clamps():
    assert constrain(-5, 0, 10) == 0
    assert constrain(15, 0, 10) == 10


def test_lon_corners():
    assert lon_to_x(LON_WEST) == 0
    assert lon_to_x(LON_EAST) == MAP_WIDTH


def test_lat_corners():
    assert lat_to_y(LAT_NORTH) == 0
    assert lat_to_y(LAT_SOUTH) == MAP_HEIGHT


def test_lon_monotonic():
    xs = [lon_to_x(lon) for lon in range(LON_WEST, LON_EAST, 5000)]
    assert xs == sorted(xs)


def test_lat_increases_southward():
    ys = [lat_to_y(lat) for lat in range(LAT_NORTH, LAT_SOUTH, -3000)]
    assert ys == sorted(ys)