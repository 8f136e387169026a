import pytest

from pano_links.geometry import (
    Point,
    bearing,
    bounds_contain,
    clamp,
    degrees_to_radians,
    distance,
    dms_to_decimal,
    mod,
)


def test_distance_is_euclidean():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0


def test_distance_zero_for_same_point():
    assert distance(Point(1.5, -2.0), Point(1.5, -2.0)) == 0.0


def test_bearing_toward_north_and_east():
    origin = Point(0.0, 0.0)
    assert bearing(origin, Point(0.0, 1.0)) == pytest.approx(90.0)
    assert bearing(origin, Point(1.0, 0.0)) == pytest.approx(0.0)


def test_bearing_shifts_negative_angles_by_half_turn():
    origin = Point(0.0, 0.0)
    assert bearing(origin, Point(0.0, -1.0)) == pytest.approx(90.0)
    southeast = bearing(origin, Point(1.0, -1.0))
    assert 90.0 < southeast < 180.0


def test_degrees_to_radians():
    assert degrees_to_radians(180) == pytest.approx(3.141592653589793)


def test_clamp_and_mod():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
    assert mod(-1, 360) == 359
    assert mod(725, 360) == 5


def test_bounds_contain_is_strict():
    low, high = Point(0, 0), Point(2, 2)
    assert bounds_contain(Point(1, 1), low, high)
    assert not bounds_contain(Point(0, 1), low, high)
    assert not bounds_contain(Point(3, 1), low, high)


def test_dms_to_decimal():
    assert dms_to_decimal((41, 30, 36)) == pytest.approx(41.51)
