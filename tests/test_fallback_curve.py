import math

import pytest

from routing.eta_service import haversine_m, path_distance_m
from routing.fallback_curve import control_points, fallback_curve


def _distance_from_chord_midpoint(point, start, end):
    mid_lat = (start[0] + end[0]) / 2
    mid_lon = (start[1] + end[1]) / 2
    return math.hypot(point[0] - mid_lat, point[1] - mid_lon)


def test_curve_keeps_exact_endpoints(campus_start, campus_end):
    points = fallback_curve(campus_start, campus_end)

    assert len(points) == 51
    assert points[0] == campus_start
    assert points[-1] == campus_end


def test_curve_bends_away_from_straight_line(campus_start, campus_end):
    """
    At t = 0.5 the cubic sits 0.75 * bow * chord away from the chord midpoint.
    """
    points = fallback_curve(campus_start, campus_end, bow=0.2, resolution=50)
    chord = math.hypot(campus_end[0] - campus_start[0], campus_end[1] - campus_start[1])

    offset = _distance_from_chord_midpoint(points[25], campus_start, campus_end)
    assert offset == pytest.approx(0.15 * chord, rel=1e-6)

    # so the curve is longer than the straight segment
    assert path_distance_m(points) > haversine_m(campus_start, campus_end)


def test_zero_bow_is_a_straight_line(campus_start, campus_end):
    points = fallback_curve(campus_start, campus_end, bow=0.0, resolution=10)

    straight = haversine_m(campus_start, campus_end)
    assert path_distance_m(points) == pytest.approx(straight, rel=1e-6)


def test_identical_endpoints_stay_put(campus_start):
    points = fallback_curve(campus_start, campus_start, resolution=4)

    assert len(points) == 5
    assert all(p == pytest.approx(campus_start) for p in points)
    assert path_distance_m(points) == pytest.approx(0.0, abs=1e-6)


def test_control_points_are_perpendicular_to_chord():
    p1, p2 = control_points((0.0, 0.0), (3.0, 0.0), bow=0.5)

    # chord along x, normal along +y, scaled by chord length
    assert p1 == pytest.approx((1.0, 1.5))
    assert p2 == pytest.approx((2.0, 1.5))


def test_resolution_must_be_positive(campus_start, campus_end):
    with pytest.raises(ValueError):
        fallback_curve(campus_start, campus_end, resolution=0)
