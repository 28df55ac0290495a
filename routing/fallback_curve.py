"""
Purpose: Local stand-in geometry when OSRM cannot give us a route.
What it does:
Draws a smooth cubic Bezier between start and end so the map always has
something to show. It has no relationship to real walkways.

The curve is built in (lon, lat) space, like the line it replaces:
- P0 = start, P3 = end
- P1, P2 sit at 1/3 and 2/3 along the chord, pushed sideways by
  bow * chord length (same side, so the path bends once)
Samples are converted back to (lat, lon). The end samples are the exact
input points, not B(0) / B(1) recomputed.
"""

from __future__ import annotations

from typing import List, Tuple

LatLon = Tuple[float, float]
LonLat = Tuple[float, float]


def _bezier_point(p0: LonLat, p1: LonLat, p2: LonLat, p3: LonLat, t: float) -> LonLat:
    u = 1.0 - t
    a = u * u * u
    b = 3 * u * u * t
    c = 3 * u * t * t
    d = t * t * t
    x = a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0]
    y = a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1]
    return (x, y)


def control_points(start: LonLat, end: LonLat, bow: float) -> Tuple[LonLat, LonLat]:
    """
    Control points for the curve between two (lon, lat) points.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]

    # left-hand normal of the chord, already scaled by chord length
    nx, ny = -dy * bow, dx * bow

    p1 = (start[0] + dx / 3 + nx, start[1] + dy / 3 + ny)
    p2 = (start[0] + 2 * dx / 3 + nx, start[1] + 2 * dy / 3 + ny)
    return p1, p2


def fallback_curve(start: LatLon, end: LatLon, *, bow: float = 0.2, resolution: int = 50) -> List[LatLon]:
    """
    Curved path from start to end, both (lat, lon).

    Returns resolution + 1 points. Identical endpoints give a path that
    stays on the point (distance 0).
    """
    if resolution < 1:
        raise ValueError("resolution must be >= 1")

    #two point line in (lon, lat)
    p0 = (start[1], start[0])
    p3 = (end[1], end[0])
    p1, p2 = control_points(p0, p3, bow)

    points: List[LatLon] = [start]
    for step in range(1, resolution):
        lon, lat = _bezier_point(p0, p1, p2, p3, step / resolution)
        points.append((lat, lon))
    points.append(end)

    return [(float(lat), float(lon)) for lat, lon in points]
