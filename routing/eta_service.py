#Purpose: Path metrics and ETA estimation.
#Converts a resolved path into what the map card shows:
#total walking distance (meters, great-circle, summed per segment)
#walking ETA (minutes) at a fixed 1.2 m/s
#No rounding here. Display formatting is the caller's job.
#Keeps ETA logic separate from route computation.

import math
from typing import Iterable, Tuple

from .models import PathMetrics

LatLon = Tuple[float, float]

# mean earth radius in meters
EARTH_RADIUS_M = 6371008.8

# fixed walking speed, 1.2 m/s = 72 m/min
WALKING_SPEED_MPS = 1.2


def haversine_m(a: LatLon, b: LatLon) -> float:
    """Great-circle distance in meters between two (lat, lon) points."""
    lat1, lon1 = map(math.radians, a)
    lat2, lon2 = map(math.radians, b)
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    x = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(x), math.sqrt(1 - x))


def path_distance_m(points: Iterable[LatLon]) -> float:
    total = 0.0
    previous = None
    for point in points:
        if previous is not None:
            total += haversine_m(previous, point)
        previous = point
    return total


def estimate_eta_minutes(distance_m: float) -> float:
    return distance_m / (WALKING_SPEED_MPS * 60)


def compute_metrics(path: Iterable[LatLon]) -> PathMetrics:
    """
    Distance and walking ETA for a fully resolved path.

    Accepts a RoutePath or any sequence of (lat, lon). Fewer than two points
    gives zero distance and zero ETA.
    """
    distance_m = path_distance_m(path)
    return PathMetrics(distance_m=distance_m, eta_minutes=estimate_eta_minutes(distance_m))
