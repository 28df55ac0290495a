"""
Purpose: Domain models for the Routing capability.
What it does:
- Defines core data structures:
- RoutePath (ordered points start -> end, provenance)
- PathMetrics (distance in meters, walking ETA in minutes)
- PlannedRoute (path + metrics + request id, what the map screen renders)
- RouteError (the failure branch of a service query, a value not an exception)

Defines enums/constants:
- RouteSource = SERVICE | FALLBACK

Rule: No OSRM calls, no math. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

LatLon = Tuple[float, float]


class RouteSource(str, Enum):
    """
    Where a path came from. Both render the same, only logs and the API care.
    """
    SERVICE = "service"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RoutePath:
    """
    Ordered, non-empty sequence of (lat, lon) points.
    First point is the requested start, last is the requested end
    (exact for the fallback curve, snapped to the nearest walkway for OSRM).
    """
    points: Tuple[LatLon, ...]
    source: RouteSource = RouteSource.SERVICE

    def __post_init__(self):
        if not self.points:
            raise ValueError("RoutePath needs at least one point")
        # freeze whatever sequence we were handed
        object.__setattr__(self, "points", tuple((float(lat), float(lon)) for lat, lon in self.points))

    @classmethod
    def of(cls, points: Sequence[LatLon], source: RouteSource) -> RoutePath:
        return cls(points=tuple(points), source=source)

    @property
    def start(self) -> LatLon:
        return self.points[0]

    @property
    def end(self) -> LatLon:
        return self.points[-1]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)


@dataclass(frozen=True)
class PathMetrics:
    distance_m: float
    eta_minutes: float


@dataclass(frozen=True)
class PlannedRoute:
    """
    Output of the planner: a fully resolved path and the metrics computed from it.
    """
    request_id: int
    path: RoutePath
    metrics: PathMetrics


@dataclass(frozen=True)
class RouteError:
    """
    Why a service query did not produce a route. Never raised.
    """
    reason: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        return self.reason
