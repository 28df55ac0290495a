"""
Purpose: The map screen's route workflow, minus the map.
What it does:
Takes a start and end point, resolves the route, computes metrics once the
path is complete, and publishes the result as `latest`.

Two rules the screen needs:
- the same start/end pair cannot be requested again while it is in flight
- a slow response is dropped once a newer request has published its route,
  so an old route never overwrites a fresh one (monotonic request ids).
  A newer request that failed publishes nothing and blocks nothing.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Set, Tuple

from .eta_service import compute_metrics
from .models import PlannedRoute, RoutePath
from .route_service import resolve_route

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]
Resolver = Callable[[LatLon, LatLon], RoutePath]


class RouteInFlightError(RuntimeError):
    """A route for the same endpoints is already being resolved."""


class RoutePlanner:
    """
    Coordinates route requests from one map view.
    """
    def __init__(self, resolver: Optional[Resolver] = None):
        self.resolver = resolver or resolve_route
        self._lock = threading.Lock()
        self._last_request_id = 0
        self._last_published_id = 0
        self._in_flight: Set[Tuple[LatLon, LatLon]] = set()
        self._latest: Optional[PlannedRoute] = None

    @property
    def latest(self) -> Optional[PlannedRoute]:
        return self._latest

    def is_in_flight(self, start: LatLon, end: LatLon) -> bool:
        with self._lock:
            return (tuple(start), tuple(end)) in self._in_flight

    def plan(self, start: LatLon, end: LatLon) -> Optional[PlannedRoute]:
        """
        Resolve start -> end and compute its metrics.

        Returns the PlannedRoute, or None when a newer request already published
        its route while this one was resolving (the result is discarded,
        `latest` untouched).

        Raises:
            RouteInFlightError if the same endpoints are already being resolved.
        """
        key = (tuple(start), tuple(end))

        with self._lock:
            if key in self._in_flight:
                raise RouteInFlightError(f"route {start} -> {end} is already being resolved")
            self._in_flight.add(key)
            self._last_request_id += 1
            request_id = self._last_request_id

        try:
            path = self.resolver(start, end)
        finally:
            with self._lock:
                self._in_flight.discard(key)

        # metrics only ever see a complete path
        planned = PlannedRoute(request_id=request_id, path=path, metrics=compute_metrics(path))

        with self._lock:
            if request_id < self._last_published_id:
                logger.info(
                    "Discarding route #%d (%s -> %s): superseded by #%d",
                    request_id, start, end, self._last_published_id,
                )
                return None
            self._last_published_id = request_id
            self._latest = planned

        return planned

    def clear(self) -> None:
        """Forget the published route (the 'clear' button)."""
        with self._lock:
            self._latest = None
