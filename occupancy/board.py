"""
Purpose: The occupancy "flip board": periodic refresh of facility readings.
What it does:
- Pulls a fresh set of readings from a ReadingSource
- Classifies each one and publishes the whole board in a single assignment,
  so readers see either the previous board or the new one, never a mix
- Schedules refreshes through an injected IntervalScheduler and hands back a
  cancellable handle instead of owning a global timer

Rule: Board owns the refresh cycle, classifier owns the thresholds.
"""

from __future__ import annotations

import logging
import os
import random
import threading
from typing import Callable, Dict, Iterable, Optional, Protocol, Sequence, Tuple

from .classifier import InvalidReadingError, classify_reading
from .models import BoardEntry, Facility, OccupancyReading

logger = logging.getLogger(__name__)

ReadingSource = Callable[[Sequence[Facility]], Dict[str, OccupancyReading]]


def default_refresh_seconds() -> float:
    return float(os.getenv("OCCUPANCY_REFRESH_SECONDS", "3"))


# ----------------
# Reading sources
# ----------------

class SimulatedReadingSource:
    """
    Demo feed: every facility gets current = floor(random * max_count).
    """
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def __call__(self, facilities: Sequence[Facility]) -> Dict[str, OccupancyReading]:
        return {
            facility.id: OccupancyReading(
                current_count=int(self.rng.random() * facility.max_count),
                max_count=facility.max_count,
            )
            for facility in facilities
        }


class StaticReadingSource:
    """
    Always returns the same readings (first paint, tests).
    """
    def __init__(self, readings: Dict[str, OccupancyReading]):
        self.readings = dict(readings)

    def __call__(self, facilities: Sequence[Facility]) -> Dict[str, OccupancyReading]:
        return {facility.id: self.readings[facility.id] for facility in facilities if facility.id in self.readings}


# ----------------
# Scheduling
# ----------------

class IntervalHandle(Protocol):
    def cancel(self) -> None: ...


class IntervalScheduler(Protocol):
    def every(self, interval_s: float, callback: Callable[[], object]) -> IntervalHandle: ...


class _ThreadInterval:
    """
    Runs callback every interval_s on a daemon thread until cancelled.
    """
    def __init__(self, interval_s: float, callback: Callable[[], object]):
        self.interval_s = interval_s
        self.callback = callback
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, name="occupancy-refresh", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def _run(self) -> None:
        while not self._stop.wait(self.interval_s):
            try:
                self.callback()
            except Exception:
                # keep ticking, the next refresh may succeed
                logger.exception("Occupancy refresh failed")

    def cancel(self) -> None:
        self._stop.set()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()


class ThreadingIntervalScheduler:
    def every(self, interval_s: float, callback: Callable[[], object]) -> _ThreadInterval:
        interval = _ThreadInterval(interval_s, callback)
        interval.start()
        return interval


# ----------------
# Board
# ----------------

class OccupancyBoard:
    """
    Latest classified reading for each monitored facility.
    """
    def __init__(
        self,
        facilities: Iterable[Facility],
        source: Optional[ReadingSource] = None,
        interval_s: Optional[float] = None,
    ):
        self.facilities: Tuple[Facility, ...] = tuple(facilities)
        self.source = source or SimulatedReadingSource()
        self.interval_s = interval_s if interval_s is not None else default_refresh_seconds()
        if self.interval_s <= 0:
            raise ValueError("interval_s must be > 0")

        self._entries: Tuple[BoardEntry, ...] = ()
        self._handle: Optional[IntervalHandle] = None

    @property
    def entries(self) -> Tuple[BoardEntry, ...]:
        return self._entries

    @property
    def running(self) -> bool:
        return self._handle is not None

    def get(self, facility_id: str) -> Optional[BoardEntry]:
        for entry in self._entries:
            if entry.facility.id == facility_id:
                return entry
        return None

    def refresh(self) -> Tuple[BoardEntry, ...]:
        """
        Pull readings and publish a new board. Facilities with a missing or
        unclassifiable reading are left off this board (and logged).
        """
        readings = self.source(self.facilities)

        rows = []
        for facility in self.facilities:
            reading = readings.get(facility.id)
            if reading is None:
                logger.warning("No reading for facility %s", facility.id)
                continue
            try:
                status = classify_reading(reading)
            except InvalidReadingError as exc:
                logger.warning("Skipping facility %s: %s", facility.id, exc)
                continue
            rows.append(BoardEntry(facility=facility, reading=reading, status=status))

        # single assignment, never mutate the published tuple
        self._entries = tuple(rows)
        return self._entries

    def start(self, scheduler: Optional[IntervalScheduler] = None) -> IntervalHandle:
        """
        Refresh every interval_s. Returns the handle; a second call while
        running returns the same handle.
        """
        if self._handle is not None:
            return self._handle

        scheduler = scheduler or ThreadingIntervalScheduler()
        self._handle = scheduler.every(self.interval_s, self.refresh)
        logger.info("Occupancy board refreshing every %.1fs", self.interval_s)
        return self._handle

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
