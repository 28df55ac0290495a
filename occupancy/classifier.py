"""
Purpose: Map a headcount to a crowd level.
What it does:
ratio = current / max
  ratio <  0.5        -> NORMAL  (空闲)
  0.5 <= ratio < 0.8  -> BUSY    (较忙)
  ratio >= 0.8        -> CROWDED (拥挤)

Thresholds are fixed. A capacity of zero (or less) is rejected instead of
producing a non-finite ratio.
"""

from .models import OccupancyReading, OccupancyStatus

BUSY_THRESHOLD = 0.5
CROWDED_THRESHOLD = 0.8


class InvalidReadingError(ValueError):
    """Reading that cannot be classified (non-positive capacity, negative count)."""


def validate_reading(current: int, max_count: int) -> None:
    if max_count <= 0:
        raise InvalidReadingError(f"max_count must be > 0, got {max_count}")
    if current < 0:
        raise InvalidReadingError(f"current count must be >= 0, got {current}")


def classify(current: int, max_count: int) -> OccupancyStatus:
    validate_reading(current, max_count)

    ratio = current / max_count
    if ratio < BUSY_THRESHOLD:
        return OccupancyStatus.NORMAL
    if ratio < CROWDED_THRESHOLD:
        return OccupancyStatus.BUSY
    return OccupancyStatus.CROWDED


def classify_reading(reading: OccupancyReading) -> OccupancyStatus:
    return classify(reading.current_count, reading.max_count)


def status_label(current: int, max_count: int) -> str:
    return classify(current, max_count).label
