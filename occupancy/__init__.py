#Marks occupancy as a package.
#Re-exports the public APIs (classify, OccupancyBoard, load_facilities)
#so the backend imports from occupancy without knowing internal file names.
#No business logic.

from .models import BoardEntry, Facility, FacilityType, OccupancyReading, OccupancyStatus
from .classifier import InvalidReadingError, classify, classify_reading, status_label
from .board import (
    OccupancyBoard,
    SimulatedReadingSource,
    StaticReadingSource,
    ThreadingIntervalScheduler,
)
from .loader import load_facilities, load_sample_readings

__all__ = [
    "BoardEntry",
    "Facility",
    "FacilityType",
    "OccupancyReading",
    "OccupancyStatus",
    "InvalidReadingError",
    "classify",
    "classify_reading",
    "status_label",
    "OccupancyBoard",
    "SimulatedReadingSource",
    "StaticReadingSource",
    "ThreadingIntervalScheduler",
    "load_facilities",
    "load_sample_readings",
]
