"""
Purpose: Domain models for the Occupancy capability.
What it does:
- Defines core data structures:
- Facility (id, code, name, type, max_count, optional location)
- OccupancyReading (current_count, max_count)
- BoardEntry (facility + reading + status, one row of the flip board)

Defines enums/constants:
- FacilityType = library | canteen | express
- OccupancyStatus = normal | busy | crowded (with display labels)

Rule: No classification thresholds, no refresh logic. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

LatLon = Tuple[float, float]


class FacilityType(str, Enum):
    LIBRARY = "library"
    CANTEEN = "canteen"
    EXPRESS = "express"


class OccupancyStatus(str, Enum):
    """
    Discrete crowd level shown on the board.
    """
    NORMAL = "normal"
    BUSY = "busy"
    CROWDED = "crowded"

    @property
    def label(self) -> str:
        return _LABELS[self][0]

    @property
    def english_label(self) -> str:
        return _LABELS[self][1]

    @property
    def css_class(self) -> str:
        return f"status-{self.value}"


_LABELS = {
    OccupancyStatus.NORMAL: ("空闲", "free"),
    OccupancyStatus.BUSY: ("较忙", "moderately busy"),
    OccupancyStatus.CROWDED: ("拥挤", "crowded"),
}


@dataclass(frozen=True)
class Facility:
    """
    A monitored place on campus (library branch, canteen, parcel point).
    """
    id: str
    code: str
    name: str
    type: FacilityType
    max_count: int
    location: Optional[LatLon] = None

    @classmethod
    def new(
        cls,
        facility_id: str,
        code: str,
        name: str,
        type: str | FacilityType,
        max_count: int,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
    ) -> Facility:
        if isinstance(type, str):
            type = FacilityType(type)

        location = (lat, lng) if lat is not None and lng is not None else None

        return cls(
            id=facility_id,
            code=code,
            name=name,
            type=type,
            max_count=int(max_count),
            location=location,
        )


@dataclass(frozen=True)
class OccupancyReading:
    current_count: int
    max_count: int

    @property
    def ratio(self) -> float:
        return self.current_count / self.max_count


@dataclass(frozen=True)
class BoardEntry:
    facility: Facility
    reading: OccupancyReading
    status: OccupancyStatus
