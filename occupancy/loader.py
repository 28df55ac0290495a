import csv
import os
from typing import Dict, List, Optional

from .models import Facility, OccupancyReading

SAMPLE_FACILITIES = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sampledata", "facilities.csv")


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


def load_facilities(filepath: Optional[str] = None) -> List[Facility]:
    """
    Facilities from a CSV with columns
    facility_id, code, name, type, max_count[, current_count, lat, lng].
    Defaults to the bundled demo campus.
    """
    facilities = []
    with open(filepath or SAMPLE_FACILITIES, 'r', encoding="utf-8") as file:
        reader = csv.DictReader(file)
        for row in reader:
            facilities.append(
                Facility.new(
                    row['facility_id'],
                    row['code'],
                    row['name'],
                    row['type'],
                    int(row['max_count']),
                    lat=_optional_float(row.get('lat')),
                    lng=_optional_float(row.get('lng')),
                )
            )
    return facilities


def load_sample_readings(filepath: Optional[str] = None) -> Dict[str, OccupancyReading]:
    """
    Initial headcounts from the same CSV (rows without current_count are skipped).
    """
    readings = {}
    with open(filepath or SAMPLE_FACILITIES, 'r', encoding="utf-8") as file:
        reader = csv.DictReader(file)
        for row in reader:
            current = (row.get('current_count') or '').strip()
            if not current:
                continue
            readings[row['facility_id']] = OccupancyReading(
                current_count=int(current),
                max_count=int(row['max_count']),
            )
    return readings
