"""
Process-wide occupancy board for the API.
Built lazily on first use. The first paint shows the bundled headcounts;
later refreshes come from the simulated feed, and the refresh thread only
starts when settings.OCCUPANCY_AUTOREFRESH is on.
"""

import logging
import threading
from typing import Optional

from django.conf import settings

from occupancy import (
    OccupancyBoard,
    SimulatedReadingSource,
    StaticReadingSource,
    load_facilities,
    load_sample_readings,
)

logger = logging.getLogger(__name__)

_board: Optional[OccupancyBoard] = None
_board_lock = threading.Lock()


def get_board() -> OccupancyBoard:
    global _board
    with _board_lock:
        if _board is None:
            board = OccupancyBoard(load_facilities(), source=StaticReadingSource(load_sample_readings()))
            board.refresh()
            board.source = SimulatedReadingSource()
            if getattr(settings, "OCCUPANCY_AUTOREFRESH", True):
                board.start()
            logger.info("Occupancy board ready with %d facilities", len(board.facilities))
            _board = board
        return _board


def reset_board() -> None:
    """Stop and drop the shared board (tests, reloads)."""
    global _board
    with _board_lock:
        if _board is not None:
            _board.stop()
        _board = None
