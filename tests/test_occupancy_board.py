import logging
import random
import threading

import pytest

from occupancy import (
    Facility,
    FacilityType,
    OccupancyBoard,
    OccupancyReading,
    OccupancyStatus,
    SimulatedReadingSource,
    StaticReadingSource,
    ThreadingIntervalScheduler,
    load_facilities,
    load_sample_readings,
)


class ManualHandle:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """
    Records what would be scheduled; the test fires ticks by hand.
    """
    def __init__(self):
        self.interval_s = None
        self.callback = None
        self.handle = ManualHandle()

    def every(self, interval_s, callback):
        self.interval_s = interval_s
        self.callback = callback
        return self.handle

    def tick(self):
        self.callback()


@pytest.fixture
def facilities():
    return load_facilities()


@pytest.fixture
def sample_board(facilities):
    return OccupancyBoard(facilities, source=StaticReadingSource(load_sample_readings()), interval_s=3.0)


def test_bundled_facilities(facilities):
    assert len(facilities) == 8

    library = facilities[0]
    assert library.id == "lib1"
    assert library.code == "LIB-A"
    assert library.type == FacilityType.LIBRARY
    assert library.max_count == 500
    assert library.location is None


def test_refresh_classifies_every_facility(sample_board):
    entries = sample_board.refresh()

    assert len(entries) == 8
    assert sample_board.get("lib1").status == OccupancyStatus.NORMAL   # 153 / 500
    assert sample_board.get("can1").status == OccupancyStatus.BUSY     # 155 / 300
    assert sample_board.get("nope") is None


def test_refresh_replaces_board_in_one_assignment(facilities):
    rng = random.Random(7)
    board = OccupancyBoard(facilities, source=SimulatedReadingSource(rng), interval_s=3.0)

    before = board.refresh()
    after = board.refresh()

    # readers holding the old board keep a complete, unchanged snapshot
    assert before is not after
    assert isinstance(before, tuple)
    assert len(before) == len(after) == len(facilities)
    assert board.entries is after


def test_simulated_source_stays_below_capacity(facilities):
    source = SimulatedReadingSource(random.Random(42))

    for _ in range(20):
        readings = source(facilities)
        for facility in facilities:
            reading = readings[facility.id]
            assert 0 <= reading.current_count < facility.max_count
            assert reading.max_count == facility.max_count


def test_bad_reading_skips_only_that_facility(caplog):
    facilities = [
        Facility.new("a", "A", "Alpha", "canteen", 100),
        Facility.new("b", "B", "Beta", "express", 50),
        Facility.new("c", "C", "Gamma", "library", 10),
    ]
    source = StaticReadingSource({
        "a": OccupancyReading(current_count=90, max_count=100),
        "b": OccupancyReading(current_count=5, max_count=0),
        # "c" has no reading at all
    })
    board = OccupancyBoard(facilities, source=source, interval_s=1.0)

    with caplog.at_level(logging.WARNING, logger="occupancy.board"):
        entries = board.refresh()

    assert [entry.facility.id for entry in entries] == ["a"]
    assert entries[0].status == OccupancyStatus.CROWDED
    assert len(caplog.records) == 2


def test_start_schedules_refresh_and_stop_cancels(sample_board):
    scheduler = ManualScheduler()

    handle = sample_board.start(scheduler)

    # 1. scheduled at the board interval, nothing published yet
    assert scheduler.interval_s == 3.0
    assert sample_board.running
    assert sample_board.entries == ()

    # 2. a tick refreshes the board
    scheduler.tick()
    assert len(sample_board.entries) == 8

    # 3. starting again does not double-schedule
    assert sample_board.start(scheduler) is handle

    # 4. stop cancels the handle
    sample_board.stop()
    assert handle.cancelled
    assert not sample_board.running


def test_interval_defaults_to_environment(facilities, monkeypatch):
    monkeypatch.setenv("OCCUPANCY_REFRESH_SECONDS", "0.5")
    assert OccupancyBoard(facilities).interval_s == 0.5

    monkeypatch.delenv("OCCUPANCY_REFRESH_SECONDS")
    assert OccupancyBoard(facilities).interval_s == 3.0


def test_interval_must_be_positive(facilities):
    with pytest.raises(ValueError):
        OccupancyBoard(facilities, interval_s=0)


def test_threading_scheduler_ticks_until_cancelled():
    fired = threading.Event()

    handle = ThreadingIntervalScheduler().every(0.01, fired.set)
    try:
        assert fired.wait(timeout=2.0)
    finally:
        handle.cancel()

    assert handle.cancelled
