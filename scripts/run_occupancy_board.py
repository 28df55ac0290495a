import logging
import time

from occupancy import OccupancyBoard, StaticReadingSource, load_facilities, load_sample_readings


def print_board(board: OccupancyBoard):
    print("-" * 48)
    for entry in board.entries:
        reading = entry.reading
        print(
            f"{entry.facility.code:<6} {entry.facility.name:<8} "
            f"{reading.current_count:>4} / {reading.max_count:<4} {entry.status.label}"
        )


def main(ticks: int = 5):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    facilities = load_facilities()

    # first paint from the sample headcounts, then live (simulated) readings
    first = OccupancyBoard(facilities, source=StaticReadingSource(load_sample_readings()))
    first.refresh()
    print_board(first)

    board = OccupancyBoard(facilities)
    board.refresh()
    board.start()
    try:
        for _ in range(ticks):
            time.sleep(board.interval_s)
            print_board(board)
    finally:
        board.stop()


if __name__ == "__main__":
    main()
