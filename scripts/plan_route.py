import argparse
import logging

from routing import RoutePlanner


def main():
    parser = argparse.ArgumentParser(description="Plan a walking route between two campus points.")
    parser.add_argument("--start", nargs=2, type=float, metavar=("LAT", "LON"), default=[39.9062, 116.4084])
    parser.add_argument("--end", nargs=2, type=float, metavar=("LAT", "LON"), default=[39.9072, 116.4094])
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    planner = RoutePlanner()
    planned = planner.plan(tuple(args.start), tuple(args.end))

    path = planned.path
    print(f"\nRoute ({path.source.value}) with {len(path)} points")
    print(f"  from {path.start} to {path.end}")
    print(f"  distance {round(planned.metrics.distance_m)} m")
    print(f"  walking time {planned.metrics.eta_minutes:.1f} min\n")


if __name__ == "__main__":
    main()
