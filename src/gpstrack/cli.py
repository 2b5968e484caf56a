"""Command line entry point: report the extreme waypoints of a GPX or CSV track."""

import argparse
import logging
import sys
from pathlib import Path

from gpstrack.config import CSV_SUFFIXES, GPX_SUFFIXES
from gpstrack.core.track import NoWaypointsError, Track
from gpstrack.core.waypoint import Waypoint
from gpstrack.io import load_csv_track, load_gpx_track

logger = logging.getLogger(__name__)

EXTREMES = [
    ("Most easterly", Track.most_easterly_waypoint),
    ("Most westerly", Track.most_westerly_waypoint),
    ("Most northerly", Track.most_northerly_waypoint),
    ("Most southerly", Track.most_southerly_waypoint),
    ("Highest", Track.highest_waypoint),
    ("Lowest", Track.lowest_waypoint),
]


def format_waypoint(label: str, wp: Waypoint) -> str:
    return f"{label:<15} lat={wp.latitude:.6f} lon={wp.longitude:.6f} alt={wp.altitude:.1f}"


def detect_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in GPX_SUFFIXES:
        return 'gpx'
    if suffix in CSV_SUFFIXES:
        return 'csv'
    raise ValueError(f"Cannot infer file format from '{path.name}', use --format")


def load_track(path: Path, file_format: str | None = None) -> Track:
    file_format = file_format or detect_format(path)
    if file_format == 'gpx':
        return load_gpx_track(path)
    return load_csv_track(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpstrack",
        description="Find the most easterly waypoint of a recorded GPS track."
    )
    parser.add_argument("input", type=Path, help="Path to a GPX or CSV track file.")
    parser.add_argument(
        "--format",
        choices=["gpx", "csv"],
        default=None,
        help="Input format. Inferred from the file suffix if omitted."
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Report every extreme waypoint, not only the most easterly."
    )
    parser.add_argument("--plot", type=Path, default=None, help="Save a PNG plot of the track here.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        track = load_track(args.input, args.format)
        extremes = EXTREMES if args.all else EXTREMES[:1]
        for label, query in extremes:
            print(format_waypoint(label, query(track)))

        if args.plot is not None:
            from gpstrack.visualization import plot_track
            import matplotlib.pyplot as plt
            ax = plot_track(track, output_path=args.plot, title=args.input.name)
            plt.close(ax.figure)
    except NoWaypointsError as e:
        logger.error(f"{args.input}: {e}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Could not process {args.input}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
