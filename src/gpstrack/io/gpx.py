"""GPX file loading for tracks."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List

import gpxpy
import gpxpy.gpx

from gpstrack.config import DEFAULT_ALTITUDE
from gpstrack.core.track import Track
from gpstrack.core.waypoint import Trackpoint, Waypoint

logger = logging.getLogger(__name__)


def to_posix_seconds(time: datetime) -> float:
    """Converts a GPX time to POSIX seconds, reading naive times as UTC."""
    if time.tzinfo is None:
        time = time.replace(tzinfo=timezone.utc)
    return time.timestamp()


class GPXParser:
    """
    Reads the <trk>/<trkseg>/<trkpt> elements of a GPX file into Trackpoints.
    Segments and tracks are concatenated in document order.
    """

    def __init__(self, file_path: str | Path, default_altitude: float = DEFAULT_ALTITUDE):
        """
        Args:
            file_path: Path to the GPX file.
            default_altitude: Altitude given to points without an <ele> element.
        """
        self.file_path = Path(file_path)
        if not self.file_path.exists():
            raise FileNotFoundError(f"File not found: {self.file_path}")
        self.default_altitude = default_altitude

    def parse(self) -> List[Trackpoint]:
        """
        Returns the trackpoints of every track in the file.
        Points without a <time> element are skipped.
        """
        logger.debug(f"Parsing GPX file {self.file_path}")
        with open(self.file_path, 'r', encoding='utf-8') as f:
            try:
                gpx = gpxpy.parse(f)
            except gpxpy.gpx.GPXException as e:
                logger.error(f"Failed to parse {self.file_path}: {e}")
                raise ValueError(f"Invalid GPX file {self.file_path}: {e}") from e

        trackpoints = []
        skipped = 0
        for track in gpx.tracks:
            for segment in track.segments:
                for p in segment.points:
                    if p.time is None:
                        skipped += 1
                        continue
                    altitude = p.elevation if p.elevation is not None else self.default_altitude
                    trackpoints.append(Trackpoint(
                        waypoint=Waypoint(
                            latitude=p.latitude,
                            longitude=p.longitude,
                            altitude=altitude,
                        ),
                        timestamp=to_posix_seconds(p.time),
                    ))

        if skipped:
            logger.warning(f"Skipped {skipped} points without a timestamp in {self.file_path}")
        logger.info(f"Loaded {len(trackpoints)} trackpoints from {self.file_path}")
        return trackpoints


def load_gpx_track(file_path: str | Path, default_altitude: float = DEFAULT_ALTITUDE) -> Track:
    return Track(GPXParser(file_path, default_altitude=default_altitude).parse())
