import logging
import pandas as pd
from typing import Iterator, Dict, Optional
from pathlib import Path

from gpstrack.config import CSV_CHUNKSIZE, DEFAULT_ALTITUDE, DEFAULT_COLUMNS
from gpstrack.core.track import Track
from gpstrack.core.waypoint import Trackpoint, Waypoint

logger = logging.getLogger(__name__)


class TrackpointStream:
    """
    Reads a CSV track file chunk by chunk and yields Trackpoints in row order.
    Files without an altitude column get default_altitude on every point.
    """
    def __init__(
        self,
        filepath: str | Path,
        sep: str = ',',
        col_mapping: Optional[Dict[str, str]] = None,
        default_altitude: float = DEFAULT_ALTITUDE,
    ):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")
        self.sep = sep
        self.default_altitude = default_altitude
        self.mapping = {**DEFAULT_COLUMNS, **(col_mapping or {})}

    def stream(self) -> Iterator[Trackpoint]:
        """
        Yields trackpoints one by one.
        Text timestamps are parsed with pandas and emitted as POSIX seconds,
        numeric ones are taken as seconds already. Rows with an empty
        coordinate or time cell are skipped.
        """
        header = pd.read_csv(self.filepath, nrows=0, sep=self.sep)
        required = [self.mapping['lat'], self.mapping['lon'], self.mapping['timestamp']]
        missing = [col for col in required if col not in header.columns]
        if missing:
            raise ValueError(
                f"CSV must contain columns {required}. Missing: {missing}"
            )
        has_alt_col = self.mapping['alt'] in header.columns
        if not has_alt_col:
            logger.debug(f"No '{self.mapping['alt']}' column in {self.filepath}, "
                         f"using altitude {self.default_altitude}")

        coord_cols = [self.mapping['lat'], self.mapping['lon']]
        if has_alt_col:
            coord_cols.append(self.mapping['alt'])

        skipped = 0
        with pd.read_csv(self.filepath, chunksize=CSV_CHUNKSIZE, sep=self.sep) as reader:
            for chunk in reader:
                valid = chunk[coord_cols + [self.mapping['timestamp']]].notna().all(axis=1)
                skipped += int((~valid).sum())
                chunk = chunk[valid]

                time_col = chunk[self.mapping['timestamp']]
                if pd.api.types.is_numeric_dtype(time_col):
                    # Numeric times are already seconds, keep them as they are
                    times = time_col.astype(float)
                else:
                    times = pd.to_datetime(time_col, utc=True).map(lambda t: t.timestamp())

                for (_, row), time in zip(chunk.iterrows(), times):
                    yield Trackpoint(
                        waypoint=Waypoint(
                            latitude=float(row[self.mapping['lat']]),
                            longitude=float(row[self.mapping['lon']]),
                            altitude=float(row[self.mapping['alt']]) if has_alt_col else self.default_altitude,
                        ),
                        timestamp=float(time),
                    )

        if skipped:
            logger.warning(f"Skipped {skipped} rows with missing values in {self.filepath}")


def load_csv_track(filepath: str | Path, **kwargs) -> Track:
    track = Track(TrackpointStream(filepath, **kwargs).stream())
    logger.info(f"Loaded {len(track)} trackpoints from {filepath}")
    return track
