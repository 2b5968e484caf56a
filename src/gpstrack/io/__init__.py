from .gpx import GPXParser, load_gpx_track
from .stream import TrackpointStream, load_csv_track

__all__ = ["GPXParser", "load_gpx_track", "TrackpointStream", "load_csv_track"]
