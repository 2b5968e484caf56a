"""GPS track data model and extreme-waypoint queries."""

from .core import NoWaypointsError, Track, Trackpoint, Waypoint

__all__ = ["Waypoint", "Trackpoint", "Track", "NoWaypointsError"]
__version__ = "0.1.0"
