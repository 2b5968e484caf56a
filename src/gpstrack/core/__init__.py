from .waypoint import Waypoint, Trackpoint
from .track import Track, NoWaypointsError

__all__ = ["Waypoint", "Trackpoint", "Track", "NoWaypointsError"]
