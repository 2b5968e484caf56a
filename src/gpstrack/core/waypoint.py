from dataclasses import dataclass

@dataclass(frozen=True)
class Waypoint:
    """
    Represents a single geographic position (latitude, longitude, altitude).
    Values are stored verbatim: no range checks, no normalization.
    """
    latitude: float
    longitude: float
    altitude: float

    @property
    def tuple(self):
        return (self.latitude, self.longitude, self.altitude)

@dataclass(frozen=True)
class Trackpoint:
    """
    A Waypoint recorded at a given timestamp along a path.
    The timestamp unit is up to the producer (the readers emit POSIX seconds).
    """
    waypoint: Waypoint
    timestamp: float

    @property
    def latitude(self) -> float:
        return self.waypoint.latitude

    @property
    def longitude(self) -> float:
        return self.waypoint.longitude

    @property
    def altitude(self) -> float:
        return self.waypoint.altitude
