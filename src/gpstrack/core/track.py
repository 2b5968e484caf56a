import operator
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from .waypoint import Trackpoint, Waypoint


class NoWaypointsError(ValueError):
    """Raised when a query needs at least one trackpoint and the track has none."""


@dataclass(frozen=True, init=False)
class Track:
    """
    An ordered, read-only sequence of trackpoints representing a recorded path.
    An empty track can be built, but every extreme query on it raises NoWaypointsError.
    """
    trackpoints: tuple[Trackpoint, ...]

    def __init__(self, trackpoints: Iterable[Trackpoint] = ()):
        object.__setattr__(self, "trackpoints", tuple(trackpoints))

    def __len__(self) -> int:
        return len(self.trackpoints)

    def __iter__(self) -> Iterator[Trackpoint]:
        return iter(self.trackpoints)

    @property
    def waypoints(self) -> tuple[Waypoint, ...]:
        return tuple(tp.waypoint for tp in self.trackpoints)

    @property
    def start_time(self) -> float:
        if not self.trackpoints:
            raise NoWaypointsError("Track is empty")
        return self.trackpoints[0].timestamp

    @property
    def end_time(self) -> float:
        if not self.trackpoints:
            raise NoWaypointsError("Track is empty")
        return self.trackpoints[-1].timestamp

    def _extreme_waypoint(
        self,
        key: Callable[[Waypoint], float],
        better: Callable[[float, float], bool],
    ) -> Waypoint:
        """
        Linear scan keeping the first waypoint whose key strictly beats the current best.
        Ties therefore resolve to the earliest trackpoint in the sequence.
        """
        if not self.trackpoints:
            raise NoWaypointsError("No waypoints available")

        best = self.trackpoints[0].waypoint
        for tp in self.trackpoints[1:]:
            if better(key(tp.waypoint), key(best)):
                best = tp.waypoint
        return best

    def most_easterly_waypoint(self) -> Waypoint:
        """
        Returns the waypoint with the greatest longitude.

        Longitudes are compared as plain signed values on [-180, 180]; there is
        no wraparound at the antimeridian, so +179.995 is east of -179.995.

        Raises:
            NoWaypointsError: if the track has no trackpoints.
        """
        return self._extreme_waypoint(lambda wp: wp.longitude, operator.gt)

    def most_westerly_waypoint(self) -> Waypoint:
        return self._extreme_waypoint(lambda wp: wp.longitude, operator.lt)

    def most_northerly_waypoint(self) -> Waypoint:
        return self._extreme_waypoint(lambda wp: wp.latitude, operator.gt)

    def most_southerly_waypoint(self) -> Waypoint:
        return self._extreme_waypoint(lambda wp: wp.latitude, operator.lt)

    def highest_waypoint(self) -> Waypoint:
        return self._extreme_waypoint(lambda wp: wp.altitude, operator.gt)

    def lowest_waypoint(self) -> Waypoint:
        return self._extreme_waypoint(lambda wp: wp.altitude, operator.lt)
