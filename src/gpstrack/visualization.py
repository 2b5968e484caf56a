"""Matplotlib plotting of tracks."""

import logging
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

from gpstrack.config import PLOT_DPI
from gpstrack.core.track import NoWaypointsError, Track

logger = logging.getLogger(__name__)


def plot_track(track: Track, output_path: Optional[str | Path] = None, ax=None, title: Optional[str] = None):
    """Plot a track as a path in (longitude, latitude) and mark its most easterly waypoint.

    Args:
        track: Track to draw.
        output_path: If given, the figure is saved there as an image.
        ax: Existing matplotlib Axes to draw on. A new figure is created if None.
        title: Axes title.

    Returns:
        The matplotlib Axes that was drawn on.

    Raises:
        NoWaypointsError: if the track is empty.
    """
    if not len(track):
        raise NoWaypointsError("Cannot plot an empty track")

    east = track.most_easterly_waypoint()
    lons = [wp.longitude for wp in track.waypoints]
    lats = [wp.latitude for wp in track.waypoints]

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 8))

    ax.plot(lons, lats, color='blue', linewidth=1.5, alpha=0.7, label='Track')
    ax.scatter(lons[0], lats[0], color='green', s=60, zorder=4, label='Start')
    ax.scatter(east.longitude, east.latitude, color='red', marker='*', s=200, zorder=5,
               label=f'Most easterly ({east.longitude:.5f})')
    ax.set_xlabel('Longitude')
    ax.set_ylabel('Latitude')
    ax.set_title(title or f"Track ({len(track)} points)")
    ax.legend()

    if output_path is not None:
        output_path = Path(output_path)
        ax.figure.tight_layout()
        ax.figure.savefig(output_path, dpi=PLOT_DPI, bbox_inches='tight')
        logger.info(f"Plot saved to {output_path}")

    return ax
