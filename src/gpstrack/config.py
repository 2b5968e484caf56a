"""Configuration constants for track loading and plotting."""

# Altitude used when a source point carries none
DEFAULT_ALTITUDE = 0.0

# CSV column names expected by TrackpointStream
DEFAULT_COLUMNS = {
    'lat': 'latitude',
    'lon': 'longitude',
    'alt': 'altitude',
    'timestamp': 'time',
}
CSV_CHUNKSIZE = 1000  # rows per pandas chunk

# File suffixes used by the CLI to pick a reader
GPX_SUFFIXES = ('.gpx',)
CSV_SUFFIXES = ('.csv', '.txt')

PLOT_DPI = 150
