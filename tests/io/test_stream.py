import logging
import pytest
from datetime import datetime, timezone

from gpstrack.core.waypoint import Waypoint
from gpstrack.io.stream import TrackpointStream, load_csv_track

@pytest.fixture
def sample_csv(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    p = d / "track.csv"
    p.write_text(
        "time,latitude,longitude,altitude\n"
        "2024-01-01 12:00:00,10.0,54.42,100\n"
        "2024-01-01 12:00:01,20.0,87.42,110\n"
        "2024-01-01 12:00:02,30.0,-45.42,120\n"
        "2024-01-01 12:00:03,40.0,87.42,130\n"
    )
    return p

def test_stream_points(sample_csv):
    points = list(TrackpointStream(sample_csv).stream())

    assert len(points) == 4
    assert points[0].waypoint == Waypoint(10.0, 54.42, 100.0)
    assert points[3].longitude == 87.42

    start = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc).timestamp()
    assert points[0].timestamp == start
    assert points[3].timestamp == start + 3

def test_load_csv_track(sample_csv):
    track = load_csv_track(sample_csv)
    assert len(track) == 4
    assert track.most_easterly_waypoint() == Waypoint(20.0, 87.42, 110.0)

def test_custom_columns_without_altitude(tmp_path):
    p = tmp_path / "semicolon.csv"
    p.write_text("t;lat;lon\n2024-01-01T00:00:00;1.5;179.995\n2024-01-01T00:00:05;2.5;-179.995\n")

    stream = TrackpointStream(
        p,
        sep=';',
        col_mapping={'lat': 'lat', 'lon': 'lon', 'timestamp': 't'},
        default_altitude=7.0,
    )
    points = list(stream.stream())

    assert [p.altitude for p in points] == [7.0, 7.0]
    assert points[0].waypoint == Waypoint(1.5, 179.995, 7.0)

def test_missing_columns(tmp_path):
    p = tmp_path / "bad.csv"
    p.write_text("lat,lon\n10,20")  # Wrong headers

    with pytest.raises(ValueError, match="Missing"):
        list(TrackpointStream(p).stream())

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TrackpointStream(tmp_path / "nope.csv")

def test_numeric_times_are_kept_as_seconds(tmp_path):
    p = tmp_path / "epoch.csv"
    p.write_text(
        "time,latitude,longitude,altitude\n"
        "1000,10.0,54.42,100\n"
        "2000,20.0,87.42,100\n"
        "1704110400,30.0,-45.42,100\n"
        "1704110400.5,40.0,-54.42,100\n"
    )

    points = list(TrackpointStream(p).stream())

    assert [p.timestamp for p in points] == [1000.0, 2000.0, 1704110400.0, 1704110400.5]
    assert load_csv_track(p).start_time == 1000.0

def test_rows_with_missing_values_are_skipped(tmp_path, caplog):
    p = tmp_path / "gaps.csv"
    p.write_text(
        "time,latitude,longitude,altitude\n"
        "1000,10.0,,100\n"
        "2000,20.0,87.42,\n"
        "3000,30.0,-45.42,100\n"
        ",35.0,120.0,100\n"
        "4000,40.0,-54.42,100\n"
    )

    with caplog.at_level(logging.WARNING, logger="gpstrack.io.stream"):
        track = load_csv_track(p)

    assert [tp.timestamp for tp in track] == [3000.0, 4000.0]
    assert track.most_easterly_waypoint() == Waypoint(30.0, -45.42, 100.0)
    assert "Skipped 3 rows" in caplog.text
