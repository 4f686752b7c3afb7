from datetime import datetime, timedelta, timezone

import pytest

from series_motifs.fingerprints import Fingerprinter
from series_motifs.fingerprints.projections import no_meta, point_index, quantized_value
from series_motifs.sources import SeriesSpec, make_source

START = datetime(2020, 11, 1, tzinfo=timezone.utc)


def _fingerprinter(window_size: int) -> Fingerprinter:
    return Fingerprinter(quantized_value(4), point_index, no_meta, window_size)


def test_sine_source_is_periodic() -> None:
    points = make_source(SeriesSpec(name="sin", kind="sine", length=1300, period=600)).load()
    assert len(points) == 1300
    assert points[0].index == START
    assert points[1].index - points[0].index == timedelta(seconds=1)
    assert points[0].value == pytest.approx(0.0)
    assert points[150].value == pytest.approx(1.0)

    fp = _fingerprinter(50)
    fp.process_series(points)
    groups = [list(g) for g in fp.duplicates()]
    assert groups
    assert any(
        g[1].start_index - g[0].start_index == timedelta(seconds=600) for g in groups
    )


def test_sinc_source_is_centred_on_zero() -> None:
    points = make_source(SeriesSpec(name="sinc", kind="sinc", length=10, period=600)).load()
    assert len(points) == 10
    assert points[0].index == START - timedelta(seconds=5)
    assert points[5].index == START
    assert points[5].value == pytest.approx(1.0)
    assert points[4].value == pytest.approx(points[6].value)


def test_sinc_source_mirrored_halves_do_not_match() -> None:
    points = make_source(SeriesSpec(name="sinc", kind="sinc", length=2000, period=600)).load()
    fp = _fingerprinter(100)
    fp.process_series(points)
    assert list(fp.duplicates()) == []


def test_repeated_random_source_repeats_block() -> None:
    spec = SeriesSpec(name="rnd", kind="repeated_random", length=50, repeats=3, seed=3)
    points = make_source(spec).load()
    assert len(points) == 150
    for i in range(100):
        assert points[i].value == points[i + 50].value
    assert all(0.0 <= p.value < 1.0 for p in points)
    assert [p.value for p in make_source(spec).load()] == [p.value for p in points]


def test_custom_start_and_step() -> None:
    spec = SeriesSpec(
        name="sin", kind="sine", length=3, start="2021-01-01T00:00:00+00:00", step_seconds=60,
    )
    points = make_source(spec).load()
    assert [p.index for p in points] == [
        datetime(2021, 1, 1, 0, m, tzinfo=timezone.utc) for m in range(3)
    ]


def test_metadata_describes_source() -> None:
    meta = make_source(SeriesSpec(name="rnd", kind="repeated_random", length=5, seed=1)).metadata()
    assert meta["kind"] == "repeated_random"
    assert meta["name"] == "rnd"
    assert meta["seed"] == 1


def test_start_accepts_datetime_from_yaml() -> None:
    spec = SeriesSpec(name="sin", kind="sine", length=2, start=datetime(2021, 1, 1, tzinfo=timezone.utc))
    assert make_source(spec).load()[1].index == datetime(2021, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
