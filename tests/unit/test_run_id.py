from datetime import datetime, timezone

from series_motifs.run_id import generate_run_id, resolve_out_dir, resolve_run_id


def test_explicit_run_id_wins() -> None:
    assert resolve_run_id({"run": {"run_id": " nightly "}}) == "nightly"


def test_missing_run_section_defaults() -> None:
    assert resolve_run_id({}) == "run"
    assert resolve_out_dir({}, "run") == "storage"


def test_auto_run_id_uses_first_series_name() -> None:
    cfg = {
        "run": {"run_id_auto": {"prefix_digits": 4, "suffix_digits": 2}},
        "series": [{"name": "my sensor", "kind": "local_table"}],
    }
    run_id = resolve_run_id(cfg)
    name, year, tail = run_id.split("_")[-3:]
    assert run_id.startswith("my_sensor_")
    assert len(year) == 4 and year.isdigit()
    assert len(tail) == 2 and tail.isdigit()


def test_auto_run_id_without_name() -> None:
    run_id = generate_run_id({}, {"include_input_name": False, "prefix_digits": 8, "suffix_digits": 0})
    assert len(run_id) == 8 and run_id.isdigit()


def test_out_dir_placeholder() -> None:
    assert resolve_out_dir({"run": {"out_dir": "storage/{run_id}/scan"}}, "abc") == "storage/abc/scan"


def test_auto_run_id_takes_stamp_digits_from_clock() -> None:
    now = datetime(2026, 3, 9, 14, 30, 15, tzinfo=timezone.utc)
    cfg = {"series": [{"name": "sin", "kind": "sine"}]}
    assert generate_run_id(cfg, {}, now=now) == "sin_2026_143015"
    assert generate_run_id(cfg, {"separator": "-", "suffix_digits": 0}, now=now) == "sin-2026"


def test_disabled_auto_run_id_falls_back() -> None:
    assert resolve_run_id({"run": {"run_id_auto": {"enabled": False}}}) == "run"
    assert resolve_run_id({"run": {"run_id": "", "run_id_auto": {"enabled": False}}}) == "run"
