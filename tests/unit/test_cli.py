import logging

import pytest

from series_motifs.cli import main


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def test_sources_command(capsys) -> None:
    assert main(["sources"]) == 0
    out = capsys.readouterr().out
    assert "repeated_random (static)" in out
    assert "local_table (static)" in out


def test_scan_command(tmp_path, capsys) -> None:
    config = tmp_path / "scan.yaml"
    config.write_text(
        "run:\n"
        "  run_id: cli\n"
        f"  out_dir: {tmp_path.as_posix()}/{{run_id}}\n"
        "fingerprint:\n"
        "  window_size: 20\n"
        "output:\n"
        "  plot: false\n"
        "series:\n"
        "  - {name: rnd, kind: repeated_random, length: 100, repeats: 2, seed: 5}\n",
        encoding="utf-8",
    )
    assert main(["scan", "--config", str(config)]) == 0
    out = capsys.readouterr().out
    assert "rnd" in out
    assert (tmp_path / "cli" / "manifests" / "cli.json").exists()
    assert (tmp_path / "cli" / "logs" / "cli.log").exists()
    assert (tmp_path / "cli" / "occurrences" / "rnd.parquet").exists()


def test_demo_with_invalid_window_exits_with_error(tmp_path, capsys) -> None:
    assert main(["demo", "--out-dir", str(tmp_path), "--window-size", "0", "--no-plot"]) == 1
    assert "Error" in capsys.readouterr().out


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main([])
