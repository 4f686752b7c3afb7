import logging

from series_motifs.logging_ import setup_logging


def test_setup_logging_writes_run_log_and_replaces_handlers(tmp_path) -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        first = setup_logging(str(tmp_path / "a"), "run-a")
        second = setup_logging(str(tmp_path / "b"), "run-b", log_dir=str(tmp_path / "logs"))
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 2

        logging.getLogger("series_motifs.test").info("hello from run b")
        for h in added:
            h.flush()
        assert first.endswith("run-a.log")
        assert second == str(tmp_path / "logs" / "run-b.log")
        assert "hello from run b" in (tmp_path / "logs" / "run-b.log").read_text(encoding="utf-8")
        assert "hello from run b" not in (tmp_path / "a" / "logs" / "run-a.log").read_text(encoding="utf-8")
    finally:
        for h in root.handlers[:]:
            if h not in before:
                root.removeHandler(h)
                h.close()
