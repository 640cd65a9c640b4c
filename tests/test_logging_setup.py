# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from task_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_drops_noise() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_tracker.core.tracker", logging.DEBUG))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("asyncio", logging.INFO))
    assert f.filter(_record("asyncio", logging.WARNING))
    assert not f.filter(_record("somelib", logging.WARNING))
    assert f.filter(_record("somelib", logging.ERROR))


def test_setup_logging_writes_log_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("task_tracker.test").debug("hello file")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "task-tracker.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)


def test_setup_logging_filters_console_but_not_file(tmp_path: Path, capsys) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path, console_level=logging.DEBUG)
        logging.getLogger("somelib").warning("third party chatter")
        logging.getLogger("task_tracker.cli").info("own message")
        for h in root.handlers:
            h.flush()

        err = capsys.readouterr().err
        assert "own message" in err
        assert "third party chatter" not in err
        assert "third party chatter" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
