# src/task_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task-tracker.log"

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Minimum level shown on the console for loggers outside the package.
_CONSOLE_FLOORS = {
    "py.warnings": logging.ERROR,
    "asyncio": logging.WARNING,
}


class _ConsoleNoiseFilter(logging.Filter):
    """Pass every task_tracker record; hold other loggers to a floor (ERROR by default)."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "task_tracker" or name.startswith("task_tracker."):
            return True

        for prefix, floor in _CONSOLE_FLOORS.items():
            if name == prefix or name.startswith(prefix + "."):
                return record.levelno >= floor
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/task-tracker",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send records to stderr (filtered, at `console_level`) and to
    `<log_dir>/task-tracker.log` (unfiltered, at `file_level`).

    Replaces whatever handlers the root logger had. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    logging.captureWarnings(True)

    return log_file
