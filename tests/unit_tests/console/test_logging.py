import logging
import sys

import pytest

from quadroots.logging import TerminalFormatter, TimestampedFileHandler


def _record(level, exc_info=None):
    return logging.LogRecord(
        "quadroots.storage", level, __file__, 1, "document missing", None, exc_info
    )


@pytest.mark.parametrize(
    "level, expected",
    [
        (logging.DEBUG, "[DEBUG] document missing"),
        (logging.INFO, "[ INFO] document missing"),
        (logging.WARNING, "[ WARN] document missing"),
        (logging.ERROR, "[ERROR] document missing"),
        (logging.CRITICAL, "[ERROR] document missing"),
        (5, "document missing"),
    ],
)
def test_terminal_formatter_tags_level(level, expected):
    assert TerminalFormatter().format(_record(level)) == expected


def test_terminal_formatter_hides_traceback():
    try:
        raise OSError("disk full")
    except OSError:
        record = _record(logging.ERROR, sys.exc_info())
    assert TerminalFormatter().format(record) == "[ERROR] document missing"


def test_timestamped_file_handler(tmp_path):
    handler = TimestampedFileHandler(
        "quadroots-log.txt", log_dir=tmp_path / "logs", delay=True
    )
    try:
        handler.emit(_record(logging.INFO))
    finally:
        handler.close()
    (logfile,) = (tmp_path / "logs").glob("quadroots-log-*.txt")
    assert "document missing" in logfile.read_text()
