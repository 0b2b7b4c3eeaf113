import logging
import os
import pathlib
from datetime import datetime
from typing import Any

LOGGING_CONFIG = pathlib.Path(__file__).parent.resolve() / "logger.conf"

_LEVEL_TAGS = {
    logging.ERROR: "[ERROR]",
    logging.WARNING: "[ WARN]",
    logging.INFO: "[ INFO]",
    logging.DEBUG: "[DEBUG]",
}


class TimestampedFileHandler(logging.FileHandler):
    """File handler writing to ``<name>-<timestamp><ext>``, inside ``log_dir``
    when given."""

    def __init__(self, filename: str, *args: Any, **kwargs: Any) -> None:
        timestamp = datetime.now().isoformat(timespec="minutes")
        name, extension = os.path.splitext(filename)
        filename = f"{name}-{timestamp}{extension}"

        log_dir = kwargs.pop("log_dir", None)
        if log_dir is not None:
            pathlib.Path(log_dir).mkdir(exist_ok=True, parents=True)
            filename = str(pathlib.Path(log_dir) / filename)

        super().__init__(filename, *args, **kwargs)


class TerminalFormatter(logging.Formatter):
    """Prefix messages with their level and leave tracebacks out of the
    terminal; the log file keeps them."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        tag = _LEVEL_TAGS.get(min(record.levelno, logging.ERROR), "")
        return f"{tag} {record.message}".lstrip()

    def formatException(self, ei: Any) -> str:
        return ""
