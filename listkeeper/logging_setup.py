"""Console and file logging for both apps."""

import logging
import sys
from pathlib import Path

from .config import LOG_FILE_NAME


class _ConsoleNoiseFilter(logging.Filter):
    """Keep our own records on the console; third-party ones only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "listkeeper" or record.name.startswith("listkeeper."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """Install a console handler and a file handler on the root logger.

    Call once, before the first window is built. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file


def level_from_name(name: str | None) -> int:
    level = getattr(logging, str(name or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO
