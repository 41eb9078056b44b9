"""Logging configuration for the Buddy shell."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "buddy.log"


class _ConsoleNoiseFilter(logging.Filter):
    """Keep the interactive console readable.

    Buddy's own records pass at the handler level; anything else only
    reaches the console at ERROR or above.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "buddy" or record.name.startswith("buddy."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Optional[Path]:
    """Configure the root logger with a console handler and a file handler.

    Call this once, before the first command runs. When ``log_dir`` is None
    or cannot be created, only the console handler is installed.

    Returns:
        The log file path, or None when file logging is disabled
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is None:
        return None

    log_file = Path(log_dir).expanduser() / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).warning(f"File logging disabled, cannot open {log_file}: {e}")
        return None

    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
