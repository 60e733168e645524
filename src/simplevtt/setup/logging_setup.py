from simplevtt.constants import APP_NAME

import platformdirs

import sys
import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 5


def setup_logging(
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    log_to_file: bool = False,
    log_dir: Path | None = None
) -> Path | None:
    """
    Replaces the root handlers with a stderr handler and an optional rotating log file.

    stdout is left alone, since it carries the WebVTT document.

    Args:
        console_level (str): Level name for stderr output (e.g., 'INFO', 'WARNING').
        file_level (str): Level name for the log file (e.g., 'DEBUG').
        log_to_file (bool): Whether to also log to `simplevtt.log`.
        log_dir (Path | None): Directory for the log file. Defaults to the user state dir.

    Returns:
        The log file path, or None when only stderr is used.
    """
    root = logging.getLogger()
    root.setLevel(logging.NOTSET)
    root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    root.addHandler(_handler(logging.StreamHandler(sys.stderr), console_level, formatter))

    if not log_to_file:
        return None

    log_file_path = (log_dir or Path(platformdirs.user_state_dir(APP_NAME, appauthor=False))) / f"{APP_NAME}.log"
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding='utf-8'
    )
    root.addHandler(_handler(file_handler, file_level, formatter))

    logging.debug(f"Logging {file_level.upper()} and above to {log_file_path.resolve()}")
    return log_file_path

def _handler(handler: logging.Handler, level: str, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level.upper())
    handler.setFormatter(formatter)
    return handler
