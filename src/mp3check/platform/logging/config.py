"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the console and file handlers of the shared ``mp3check`` logger.
Why: Violations go to the console for the user and, in full detail, to a rotating log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from mp3check.config.paths import default_log_file

from .handlers import AuditRichHandler

LOGGER_NAME: Final[str] = "mp3check"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(level: int) -> logging.Handler:
    # stderr keeps the summary table on stdout clean
    handler = AuditRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    resolved = Path(log_file).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the application logger.

    Calling it again replaces the handlers of the previous call, so the CLI
    can switch to the configured log file once the configuration is loaded.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to INFO.
        file_level: Logging level for file output. Defaults to DEBUG.

    Returns:
        logging.Logger: Configured logger instance.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)

    app_logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        app_logger.addHandler(_file_handler(log_file, file_level))

    return app_logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
