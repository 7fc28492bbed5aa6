"""
Logging configuration for the employee tracker.

Operation failures are logged at INFO: the user already sees them in the
menu, and the console handler only shows WARNING and above, so prompts
stay clean while the log file keeps the full record.
"""
import gzip
import logging
import logging.config
import os
import shutil
from logging.handlers import TimedRotatingFileHandler
from typing import Any, Dict, Optional

DEFAULT_LOG_FILE = "logs/employee_tracker.log"
DISABLED_VALUES = {"", "none", "false"}

CONSOLE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
FILE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(filename)s:%(lineno)d]: %(message)s"


class GZipTimedRotatingFileHandler(TimedRotatingFileHandler):
    """Rotates at the configured interval and gzips the rotated file."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.namer = lambda name: f"{name}.gz"

    def rotator(self, source: str, dest: str) -> None:
        with open(source, "rb") as src, gzip.open(dest, "wb") as dst:
            shutil.copyfileobj(src, dst)
        os.remove(source)


def _resolve_log_file(log_file: Optional[str]) -> Optional[str]:
    """LOG_FILE overrides the argument; disabled values turn file logging off"""
    path = os.getenv("LOG_FILE", log_file)
    if path is None or path.strip().lower() in DISABLED_VALUES:
        return None
    return path


def _file_handler(path: str, level: str) -> Dict[str, Any]:
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    return {
        "class": "employee_tracker.logging_setup.GZipTimedRotatingFileHandler",
        "formatter": "file",
        "filename": path,
        "when": "midnight",
        "backupCount": int(os.getenv("LOG_BACKUP_COUNT", "14")),
        "encoding": "utf-8",
        "level": level,
    }


def setup_logging(
    level: str = "INFO",
    console_level: str = "WARNING",
    log_file: Optional[str] = DEFAULT_LOG_FILE,
) -> None:
    """
    Configure the root logger with a console handler and, unless disabled,
    a midnight-rotating gzip file handler.

    Environment overrides: LOG_LEVEL, LOG_CONSOLE_LEVEL, LOG_FILE_LEVEL,
    LOG_FILE ("" / "none" / "false" disables the file) and LOG_BACKUP_COUNT.
    """
    root_level = os.getenv("LOG_LEVEL", level)

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "level": os.getenv("LOG_CONSOLE_LEVEL", "") or console_level,
        }
    }

    path = _resolve_log_file(log_file)
    if path:
        handlers["file"] = _file_handler(path, os.getenv("LOG_FILE_LEVEL", "") or root_level)

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": CONSOLE_FORMAT},
            "file": {"format": FILE_FORMAT},
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers.keys()),
            "level": root_level,
        },
    })


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module name."""
    return logging.getLogger(name)
