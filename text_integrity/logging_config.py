"""
Centralized logging configuration for text_integrity.

Library code only creates module loggers; handlers are attached here,
once, by whichever front end (the CLI or a host application) calls
``setup_logging``. File logs rotate.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

NAMESPACE = "text_integrity"

# Global flag to prevent duplicate initialization
_logging_initialized = False

# Default log directory
LOG_DIR = Path.home() / ".text_integrity" / "logs"


def get_log_dir() -> Path:
    """Get the log directory, creating it if necessary."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    force: bool = False,
    debug_mode: bool = False,
) -> logging.Logger:
    """
    Configure logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path. Without one, no file is written
            unless debug_mode is on.
        console: Whether to log to stderr
        force: Force reconfiguration even if already initialized
        debug_mode: Enable verbose debug logging with file rotation

    Returns:
        The package logger
    """
    global _logging_initialized

    package_logger = logging.getLogger(NAMESPACE)
    if _logging_initialized and not force:
        return package_logger

    # Determine log level
    if debug_mode:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, str(level).upper(), logging.INFO)

    package_logger.setLevel(log_level)

    # Clear any existing handlers
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    log_path = None
    if log_file:
        log_path = Path(log_file)
    elif debug_mode:
        log_path = get_log_dir() / "text_integrity_debug.log"

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Rotating file handler: 5MB max, keep 3 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG if debug_mode else log_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ) if debug_mode else formatter)
        package_logger.addHandler(file_handler)

    _logging_initialized = True

    package_logger.debug(f"Logging initialized: level={level}, file={log_path}")

    return package_logger
