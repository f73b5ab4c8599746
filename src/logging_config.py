"""
Logging setup for the live scoreboard.

The scoreboard logs through `get_logger(__name__)`; stores log under
`Store.<store_name>`. Lookup misses and double adds are WARNINGs, every
add/update/complete is a DEBUG line, so INFO keeps a running board quiet.

    from logging_config import setup_logging, setup_store_logging

    setup_logging(level="DEBUG", enable_file=False)
    setup_store_logging(level="WARNING")

With file output on, three rotating files are written to `log_dir`:
live_scoreboard.log (INFO+), live_scoreboard_debug.log (DEBUG+) and
live_scoreboard_error.log (ERROR+).
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


# Log format templates
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Date format
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "live_scoreboard"


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to log levels for better readability.
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Add color to levelname without leaking it to other handlers"""
        plain_levelname = record.levelname
        if plain_levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[plain_levelname]}{plain_levelname}{self.COLORS['RESET']}"
            )
        try:
            return super().format(record)
        finally:
            record.levelname = plain_levelname


def _rotating_handler(log_dir: str, suffix: str, level: int, fmt: str,
                      max_bytes: int, backup_count: int) -> logging.Handler:
    """Build one rotating file handler"""
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Replace the root logger's handlers with scoreboard console/file output.

    Call once from the entry point (scoreboard_demo.py reads its arguments
    from ScoreboardSettings). Calling again discards the previous handlers.

    Args:
        level: Root level name, e.g. "INFO" or "DEBUG"
        log_dir: Created on demand when enable_file is set
        enable_console: Colored stderr output at `level`
        enable_file: Rotating live_scoreboard*.log files under log_dir
        max_bytes: Rotation size per file
        backup_count: Rotated files kept per log
        format_style: "detailed" adds file:line and function to the main log
    """
    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear any existing handlers
    root_logger.handlers.clear()

    log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        root_logger.addHandler(
            _rotating_handler(log_dir, "", logging.INFO, log_format, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_debug", logging.DEBUG, DETAILED_FORMAT, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_error", logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count)
        )

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module.

    Args:
        module_name: Module name (e.g., "scoreboard.scoreboard")
        level: Log level for this module (None = inherit from root)
        propagate: Whether to propagate to parent loggers

    Returns:
        Configured logger
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    logger.propagate = propagate

    return logger


def setup_store_logging(level: str = "WARNING") -> None:
    """
    Configure logging for data stores.

    Stores log every add at DEBUG, so default to WARNING.

    Args:
        level: Log level for store loggers
    """
    configure_module_logger("Store", level=level)
