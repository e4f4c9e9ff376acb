"""Setup and configuration for package logging."""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...config import config as default_config
from .handlers import ConsoleHandler, FileHandler

PACKAGE_LOGGER = 'pogo_grid'


def _reset_handlers(logger: logging.Logger):
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def setup_logging(config=None,
                  log_file: Optional[str] = None,
                  console: bool = True,
                  log_level: Optional[str] = None) -> logging.Logger:
    """Configure console and rotating file logging for the package.

    Args:
        config: Config instance (the global one if None)
        log_file: Log file path; config ``logging.file`` if None, no file if empty
        console: Whether to enable console logging
        log_level: Minimum level (config ``logging.level`` if None)

    Returns:
        The configured package logger
    """
    config = config or default_config
    level_name = (log_level or config.get('logging.level', 'INFO')).upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    _reset_handlers(logger)

    if console:
        console_handler = ConsoleHandler(use_colors=sys.stderr.isatty())
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    if log_file is None:
        log_file = config.get('logging.file')

    if log_file:
        file_handler = FileHandler(
            filename=str(Path(log_file)),
            max_bytes=config.get('logging.max_file_size', 10 * 1024 * 1024),
            backup_count=config.get('logging.backup_count', 3)
        )
        logger.addHandler(file_handler)

    logger.debug(
        "Logging initialized",
        extra={'context': {'level': level_name, 'file': str(log_file) if log_file else None}}
    )
    return logger


def setup_simple_logging(log_level: str = 'INFO') -> logging.Logger:
    """Console-only logging for scripts and debugging."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    _reset_handlers(logger)

    console_handler = ConsoleHandler()
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    return logger
