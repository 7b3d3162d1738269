"""
Logging Configuration Module
Provides consistent logging across the probe.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pg_check_conn.config_manager import ConfigManager


def setup_logging() -> None:
    """
    Setup probe-wide logging configuration.
    Call this once at startup.

    Standard output carries the probe's result, so console logging goes to
    standard error.
    """
    config = ConfigManager()
    log_config = config.get_logging_config()

    # Get configuration values
    log_level = getattr(logging, str(log_config.get('level') or 'WARNING').upper(), logging.WARNING)
    log_format = log_config.get('format') or '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    log_file = log_config.get('file')
    max_bytes = log_config.get('max_bytes', 10485760)  # 10MB
    backup_count = log_config.get('backup_count', 5)

    formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger('psycopg').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class LoggerMixin:
    """Mixin class to add logging capability to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        return logging.getLogger(self.__class__.__module__ + '.' + self.__class__.__name__)
