"""
Logging setup and configuration utilities.

This module configures loguru sinks and routes records emitted through the
standard ``logging`` module into loguru, so library modules can keep using
``logging.getLogger(__name__)``.
"""

import inspect
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger as loguru_logger

from ..config.models import LoggingConfig

CONSOLE_FORMAT = ("<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                  "<level>{level: <8}</level> | "
                  "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                  "<level>{message}</level>")

FILE_FORMAT = ("{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
               "{name}:{function}:{line} - {message}")


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: Any = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside the logging module
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage())


def setup_logging(config: LoggingConfig) -> List[int]:
    """
    Setup application logging with the given configuration.

    Args:
        config: Logging configuration

    Returns:
        Identifiers of the loguru sinks that were added
    """
    loguru_logger.remove()
    sink_ids = []

    if config.console_enabled:
        sink_ids.append(loguru_logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=config.level,
            colorize=True,
            backtrace=True,
            diagnose=False
        ))

    if config.file_enabled:
        log_dir = Path(config.log_directory)
        log_dir.mkdir(parents=True, exist_ok=True)

        sink_ids.append(loguru_logger.add(
            log_dir / "app.log",
            format=FILE_FORMAT,
            level=config.level,
            rotation=config.max_file_size,
            retention=config.backup_count,
            compression="zip",
            backtrace=True,
            diagnose=False
        ))

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return sink_ids


class LoggingManager:
    """
    Logging manager for runtime logging configuration.

    Holds the active logging configuration and hands out bound loggers.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self._config = LoggingConfig.from_dict(config)
        self._configured = False

    @property
    def config(self) -> LoggingConfig:
        return self._config

    @property
    def is_configured(self) -> bool:
        return self._configured

    def configure(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Apply the logging configuration, optionally replacing it first."""
        if config is not None:
            self._config = LoggingConfig.from_dict(config)

        setup_logging(self._config)
        self._configured = True

        loguru_logger.info(f"Logging configured at level {self._config.level}")

    def get_logger(self, name: str) -> Any:
        """
        Get a logger instance for the given name.

        Args:
            name: Logger name

        Returns:
            Loguru logger bound to ``name``
        """
        return loguru_logger.bind(name=name)

