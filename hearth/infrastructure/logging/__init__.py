"""
Logging infrastructure.
"""

from .setup import InterceptHandler, LoggingManager, setup_logging

__all__ = [
    "InterceptHandler",
    "LoggingManager",
    "setup_logging",
]
