"""
Configuration management.
"""

from .config import Config
from .loader import ConfigLoader
from .models import LoggingConfig, ErrorHandlingConfig, default_config

__all__ = [
    "Config",
    "ConfigLoader",
    "LoggingConfig",
    "ErrorHandlingConfig",
    "default_config",
]
