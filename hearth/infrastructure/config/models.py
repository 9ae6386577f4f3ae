"""
Typed configuration sections.

The application configuration is a free-form mapping; the sections the
built-in services read are described here so their defaults live in one place.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_directory: str = "logs"
    max_file_size: str = "10 MB"
    backup_count: int = 5
    console_enabled: bool = True
    file_enabled: bool = False

    def __post_init__(self) -> None:
        self.level = str(self.level).upper()
        if self.level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid logging.level: {self.level!r}")
        if self.backup_count < 0:
            raise ValueError(
                f"backup_count must not be negative, got {self.backup_count}")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'LoggingConfig':
        return cls(**_known_fields(cls, data))


@dataclass
class ErrorHandlingConfig:
    """Uncaught exception handling configuration."""
    install_handler: bool = True
    chain_previous: bool = True

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ErrorHandlingConfig':
        return cls(**_known_fields(cls, data))


def default_config() -> Dict[str, Any]:
    """Default configuration written by ``hearth init-config``."""
    return {
        'environment': 'production',
        'debug': False,
        'runtime_settings': {},
        'logging': LoggingConfig().__dict__.copy(),
        'errors': ErrorHandlingConfig().__dict__.copy(),
    }


def _known_fields(cls: type, data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Keep only the keys the dataclass declares."""
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in (data or {}).items() if k in names}
