"""
Reading and writing configuration files.

A configuration file is a YAML (``.yaml``/``.yml``) or JSON (``.json``)
mapping. ``HEARTH_*`` environment variables are applied on top of it through
``Config.set``, so they only replace the keys they name.
"""

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, TextIO, Tuple, Union

import yaml

from .config import Config

Reader = Callable[[TextIO], Any]
Writer = Callable[[Dict[str, Any], TextIO], None]

FORMATS: Dict[str, Tuple[Reader, Writer, Tuple[type, ...]]] = {
    'yaml': (yaml.safe_load,
             lambda data, f: yaml.safe_dump(data, f, default_flow_style=False, indent=2),
             (yaml.YAMLError,)),
    'json': (json.load,
             lambda data, f: json.dump(data, f, indent=2),
             (json.JSONDecodeError,)),
}

SUFFIXES = {'.yaml': 'yaml', '.yml': 'yaml', '.json': 'json'}

TRUE_VALUES = ('true', '1', 'yes', 'on')


def parse_bool(value: str) -> bool:
    return value.strip().lower() in TRUE_VALUES


class ConfigLoader:
    """Loads a ``Config`` from a file and the environment, and saves it back."""

    def __init__(self, env_prefix: str = "HEARTH_") -> None:
        self._env_prefix = env_prefix
        # Environment variable suffix -> (dotted key, converter)
        self._env_keys: Dict[str, Tuple[str, Callable[[str], Any]]] = {
            'ENVIRONMENT': ('environment', str),
            'DEBUG': ('debug', parse_bool),
            'LOG_LEVEL': ('logging.level', str),
            'LOG_DIR': ('logging.log_directory', str),
        }

    def load_config(self, config_file: Optional[str] = None) -> Config:
        """
        Build the configuration for an application.

        Args:
            config_file: Optional YAML or JSON file

        Returns:
            File contents with environment overrides applied
        """
        config = Config(self.read_file(config_file) if config_file else None)

        for suffix, (key, convert) in self._env_keys.items():
            raw = os.getenv(self._env_prefix + suffix)
            if raw is not None:
                config.set(key, convert(raw))

        return config

    def read_file(self, file_path: str) -> Dict[str, Any]:
        """Read a configuration file into a mapping."""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        reader, _, errors = FORMATS[self._format_for(path.suffix)]
        try:
            with path.open('r', encoding='utf-8') as f:
                data = reader(f)
        except errors as e:
            raise ValueError(f"Invalid {path.suffix.lstrip('.').upper()} in {file_path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration in {file_path} must be a mapping, got {type(data).__name__}")
        return data

    def save_config(self, config: Union[Config, Mapping[str, Any]], file_path: str, format: str = "yaml") -> None:
        """
        Write configuration to a file.

        Args:
            config: Configuration to save
            file_path: Output file path
            format: ``yaml`` or ``json``
        """
        if format.lower() not in FORMATS:
            raise ValueError(f"Unsupported format: {format}")
        _, writer, _ = FORMATS[format.lower()]

        data = config.to_dict() if isinstance(config, Config) else dict(config)
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                writer(data, f)
        except OSError as e:
            raise ValueError(f"Error writing {file_path}: {e}")

    def _format_for(self, suffix: str) -> str:
        try:
            return SUFFIXES[suffix.lower()]
        except KeyError:
            raise ValueError(f"Unsupported configuration file format: {suffix}") from None
