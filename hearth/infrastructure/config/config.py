"""
Application configuration object.

Wraps a nested mapping and gives dotted-path access to it, so ``"logging.level"``
reads ``config["logging"]["level"]``.
"""

import copy
from typing import Any, Dict, Iterator, Mapping, Optional

_MISSING = object()


class Config:
    """Nested configuration with dotted key lookup."""

    SEPARATOR = '.'

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(dict(data or {}))

    def has(self, key: str) -> bool:
        """Check if a (possibly dotted) key is present."""
        return self._lookup(key) is not _MISSING

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """
        Get a value by (possibly dotted) key.

        Args:
            key: Key such as ``"debug"`` or ``"logging.level"``
            default: Returned when the key is missing

        Raises:
            KeyError: If the key is missing and no default was given
        """
        value = self._lookup(key)
        if value is _MISSING:
            if default is _MISSING:
                raise KeyError(key)
            return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a value by (possibly dotted) key, creating groups as needed."""
        keys = key.split(self.SEPARATOR)
        current = self._data

        for part in keys[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        current[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        """Get a copy of the underlying mapping."""
        return copy.deepcopy(self._data)

    def _lookup(self, key: str) -> Any:
        if key in self._data:
            return self._data[key]

        current: Any = self._data
        for part in key.split(self.SEPARATOR):
            if not isinstance(current, Mapping) or part not in current:
                return _MISSING
            current = current[part]
        return current

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Config({self._data!r})"
