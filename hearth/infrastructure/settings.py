"""
Runtime settings applied at application start-up.

A settings tree such as ``{"sys": {"recursionlimit": 2000}}`` is flattened to
dotted keys (``"sys.recursionlimit"``) and every scalar leaf is applied. Keys
with a known interpreter knob are applied to it; every key is recorded so it
can be read back.
"""

import logging
import sys
import warnings
from typing import Any, Callable, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

SCALAR_TYPES = (str, int, float, bool)


def _set_log_level(value: Any) -> None:
    level = value.upper() if isinstance(value, str) else value
    logging.getLogger().setLevel(level)


def _set_warnings_action(value: Any) -> None:
    warnings.simplefilter(str(value))


DEFAULT_HANDLERS: Dict[str, Callable[[Any], None]] = {
    'sys.recursionlimit': lambda value: sys.setrecursionlimit(int(value)),
    'sys.switchinterval': lambda value: sys.setswitchinterval(float(value)),
    'logging.level': _set_log_level,
    'warnings.default_action': _set_warnings_action,
}


class RuntimeSettings:
    """Applier for nested runtime settings."""

    def __init__(self, handlers: Optional[Mapping[str, Callable[[Any], None]]] = None) -> None:
        self._handlers: Dict[str, Callable[[Any], None]] = dict(DEFAULT_HANDLERS)
        if handlers:
            self._handlers.update(handlers)
        self._applied: Dict[str, Any] = {}

    def apply(self, settings: Mapping[str, Any], prefix: str = '') -> None:
        """
        Apply every scalar leaf of a settings tree.

        Args:
            settings: Mapping of setting name to scalar or nested mapping
            prefix: Dotted prefix for the keys of ``settings``
        """
        for key, value in settings.items():
            key = f"{prefix}{key}"
            if isinstance(value, SCALAR_TYPES):
                self.set(key, value)
            elif isinstance(value, Mapping):
                self.apply(value, f"{key}.")
            else:
                logger.debug(f"Skipping non-scalar runtime setting {key}")

    def set(self, key: str, value: Any) -> None:
        """Apply a single setting."""
        handler = self._handlers.get(key)
        if handler is not None:
            handler(value)
            logger.debug(f"Applied runtime setting {key}={value!r}")
        else:
            logger.debug(f"Recorded runtime setting {key}={value!r}")

        self._applied[key] = value

    def register_handler(self, key: str, handler: Callable[[Any], None]) -> None:
        """Attach a handler to a dotted setting key."""
        self._handlers[key] = handler

    def get(self, key: str, default: Any = None) -> Any:
        return self._applied.get(key, default)

    def all(self) -> Dict[str, Any]:
        return self._applied.copy()
