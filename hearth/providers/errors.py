"""
Error handling service provider.

Registers an ``ErrorHandler`` that logs uncaught exceptions through loguru
and, when enabled in the ``errors`` configuration section, installs it as the
process-wide exception hook on boot.
"""

import logging
import sys
from types import TracebackType
from typing import TYPE_CHECKING, Any, Callable, Optional, Type

from loguru import logger as loguru_logger

from ..core.interfaces.providers import IBootableServiceProvider
from ..infrastructure.config.models import ErrorHandlingConfig

if TYPE_CHECKING:
    from ..application.app import Application

logger = logging.getLogger(__name__)

ExceptHook = Callable[[Type[BaseException], BaseException, Optional[TracebackType]], Any]


class ErrorHandler:
    """Uncaught exception handler."""

    def __init__(self, config: Optional[ErrorHandlingConfig] = None) -> None:
        self._config = config or ErrorHandlingConfig()
        self._previous_hook: Optional[ExceptHook] = None

    @property
    def config(self) -> ErrorHandlingConfig:
        return self._config

    @property
    def is_installed(self) -> bool:
        return self._previous_hook is not None

    def install(self) -> None:
        """Install as ``sys.excepthook``, remembering the previous hook."""
        if self.is_installed:
            return

        self._previous_hook = sys.excepthook
        sys.excepthook = self.handle_exception
        logger.debug("Installed uncaught exception handler")

    def uninstall(self) -> None:
        """Restore the hook that was active before ``install``."""
        if not self.is_installed:
            return

        sys.excepthook = self._previous_hook  # type: ignore[assignment]
        self._previous_hook = None
        logger.debug("Uninstalled uncaught exception handler")

    def handle_exception(self,
                         exc_type: Type[BaseException],
                         exc_value: BaseException,
                         exc_tb: Optional[TracebackType]) -> None:
        """Log an uncaught exception and chain to the previous hook."""
        if issubclass(exc_type, KeyboardInterrupt):
            loguru_logger.info("Interrupted by user")
        else:
            loguru_logger.opt(exception=(exc_type, exc_value, exc_tb)).critical(
                f"Uncaught {exc_type.__name__}: {exc_value}")

        if self._config.chain_previous and self._previous_hook is not None:
            self._previous_hook(exc_type, exc_value, exc_tb)


class ErrorServiceProvider(IBootableServiceProvider):
    """Registers and installs the uncaught exception handler."""

    def register(self, app: 'Application') -> None:
        app.set(ErrorHandler, lambda: ErrorHandler(
            ErrorHandlingConfig.from_dict(app.config.get('errors', {}))))
        app.alias('error_handler', ErrorHandler)

    def boot(self, app: 'Application') -> None:
        handler = app.get(ErrorHandler)
        if handler.config.install_handler:
            handler.install()
