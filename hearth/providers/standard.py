"""
Standard services provider.

Registers the services every application gets: the default router, the
logging manager and a response factory. On boot, a ``logging`` section in the
configuration is applied through the logging manager.
"""

from typing import TYPE_CHECKING

from fastapi import Response

from ..core.interfaces.providers import IBootableServiceProvider
from ..core.interfaces.routing import IRouter
from ..infrastructure.logging.setup import LoggingManager
from ..infrastructure.routing import StaticRouter

if TYPE_CHECKING:
    from ..application.app import Application


class StandardServiceProvider(IBootableServiceProvider):
    """Registers the default router, logging manager and response factory."""

    def register(self, app: 'Application') -> None:
        app.set(IRouter, StaticRouter)
        app.alias('router', IRouter)

        app.set(LoggingManager, lambda: LoggingManager(app.config.get('logging', {})))
        app.alias('logging', LoggingManager)

        app.set(Response, Response, singleton=False)
        app.alias('response', Response)

    def boot(self, app: 'Application') -> None:
        if app.config.has('logging'):
            app.get(LoggingManager).configure()
