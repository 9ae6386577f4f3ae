"""
Static request router.

Maps exact ``(method, path)`` pairs to handlers. Anything smarter belongs in
a dedicated router bound under ``IRouter``.
"""

import logging
from typing import Callable, Dict, Iterable, List, Tuple

from fastapi import Request, Response

from ..core.interfaces.routing import IController, IRouter, ResourceNotFoundException

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Response]


class CallableController(IController):
    """Dispatch target that calls a handler with the request."""

    def __init__(self, handler: Handler, request: Request) -> None:
        self.handler = handler
        self.request = request

    def dispatch(self) -> Response:
        return self.handler(self.request)


class StaticRouter(IRouter):
    """Exact-match route table."""

    def __init__(self) -> None:
        self._routes: Dict[Tuple[str, str], Handler] = {}

    def add(self, path: str, handler: Handler, methods: Iterable[str] = ("GET",)) -> None:
        """
        Add a route.

        Args:
            path: Exact request path, e.g. ``"/health"``
            handler: Callable receiving the request and returning a response
            methods: HTTP methods served by the handler
        """
        for method in methods:
            self._routes[(method.upper(), path)] = handler
            logger.debug(f"Added route {method.upper()} {path}")

    def routes(self) -> List[Tuple[str, str]]:
        return list(self._routes)

    def route(self, request: Request) -> IController:
        key = (request.method.upper(), request.url.path)
        handler = self._routes.get(key)
        if handler is None:
            raise ResourceNotFoundException(f"No route for {key[0]} {key[1]}")
        return CallableController(handler, request)
