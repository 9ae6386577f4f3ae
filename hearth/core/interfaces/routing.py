"""
Routing interfaces consumed by the application.

The application only needs to turn a request into something it can dispatch;
how a router matches requests is up to the implementation.
"""

from abc import ABC, abstractmethod

from fastapi import Request, Response


class ResourceNotFoundException(Exception):
    """Raised by a router when no route matches the request."""
    pass


class IController(ABC):
    """A matched dispatch target."""

    @abstractmethod
    def dispatch(self) -> Response:
        """
        Run the matched target.

        Returns:
            Response for the request
        """
        pass


class IRouter(ABC):
    """Interface for request routers."""

    @abstractmethod
    def route(self, request: Request) -> IController:
        """
        Match a request to a dispatch target.

        Args:
            request: Inbound request

        Returns:
            Controller ready to dispatch

        Raises:
            ResourceNotFoundException: If no route matches
        """
        pass
