"""
Core module containing the abstractions the application is built on.

Nothing in here depends on the application or infrastructure layers.
"""

from .interfaces.container import IContainer
from .interfaces.providers import IServiceProvider, IBootableServiceProvider
from .interfaces.routing import IRouter, IController, ResourceNotFoundException

__all__ = [
    "IContainer",
    "IServiceProvider",
    "IBootableServiceProvider",
    "IRouter",
    "IController",
    "ResourceNotFoundException",
]
