"""
Hearth - minimal application bootstrap layer.

This package provides a dependency injection container, a two-pass service
provider mechanism and an application object with a staged lifecycle
(construct, register providers, boot, handle requests).
"""

__version__ = "0.1.0"

# Public API exports
from .core.interfaces.container import IContainer
from .core.interfaces.providers import IServiceProvider, IBootableServiceProvider
from .core.interfaces.routing import IRouter, IController, ResourceNotFoundException
from .application.container import Container, ServiceNotFoundException
from .application.app import Application
from .infrastructure.config.config import Config

__all__ = [
    "IContainer",
    "IServiceProvider",
    "IBootableServiceProvider",
    "IRouter",
    "IController",
    "ResourceNotFoundException",
    "Container",
    "ServiceNotFoundException",
    "Application",
    "Config",
]
