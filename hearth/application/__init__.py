"""
Application layer: the dependency injection container and the application
lifecycle built on top of it.
"""

from .container import (
    CircularDependencyException,
    Container,
    ContainerException,
    ServiceLifetime,
    ServiceNotFoundException,
    ServiceResolutionException,
)
from .app import Application

__all__ = [
    "Application",
    "Container",
    "ServiceLifetime",
    "ContainerException",
    "ServiceNotFoundException",
    "ServiceResolutionException",
    "CircularDependencyException",
]
