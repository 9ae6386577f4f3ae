"""
Core interfaces defining the contracts between the application and its services.
"""

from .container import IContainer, ServiceId
from .providers import IServiceProvider, IBootableServiceProvider
from .routing import IRouter, IController, ResourceNotFoundException

__all__ = [
    "IContainer",
    "ServiceId",
    "IServiceProvider",
    "IBootableServiceProvider",
    "IRouter",
    "IController",
    "ResourceNotFoundException",
]
