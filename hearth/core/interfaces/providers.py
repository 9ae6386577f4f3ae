"""
Service provider interfaces.

Providers are applied in two passes. ``register`` declares services and is
called as soon as the provider is added to the application. ``boot`` wires
services that depend on other providers and is called once, after every
provider has registered, in the order providers were added.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...application.app import Application


class IServiceProvider(ABC):
    """Interface for providers that declare services."""

    @abstractmethod
    def register(self, app: 'Application') -> None:
        """
        Declare services on the application.

        Only ``set`` and ``alias`` should be used here. Other providers may
        not have registered yet, so nothing should be resolved.

        Args:
            app: Application being initialized
        """
        pass


class IBootableServiceProvider(IServiceProvider):
    """Interface for providers that also need a boot pass."""

    @abstractmethod
    def boot(self, app: 'Application') -> None:
        """
        Wire services once every provider has registered.

        Resolving services with ``get`` is safe here.

        Args:
            app: Application being booted
        """
        pass
