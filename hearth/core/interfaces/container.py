"""
Container interface for service registration and resolution.

Identifiers are either strings or types. A binding maps an identifier to a
concrete value, a factory, or (through ``alias``) to another identifier.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional

ServiceId = Hashable


class IContainer(ABC):
    """Interface for dependency injection containers."""

    @abstractmethod
    def set(self, service_id: ServiceId, value: Any, singleton: bool = True) -> None:
        """
        Register a binding, replacing any existing binding for the identifier.

        Args:
            service_id: Identifier (string or type)
            value: Concrete value, factory (function, method, partial) or class
            singleton: Cache the first result of a factory
        """
        pass

    @abstractmethod
    def set_instance(self, service_id: ServiceId, instance: Any) -> None:
        """
        Register a value that is returned as-is, even if it is callable.

        Args:
            service_id: Identifier (string or type)
            instance: Value to return on resolution
        """
        pass

    @abstractmethod
    def alias(self, alias_id: ServiceId, target_id: ServiceId) -> None:
        """
        Make ``alias_id`` resolve to whatever ``target_id`` resolves to.

        The target does not have to be registered yet. A direct binding
        registered under ``alias_id`` is dropped.
        """
        pass

    @abstractmethod
    def has(self, service_id: ServiceId) -> bool:
        """
        Check if a binding exists for the identifier after alias resolution.

        Returns:
            True if registered
        """
        pass

    @abstractmethod
    def get(self, service_id: ServiceId) -> Any:
        """
        Resolve a value.

        Args:
            service_id: Identifier to resolve

        Returns:
            Resolved value

        Raises:
            ServiceNotFoundException: If nothing is bound to the identifier
        """
        pass

    @abstractmethod
    def try_get(self, service_id: ServiceId) -> Optional[Any]:
        """
        Resolve a value, returning None when nothing is bound.
        """
        pass
