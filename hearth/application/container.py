"""
Dependency injection container for managing service bindings.

This module provides a lightweight container that maps identifiers (strings
or types) to concrete values, factories or aliases, with singleton and
transient lifetimes and constructor autowiring for class bindings.
"""

import functools
import inspect
import logging
import types
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Union, get_args, get_origin, get_type_hints

from ..core.interfaces.container import IContainer, ServiceId

logger = logging.getLogger(__name__)

_UNSET = object()


class ServiceLifetime(Enum):
    """Service lifetime management options."""
    SINGLETON = auto()  # First result cached and shared
    TRANSIENT = auto()  # Factory invoked on every resolution


class ContainerException(Exception):
    """Base class for container errors."""
    pass


class ServiceNotFoundException(ContainerException, LookupError):
    """Raised when resolving an identifier that has no binding."""
    pass


class ServiceResolutionException(ContainerException):
    """Raised when a class binding cannot be autowired."""
    pass


class CircularDependencyException(ContainerException):
    """Raised when aliases or constructor dependencies form a cycle."""
    pass


def is_factory(value: Any) -> bool:
    """Classes, functions, methods and partials are factories; other objects are values."""
    return (inspect.isclass(value) or inspect.isfunction(value) or inspect.ismethod(value)
            or inspect.isbuiltin(value) or isinstance(value, functools.partial))


def describe(service_id: ServiceId) -> str:
    """Human readable name for an identifier."""
    if isinstance(service_id, str):
        return repr(service_id)
    return getattr(service_id, '__qualname__', None) or repr(service_id)


class ServiceRegistration:
    """Registration information for a binding."""

    def __init__(self,
                 service_id: ServiceId,
                 implementation: Any,
                 lifetime: ServiceLifetime = ServiceLifetime.SINGLETON,
                 is_instance: bool = False):
        self.service_id = service_id
        self.implementation = implementation
        self.lifetime = lifetime
        self.instance: Any = _UNSET
        self.is_factory = not is_instance and is_factory(implementation)

        # Plain values are never invoked
        if not self.is_factory:
            self.instance = implementation
            self.lifetime = ServiceLifetime.SINGLETON

    @property
    def is_resolved(self) -> bool:
        return self.instance is not _UNSET


class Container(IContainer):
    """
    Lightweight dependency injection container.

    Bindings are resolved lazily. Functions, methods and partials are
    factories called without arguments; classes are constructed with their
    annotated constructor parameters resolved from the container. Any other
    object, callable or not, is returned as-is.
    """

    def __init__(self) -> None:
        self._services: Dict[ServiceId, ServiceRegistration] = {}
        self._aliases: Dict[ServiceId, ServiceId] = {}
        self._resolution_stack: List[ServiceId] = []

    def set(self, service_id: ServiceId, value: Any, singleton: bool = True) -> None:
        """Register a binding, replacing any previous binding or alias."""
        lifetime = ServiceLifetime.SINGLETON if singleton else ServiceLifetime.TRANSIENT
        self._add(ServiceRegistration(service_id, value, lifetime))

    def set_instance(self, service_id: ServiceId, instance: Any) -> None:
        """Register a value that is returned as-is."""
        self._add(ServiceRegistration(service_id, instance, is_instance=True))

    def alias(self, alias_id: ServiceId, target_id: ServiceId) -> None:
        """Register ``alias_id`` as a pointer to ``target_id``."""
        current = target_id
        chain = [alias_id, target_id]
        while current != alias_id:
            if current not in self._aliases:
                break
            current = self._aliases[current]
            chain.append(current)
        else:
            cycle = " -> ".join(describe(i) for i in chain)
            raise CircularDependencyException(f"Circular alias detected: {cycle}")

        if self._services.pop(alias_id, None) is not None:
            logger.debug(f"Alias {describe(alias_id)} replaces its direct binding")
        self._aliases[alias_id] = target_id
        logger.debug(f"Aliased {describe(alias_id)} -> {describe(target_id)}")

    def has(self, service_id: ServiceId) -> bool:
        """Check if a binding exists, following aliases."""
        return self._resolve_alias(service_id) in self._services

    def get(self, service_id: ServiceId) -> Any:
        """Resolve the value bound to an identifier."""
        key = self._resolve_alias(service_id)

        registration = self._services.get(key)
        if registration is None:
            raise ServiceNotFoundException(
                f"Service {describe(service_id)} is not registered")

        # Concrete values and cached singletons
        if registration.is_resolved:
            return registration.instance

        if key in self._resolution_stack:
            cycle = " -> ".join([describe(i) for i in self._resolution_stack] +
                                [describe(key)])
            raise CircularDependencyException(
                f"Circular dependency detected: {cycle}")

        self._resolution_stack.append(key)
        try:
            instance = self._create_instance(registration)
        finally:
            self._resolution_stack.pop()

        if registration.lifetime == ServiceLifetime.SINGLETON:
            registration.instance = instance

        return instance

    def try_get(self, service_id: ServiceId) -> Optional[Any]:
        """Resolve a value, or None when nothing is bound."""
        if not self.has(service_id):
            return None
        return self.get(service_id)

    def get_bindings(self) -> Dict[ServiceId, ServiceRegistration]:
        """Get all registrations (for debugging)."""
        return self._services.copy()

    def get_aliases(self) -> Dict[ServiceId, ServiceId]:
        """Get all aliases (for debugging)."""
        return self._aliases.copy()

    def _add(self, registration: ServiceRegistration) -> None:
        service_id = registration.service_id
        self._aliases.pop(service_id, None)
        self._services[service_id] = registration
        logger.debug(
            f"Registered {describe(service_id)} with {registration.lifetime.name} lifetime")

    def _resolve_alias(self, service_id: ServiceId) -> ServiceId:
        # alias() rejects cycles, so this always terminates
        while service_id in self._aliases:
            service_id = self._aliases[service_id]
        return service_id

    def _create_instance(self, registration: ServiceRegistration) -> Any:
        """Create an instance from a factory or class registration."""
        implementation = registration.implementation

        if inspect.isclass(implementation):
            return self._autowire(implementation)

        factory: Callable[[], Any] = implementation
        return factory()

    def _autowire(self, cls: type) -> Any:
        """Construct a class, resolving annotated parameters from the container."""
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            # Builtins without an introspectable signature
            return cls()

        try:
            type_hints = get_type_hints(cls.__init__)
        except (AttributeError, NameError, TypeError):
            type_hints = {}

        kwargs: Dict[str, Any] = {}
        for param_name, param in signature.parameters.items():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue

            dep_type = type_hints.get(param_name)
            if dep_type is None and param.annotation is not inspect.Parameter.empty:
                dep_type = param.annotation
            dep_type = _unwrap_optional(dep_type)

            if param.default is not inspect.Parameter.empty:
                # Optional dependency, keep the default when unresolvable
                if dep_type is not None and self.has(dep_type):
                    kwargs[param_name] = self.get(dep_type)
                continue

            if dep_type is None:
                raise ServiceResolutionException(
                    f"Cannot autowire {cls.__qualname__}: parameter '{param_name}' has no type annotation")

            try:
                kwargs[param_name] = self.get(dep_type)
            except ServiceNotFoundException as e:
                raise ServiceResolutionException(
                    f"Cannot autowire {cls.__qualname__}: {e}") from e

        return cls(**kwargs)


def _unwrap_optional(dep_type: Any) -> Any:
    """Extract T from Optional[T]."""
    if get_origin(dep_type) in (Union, types.UnionType):
        args = [arg for arg in get_args(dep_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return dep_type
