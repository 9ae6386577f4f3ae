"""
Application object tying the container, providers and request handling together.

The lifecycle is construct -> register providers -> boot -> handle request ->
post-handle. Construction runs ``init`` once, which applies runtime settings
from the configuration and registers the built-in providers. ``boot`` runs the
second provider pass once, and ``handle`` turns a request into a response.
"""

import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Union

from fastapi import Request, Response

from .container import Container
from ..core.interfaces.container import ServiceId
from ..core.interfaces.providers import IBootableServiceProvider, IServiceProvider
from ..core.interfaces.routing import IRouter, ResourceNotFoundException
from ..infrastructure.config.config import Config
from ..infrastructure.settings import RuntimeSettings
from ..providers.errors import ErrorServiceProvider
from ..providers.standard import StandardServiceProvider

logger = logging.getLogger(__name__)

GATEWAY_ENV_MARKERS = ('GATEWAY_INTERFACE', 'SERVER_SOFTWARE')


def detect_cli() -> bool:
    """A process is in CLI mode unless a CGI/WSGI gateway launched it."""
    return not any(marker in os.environ for marker in GATEWAY_ENV_MARKERS)


class Application:
    """
    Application bootstrap and request handler.

    Subclasses add their own providers by overriding ``register_providers``
    (calling the parent first) and customize request handling through the
    ``pre_handle``, ``post_route`` and ``post_handle`` hooks.
    """

    CHARSET = 'UTF-8'

    def __init__(self,
                 config: Union[Config, Mapping[str, Any], None] = None,
                 environment: str = 'production') -> None:
        if isinstance(config, Config):
            self._config = config
        else:
            self._config = Config(config)

        self._environment = environment
        self._container = Container()
        self._providers: List[IServiceProvider] = []
        self._booted = False
        self._is_cli = False

        self.init()

    def init(self) -> None:
        """
        Initialize the application.

        Runs as early as possible, so nothing should be instantiated here;
        otherwise test doubles could not be bound in its place. Instance code
        belongs in ``pre_handle`` or in a provider's ``boot``.
        """
        self._is_cli = detect_cli()

        self.set_instance(Application, self)
        self.alias('app', Application)
        self.set_instance(Config, self._config)
        self.alias('config', Config)

        settings = RuntimeSettings()
        self.set_instance(RuntimeSettings, settings)
        if self._config.has('runtime_settings'):
            self.apply_runtime_settings(self._config.get('runtime_settings'))

        self.register_providers()

    def register_providers(self) -> None:
        """Register the built-in providers."""
        self.register(ErrorServiceProvider())
        self.register(StandardServiceProvider())

    def register(self, provider: IServiceProvider) -> None:
        """Add a provider and run its register pass."""
        self._providers.append(provider)
        logger.debug(f"Registering provider {type(provider).__name__}")

        provider.register(self)

    def apply_runtime_settings(self, settings: Mapping[str, Any]) -> None:
        """Apply a nested settings tree through the runtime settings applier."""
        self._container.get(RuntimeSettings).apply(settings)

    def boot(self) -> None:
        """
        Boot the application and its service providers.

        This is normally called by ``handle``. If requests are not handled,
        it has to be called manually.
        """
        if self._booted:
            return

        for provider in self._providers:
            if isinstance(provider, IBootableServiceProvider):
                logger.debug(f"Booting provider {type(provider).__name__}")
                provider.boot(self)

        self._booted = True
        logger.info(f"Application booted ({self._environment})")

    def pre_handle(self, request: Request) -> Optional[Response]:
        """
        Called before a request is routed. Meant to be overridden.

        Returning a response skips routing, dispatch and ``post_handle``.
        """
        return None

    def post_route(self, request: Request) -> Optional[Response]:
        """
        Called after a request is routed but before it is dispatched.
        Meant to be overridden.

        The route is known to be valid at this point. Returning a response
        skips dispatch and ``post_handle``.
        """
        return None

    def post_handle(self, request: Request) -> None:
        """
        Called after a request has been handled, before the response is
        returned. Meant to be overridden.
        """
        return None

    def handle(self, request: Request) -> Response:
        """
        Handle a request and return a response.

        Args:
            request: Inbound request

        Returns:
            Response for the request
        """
        self.alias('request', Request)
        self.set_instance(Request, request)

        self.boot()

        pre_handle_response = self.pre_handle(request)
        if pre_handle_response is not None:
            return pre_handle_response

        try:
            controller = self.get(IRouter).route(request)

            post_route_response = self.post_route(request)
            if post_route_response is not None:
                return post_route_response

            response = controller.dispatch()
        except ResourceNotFoundException as e:
            logger.info(f"No route: {e}")
            response = self.get_no_route_response(request)

        self.post_handle(request)

        return response

    def get_no_route_response(self, request: Request) -> Response:
        """Response returned when no route matches."""
        return Response('Not Found', status_code=404)

    # Container delegation

    @property
    def container(self) -> Container:
        return self._container

    def set(self, service_id: ServiceId, value: Any, singleton: bool = True) -> None:
        self._container.set(service_id, value, singleton)

    def set_instance(self, service_id: ServiceId, instance: Any) -> None:
        self._container.set_instance(service_id, instance)

    def alias(self, alias_id: ServiceId, target_id: ServiceId) -> None:
        self._container.alias(alias_id, target_id)

    def has(self, service_id: ServiceId) -> bool:
        return self._container.has(service_id)

    def get(self, service_id: ServiceId) -> Any:
        return self._container.get(service_id)

    def try_get(self, service_id: ServiceId) -> Optional[Any]:
        return self._container.try_get(service_id)

    # Accessors

    @property
    def config(self) -> Config:
        return self._config

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def is_cli(self) -> bool:
        return self._is_cli

    @property
    def is_booted(self) -> bool:
        return self._booted

    @property
    def providers(self) -> List[IServiceProvider]:
        return list(self._providers)

    def get_request(self) -> Optional[Request]:
        return self.get(Request) if self.has(Request) else None

    def describe(self) -> Dict[str, Any]:
        """Summary of the application state (used by ``hearth info``)."""
        return {
            'environment': self._environment,
            'cli': self._is_cli,
            'booted': self._booted,
            'providers': [type(p).__name__ for p in self._providers],
            'bindings': sorted(_name(i) for i in self._container.get_bindings()),
            'aliases': {str(a): _name(t) for a, t in self._container.get_aliases().items()},
        }


def _name(service_id: ServiceId) -> str:
    return service_id if isinstance(service_id, str) else getattr(
        service_id, '__qualname__', repr(service_id))
