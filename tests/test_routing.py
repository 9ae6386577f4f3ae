"""
Tests for the static router.
"""

from typing import Callable
from unittest.mock import Mock

import pytest
from fastapi import Request, Response

from hearth.core.interfaces.routing import ResourceNotFoundException
from hearth.infrastructure.routing import CallableController, StaticRouter


class TestStaticRouter:
    """Test cases for StaticRouter."""

    def test_route_and_dispatch(self, make_request: Callable[..., Request]) -> None:
        router = StaticRouter()
        handler = Mock(return_value=Response("ok"))
        router.add("/items", handler)
        request = make_request("/items")

        controller = router.route(request)

        assert isinstance(controller, CallableController)
        handler.assert_not_called()
        response = controller.dispatch()
        handler.assert_called_once_with(request)
        assert response.body == b"ok"

    def test_unknown_path(self, make_request: Callable[..., Request]) -> None:
        router = StaticRouter()

        with pytest.raises(ResourceNotFoundException):
            router.route(make_request("/nowhere"))

    def test_methods(self, make_request: Callable[..., Request]) -> None:
        router = StaticRouter()
        router.add("/items", Mock(), methods=("get", "post"))

        router.route(make_request("/items", method="POST"))
        with pytest.raises(ResourceNotFoundException):
            router.route(make_request("/items", method="DELETE"))

    def test_routes(self) -> None:
        router = StaticRouter()
        router.add("/a", Mock())
        router.add("/b", Mock(), methods=("PUT",))

        assert router.routes() == [("GET", "/a"), ("PUT", "/b")]
