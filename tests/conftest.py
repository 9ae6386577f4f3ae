"""
Shared fixtures for hearth tests.
"""

import sys
from typing import Any, Callable, Generator

import pytest
from fastapi import Request


@pytest.fixture(autouse=True)
def restore_excepthook() -> Generator[None, None, None]:
    """Booting an application may install the error handler hook."""
    original = sys.excepthook
    yield
    sys.excepthook = original


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Build a bare request for a method and path."""
    def build(path: str = "/", method: str = "GET") -> Request:
        return Request({
            "type": "http",
            "method": method,
            "path": path,
            "headers": [],
            "query_string": b"",
        })
    return build
