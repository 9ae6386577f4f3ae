"""
Built-in service providers.
"""

from .errors import ErrorHandler, ErrorServiceProvider
from .standard import StandardServiceProvider

__all__ = [
    "ErrorHandler",
    "ErrorServiceProvider",
    "StandardServiceProvider",
]
