"""Core components."""

from .exceptions import (
    APIError,
    ClientError,
    MethodNotListableError,
    PayloadError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from .methods import (
    Method,
    MethodRegistry,
    MethodSpec,
    get_method_registry,
    is_listable,
    method_name,
)

__all__ = [
    "ClientError",
    "TransportError",
    "APIError",
    "RateLimitError",
    "PayloadError",
    "ValidationError",
    "MethodNotListableError",
    "Method",
    "MethodSpec",
    "MethodRegistry",
    "get_method_registry",
    "is_listable",
    "method_name",
]
