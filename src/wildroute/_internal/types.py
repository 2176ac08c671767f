"""Shared type aliases used across wildroute modules."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from wildroute.http.request import Request

# Route handler — receives the request and answers it through request.respond()
Handler: TypeAlias = Callable[["Request"], Any]

# Error handler — receives (request, error) after a handler failed
ErrorHandler: TypeAlias = Callable[["Request", Exception], Any]
