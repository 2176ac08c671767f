"""The request shape the router consumes.

The transport owns the real request object. Wildroute only needs the
method, the raw URI, and a way to answer. Any object with that shape
works; no base class required.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class Request(Protocol):
    """Protocol for requests handed to ``RouteTable.dispatch``.

    ``uri`` is the raw request target and may still carry a query string
    or fragment. ``respond`` must be called exactly once per request,
    by the matched handler or by a fallback handler.
    """

    method: str
    uri: str

    def respond(self, status: int, headers: Mapping[str, str], body: bytes) -> None: ...
