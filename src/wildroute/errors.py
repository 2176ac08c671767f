"""Wildroute exception hierarchy.

Shared across Router, RouteTable, and the testing helpers so every module
raises and catches the same types.
"""


class WildrouteError(Exception):
    """Base for all wildroute-specific errors."""


class ConfigurationError(WildrouteError):
    """Raised when a route or router configuration is invalid.

    Always raised at registration time, never deferred to request time.
    """


class ResponseAlreadySent(WildrouteError):  # noqa: N818 — reads as a state, not a failure
    """A request was asked to respond a second time."""

    def __init__(self, method: str, uri: str) -> None:
        super().__init__(f"Response already sent for {method} {uri!r}")
        self.method = method
        self.uri = uri
