"""Wildroute — an ordered HTTP request router with wildcard paths.

Matches a request's method and URI path against routes in the order they
were registered and calls the first match. Paths may use ``*`` (one
segment), ``**`` (one or more segments) and partial wildcards such as
``*.css``.

Basic usage::

    from wildroute import Router

    def index(request):
        request.respond(200, {"Content-Type": "text/plain"}, b"Hello, World!")

    router = Router()
    router.get("/", index)
    handler = router.to_handler()  # install on the HTTP server
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Request",
    "ResponseAlreadySent",
    "Route",
    "RouteTable",
    "Router",
    "RouterConfig",
    "WildrouteError",
    "dispatch",
    "split_uri",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wildroute`` fast while providing a clean top-level API.
    """
    if name in ("Router", "RouteTable"):
        from wildroute.routing import router as _router

        return getattr(_router, name)

    if name == "Route":
        from wildroute.routing.route import Route

        return Route

    if name == "split_uri":
        from wildroute.routing.match import split_uri

        return split_uri

    if name == "RouterConfig":
        from wildroute.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from wildroute.http.request import Request

        return Request

    if name == "dispatch":
        from wildroute.server.dispatch import dispatch

        return dispatch

    if name in ("ConfigurationError", "ResponseAlreadySent", "WildrouteError"):
        from wildroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
