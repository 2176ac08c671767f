"""Route builder and compiled route table.

Routes are registered on a ``Router`` during setup, then compiled into an
immutable ``RouteTable`` that the transport calls once per request.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import partial

from wildroute._internal.types import ErrorHandler, Handler
from wildroute.config import RouterConfig
from wildroute.errors import ConfigurationError
from wildroute.http.request import Request
from wildroute.routing.match import parse_path, resolve, split_uri
from wildroute.routing.route import Resolution, Route
from wildroute.server.dispatch import dispatch
from wildroute.server.fallbacks import (
    default_method_not_allowed_handler,
    default_not_found_handler,
)

logger = logging.getLogger("wildroute.routing")


@dataclass(frozen=True, slots=True)
class RouteTable:
    """An immutable, ordered route table.

    First match wins. Calling the table dispatches a request, so the
    table itself is the handler installed on the transport::

        table = router.compile()
        server = HttpServer(table)
    """

    routes: tuple[Route, ...]
    not_found_handler: Handler
    method_not_allowed_handler: Handler
    error_handler: ErrorHandler | None = None
    config: RouterConfig = field(default_factory=RouterConfig)

    def resolve(self, method: str, uri: str) -> Resolution:
        """Look up *method* and *uri* without invoking any handler."""
        parts = split_uri(uri, self.config.path_terminators)
        return resolve(self.routes, method, parts)

    def dispatch(self, request: Request) -> None:
        """Dispatch *request* to the matching handler or a fallback."""
        dispatch(self, request)

    def __call__(self, request: Request) -> None:
        dispatch(self, request)


class Router:
    """Ordered route builder.

    Usage::

        router = Router()
        router.get("/", index)
        router.get("/static/**", static_files)
        router.post("/api/*/items", create_item)
        router.error_handler = on_error
        table = router.compile()

    Routes are tried in registration order. Route paths may contain ``*``
    (one segment), ``**`` (one or more segments), and partial wildcards
    such as ``*.css`` or ``img*``.

    Thread safety:
        Registration is single-threaded setup work. ``compile()`` takes a
        snapshot, so later registrations never reach a table already
        handed to the transport.
    """

    __slots__ = (
        "_routes",
        "config",
        "error_handler",
        "method_not_allowed_handler",
        "not_found_handler",
    )

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        not_found_handler: Handler | None = None,
        method_not_allowed_handler: Handler | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        # Called when no route matches the request path
        self.not_found_handler: Handler | None = not_found_handler
        # Called when a route matches the path but not the HTTP method
        self.method_not_allowed_handler: Handler | None = method_not_allowed_handler
        # Called when a handler raises; without one the exception propagates
        self.error_handler: ErrorHandler | None = error_handler
        self._routes: list[Route] = []

    # -- Route registration --

    def add_route(self, method: str, path: str, handler: Handler) -> Route:
        """Append a route for *method* and *path*.

        Raises ``ConfigurationError`` if *path* is empty, does not start
        with ``/``, or has ``**`` followed by another wildcard. Existing
        routes are never reordered or replaced.
        """
        route = Route(method=method, path=path, segments=parse_path(path), handler=handler)
        self._routes.append(route)
        logger.debug("Registered %s %s", method, path)
        return route

    def get(self, path: str, handler: Handler) -> Route:
        """Add a route for GET requests. See ``add_route``."""
        return self.add_route("GET", path, handler)

    def head(self, path: str, handler: Handler) -> Route:
        """Add a route for HEAD requests. See ``add_route``."""
        return self.add_route("HEAD", path, handler)

    def post(self, path: str, handler: Handler) -> Route:
        """Add a route for POST requests. See ``add_route``."""
        return self.add_route("POST", path, handler)

    def put(self, path: str, handler: Handler) -> Route:
        """Add a route for PUT requests. See ``add_route``."""
        return self.add_route("PUT", path, handler)

    def delete(self, path: str, handler: Handler) -> Route:
        """Add a route for DELETE requests. See ``add_route``."""
        return self.add_route("DELETE", path, handler)

    def options(self, path: str, handler: Handler) -> Route:
        """Add a route for OPTIONS requests. See ``add_route``."""
        return self.add_route("OPTIONS", path, handler)

    def patch(self, path: str, handler: Handler) -> Route:
        """Add a route for PATCH requests. See ``add_route``."""
        return self.add_route("PATCH", path, handler)

    def route(
        self, path: str, *, methods: Sequence[str] = ("GET",)
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        One route is added per method, in the order given::

            @router.route("/items/*", methods=["GET", "HEAD"])
            def item(request):
                request.respond(200, {}, b"...")
        """
        if isinstance(methods, str):
            msg = f"methods must be a sequence of method names, not the string {methods!r}."
            raise ConfigurationError(msg)
        # Validate before the decorator is applied so typos fail at import
        parse_path(path)

        def decorator(func: Handler) -> Handler:
            for method in methods:
                self.add_route(method, path, func)
            return func

        return decorator

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    # -- Compilation --

    def compile(self) -> RouteTable:
        """Snapshot the registered routes into an immutable ``RouteTable``."""
        return RouteTable(
            routes=tuple(self._routes),
            not_found_handler=self.not_found_handler
            or partial(default_not_found_handler, config=self.config),
            method_not_allowed_handler=self.method_not_allowed_handler
            or partial(default_method_not_allowed_handler, config=self.config),
            error_handler=self.error_handler,
            config=self.config,
        )

    def to_handler(self) -> RouteTable:
        """Return the composed dispatch handler for the transport."""
        return self.compile()

    def __call__(self, request: Request) -> None:
        self.compile().dispatch(request)
