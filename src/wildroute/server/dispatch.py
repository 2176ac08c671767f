"""Request dispatch — resolve, invoke, and contain failures.

One call per request. The route table is only read, so any number of
dispatches may run at once on a compiled table.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wildroute.http.request import Request
    from wildroute.routing.router import RouteTable

logger = logging.getLogger("wildroute.server")


def dispatch(table: RouteTable, request: Request) -> None:
    """Route *request* through *table*.

    Calls the handler of the first route matching both path and method.
    Otherwise calls the method-not-allowed handler if some route matched
    the path, or the not-found handler if none did.

    Any exception raised along the way goes to the table's error handler
    as ``error_handler(request, exc)``. Without an error handler the
    exception propagates unchanged and the transport decides what to do.
    """
    try:
        resolution = table.resolve(request.method, request.uri)
        if resolution.route is not None:
            resolution.route.handler(request)
        elif resolution.method_not_allowed:
            logger.debug("405 %s %s", request.method, request.uri)
            table.method_not_allowed_handler(request)
        else:
            logger.debug("404 %s %s", request.method, request.uri)
            table.not_found_handler(request)
    except Exception as exc:
        if table.error_handler is None:
            raise
        logger.debug(
            "Error handler invoked for %s %s", request.method, request.uri, exc_info=exc
        )
        table.error_handler(request, exc)
