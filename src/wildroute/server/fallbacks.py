"""Built-in fallback handlers.

Used when the application does not register its own not-found or
method-not-allowed handler. Bodies and content type come from
``RouterConfig``.
"""

from wildroute.config import RouterConfig
from wildroute.http.request import Request

_DEFAULT_CONFIG = RouterConfig()


def default_not_found_handler(request: Request, *, config: RouterConfig = _DEFAULT_CONFIG) -> None:
    """Respond 404 with a minimal HTML page."""
    headers = {"Content-Type": config.fallback_content_type}
    request.respond(404, headers, config.not_found_body)


def default_method_not_allowed_handler(
    request: Request, *, config: RouterConfig = _DEFAULT_CONFIG
) -> None:
    """Respond 405 with a minimal HTML page."""
    headers = {"Content-Type": config.fallback_content_type}
    request.respond(405, headers, config.method_not_allowed_body)
