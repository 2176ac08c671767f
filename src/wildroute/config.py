"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from wildroute.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(not_found_body=b"<h1>Nothing here</h1>")
    """

    # Built-in fallback responses
    not_found_body: bytes = b"<h1>Not Found</h1>"
    method_not_allowed_body: bytes = b"<h1>Method Not Allowed</h1>"
    fallback_content_type: str = "text/html"

    # URI parsing — the path ends at the first of these characters
    path_terminators: str = "?&#"

    def __post_init__(self) -> None:
        if not self.path_terminators:
            msg = "path_terminators must contain at least one character."
            raise ConfigurationError(msg)
        if "/" in self.path_terminators:
            msg = "path_terminators cannot contain '/', it separates path segments."
            raise ConfigurationError(msg)
