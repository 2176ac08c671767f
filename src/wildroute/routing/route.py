"""Route, Resolution, and segment classification."""

from dataclasses import dataclass
from enum import Enum

from wildroute._internal.types import Handler

WILDCARD = "*"
MULTI_WILDCARD = "**"


class SegmentKind(Enum):
    """How a route segment is compared against a request segment."""

    LITERAL = "literal"
    WILDCARD = "wildcard"
    MULTI_WILDCARD = "multi_wildcard"
    PARTIAL_WILDCARD = "partial_wildcard"


def is_partial_wildcard(segment: str) -> bool:
    """True for ``*tail``, ``head*`` and ``*middle*`` style segments."""
    return len(segment) > 2 and (segment.startswith(WILDCARD) or segment.endswith(WILDCARD))


def classify_segment(segment: str) -> SegmentKind:
    """Return the kind of a single route segment.

    Examples::

        "users"   -> SegmentKind.LITERAL
        "*"       -> SegmentKind.WILDCARD
        "**"      -> SegmentKind.MULTI_WILDCARD
        "*.css"   -> SegmentKind.PARTIAL_WILDCARD
    """
    if segment == WILDCARD:
        return SegmentKind.WILDCARD
    if segment == MULTI_WILDCARD:
        return SegmentKind.MULTI_WILDCARD
    if is_partial_wildcard(segment):
        return SegmentKind.PARTIAL_WILDCARD
    return SegmentKind.LITERAL


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created by ``Router.add_route`` and owned by the router for its
    lifetime. ``segments`` is the parsed form of ``path``.
    """

    method: str
    path: str
    segments: tuple[str, ...]
    handler: Handler

    def matches(self, parts: tuple[str, ...]) -> bool:
        """True if this route's pattern matches the request path segments."""
        from wildroute.routing.match import match_segments

        return match_segments(self.segments, parts)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of looking a request up in a route table.

    ``route`` is the winner (path and method matched), or None.
    ``matched_path`` is True when any route matched the path, whatever
    its method.
    """

    route: Route | None
    matched_path: bool

    @property
    def method_not_allowed(self) -> bool:
        return self.route is None and self.matched_path
