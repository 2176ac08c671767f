"""Path parsing and segment-wise wildcard matching.

Route paths and request URIs are both reduced to tuples of segments.
Matching walks the two tuples side by side:

    ``*``       one segment, any content (including empty)
    ``**``      one or more segments
    ``*.css``   a segment ending with ``.css``
    ``img*``    a segment starting with ``img``
    ``*v2*``    a segment containing ``v2``
    anything else compares by equality
"""

from collections.abc import Iterable

from wildroute.errors import ConfigurationError
from wildroute.routing.route import (
    MULTI_WILDCARD,
    WILDCARD,
    Resolution,
    Route,
    SegmentKind,
    classify_segment,
)

DEFAULT_PATH_TERMINATORS = "?&#"


def _split(path: str) -> tuple[str, ...]:
    if path in ("", "/"):
        return ()
    # Drop whatever precedes the first "/" (the empty string for "/a/b")
    return tuple(path.split("/")[1:])


def parse_path(path: str) -> tuple[str, ...]:
    """Parse a route path into segment patterns.

    Examples::

        "/"              -> ()
        "/users"         -> ("users",)
        "/static/**"     -> ("static", "**")
        "/a//b"          -> ("a", "", "b")

    Raises ``ConfigurationError`` for an empty path, a path without a
    leading ``/``, or a ``**`` immediately followed by another wildcard.
    """
    if not path:
        msg = "Invalid empty route."
        raise ConfigurationError(msg)
    if not path.startswith("/"):
        msg = f"Routes must begin with /, got {path!r}."
        raise ConfigurationError(msg)

    segments = _split(path)
    for current, following in zip(segments, segments[1:], strict=False):
        if current == MULTI_WILDCARD and following in (WILDCARD, MULTI_WILDCARD):
            msg = f"Route ** followed by another * or ** is not supported: {path!r}."
            raise ConfigurationError(msg)
    return segments


def split_uri(uri: str, terminators: str = DEFAULT_PATH_TERMINATORS) -> tuple[str, ...]:
    """Split a raw request URI into path segments.

    The path ends at the first ``?``, ``&`` or ``#`` (or whatever
    *terminators* lists). Query strings and fragments are cut off, not
    parsed.
    """
    end = len(uri)
    for char in terminators:
        index = uri.find(char, 0, end)
        if index != -1:
            end = index
    return _split(uri[:end])


def partial_wildcard_matches(pattern: str, part: str) -> bool:
    """Test *part* against a partial wildcard such as ``*.css``."""
    prefix = pattern.startswith(WILDCARD)
    suffix = pattern.endswith(WILDCARD)
    literal = pattern[1 if prefix else 0 : -1 if suffix else None]

    if prefix and suffix:
        return literal in part
    if prefix:
        return part.endswith(literal)
    return part.startswith(literal)


def segment_matches(pattern: str, part: str) -> bool:
    """Test one request segment against one non-``**`` route segment."""
    kind = classify_segment(pattern)
    if kind is SegmentKind.WILDCARD:
        return True
    if kind is SegmentKind.PARTIAL_WILDCARD:
        return partial_wildcard_matches(pattern, part)
    return pattern == part


def _match_from(
    pattern: tuple[str, ...],
    parts: tuple[str, ...],
    i: int,
    j: int,
    failed: set[tuple[int, int]],
) -> bool:
    # A (route, URI) cursor pair that failed once fails every time
    if (i, j) in failed:
        return False
    start = (i, j)

    while j < len(parts):
        if i >= len(pattern):
            break

        if pattern[i] == MULTI_WILDCARD:
            if i + 1 == len(pattern):
                return True
            # The first segment always belongs to the ``**`` span. The span
            # ends at the first segment that satisfies the next pattern
            # segment and lets the rest of the pattern match.
            following = pattern[i + 1]
            for end in range(j + 1, len(parts)):
                if segment_matches(following, parts[end]) and _match_from(
                    pattern, parts, i + 2, end + 1, failed
                ):
                    return True
            break

        if not segment_matches(pattern[i], parts[j]):
            break
        i += 1
        j += 1
    else:
        if i == len(pattern):
            return True

    failed.add(start)
    return False


def match_segments(pattern: tuple[str, ...], parts: tuple[str, ...]) -> bool:
    """True if route *pattern* matches request *parts* in full.

    Each ``**`` may try several span ends, but failed cursor positions
    are remembered, so the cost stays polynomial in the URI length.
    """
    if len(pattern) > len(parts):
        return False
    return _match_from(pattern, parts, 0, 0, set())


def resolve(routes: Iterable[Route], method: str, parts: tuple[str, ...]) -> Resolution:
    """Find the first route matching both path and method.

    Routes are tested in order. A path match with the wrong method is
    remembered so the caller can tell 405 from 404, and the scan goes on.
    """
    matched_path = False
    for route in routes:
        if not match_segments(route.segments, parts):
            continue
        matched_path = True
        if route.method == method:
            return Resolution(route=route, matched_path=True)
    return Resolution(route=None, matched_path=matched_path)
