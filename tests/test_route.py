"""Tests for wildroute.routing.route — Route, Resolution, segment kinds."""

import pytest

from wildroute.routing.route import (
    Resolution,
    Route,
    SegmentKind,
    classify_segment,
    is_partial_wildcard,
)


def _handler(request) -> None:
    request.respond(200, {}, b"ok")


class TestClassifySegment:
    @pytest.mark.parametrize(
        ("segment", "kind"),
        [
            ("users", SegmentKind.LITERAL),
            ("", SegmentKind.LITERAL),
            ("*", SegmentKind.WILDCARD),
            ("**", SegmentKind.MULTI_WILDCARD),
            ("*.css", SegmentKind.PARTIAL_WILDCARD),
            ("img*", SegmentKind.PARTIAL_WILDCARD),
            ("*v2*", SegmentKind.PARTIAL_WILDCARD),
        ],
    )
    def test_kinds(self, segment: str, kind: SegmentKind) -> None:
        assert classify_segment(segment) is kind

    def test_two_char_star_segments_are_literal(self) -> None:
        assert is_partial_wildcard("a*") is False
        assert is_partial_wildcard("*a") is False
        assert classify_segment("a*") is SegmentKind.LITERAL


class TestRoute:
    def test_creation(self) -> None:
        route = Route(method="GET", path="/users", segments=("users",), handler=_handler)
        assert route.method == "GET"
        assert route.path == "/users"
        assert route.segments == ("users",)
        assert route.handler is _handler

    def test_frozen(self) -> None:
        route = Route(method="GET", path="/", segments=(), handler=_handler)
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]

    def test_matches(self) -> None:
        route = Route(method="GET", path="/a/*", segments=("a", "*"), handler=_handler)
        assert route.matches(("a", "b")) is True
        assert route.matches(("a",)) is False


class TestResolution:
    def test_winner(self) -> None:
        route = Route(method="GET", path="/", segments=(), handler=_handler)
        resolution = Resolution(route=route, matched_path=True)
        assert resolution.method_not_allowed is False

    def test_method_not_allowed(self) -> None:
        resolution = Resolution(route=None, matched_path=True)
        assert resolution.method_not_allowed is True

    def test_not_found(self) -> None:
        resolution = Resolution(route=None, matched_path=False)
        assert resolution.method_not_allowed is False
