"""Tests for wildroute.errors — exception hierarchy and error messages."""

import pytest

from wildroute.errors import ConfigurationError, ResponseAlreadySent, WildrouteError
from wildroute.routing.router import Router


def _handler(request) -> None:
    request.respond(200, {}, b"")


class TestHierarchy:
    def test_configuration_error_is_wildroute_error(self) -> None:
        assert issubclass(ConfigurationError, WildrouteError)

    def test_response_already_sent_is_wildroute_error(self) -> None:
        assert issubclass(ResponseAlreadySent, WildrouteError)


class TestResponseAlreadySent:
    def test_message(self) -> None:
        err = ResponseAlreadySent("GET", "/users")
        assert str(err) == "Response already sent for GET '/users'"
        assert err.method == "GET"
        assert err.uri == "/users"


class TestConfigurationErrorMessages:
    def test_empty_route(self) -> None:
        with pytest.raises(ConfigurationError, match="empty route"):
            Router().get("", _handler)

    def test_missing_leading_slash_names_path(self) -> None:
        with pytest.raises(ConfigurationError, match="no-leading-slash"):
            Router().get("no-leading-slash", _handler)

    def test_multi_wildcard_followed_by_wildcard(self) -> None:
        with pytest.raises(ConfigurationError, match=r"\*\* followed by another"):
            Router().get("/a/**/*", _handler)
