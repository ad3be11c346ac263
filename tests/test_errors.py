"""Tests for fsrouter.errors — exception hierarchy and error messages."""

import pytest

from fsrouter.errors import (
    ConfigurationError,
    DuplicateRoute,
    FsRouterError,
    HandlerContractError,
    HandlerError,
    HandlerLoadError,
    HTTPError,
    InvalidRoutePattern,
    MethodNotAllowed,
    NoRoutesDiscovered,
    NotFound,
    RootDirNotFound,
    RootDirRelative,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [RootDirNotFound, RootDirRelative, NoRoutesDiscovered, InvalidRoutePattern, DuplicateRoute],
    )
    def test_configuration_errors(self, cls: type) -> None:
        assert issubclass(cls, ConfigurationError)
        assert issubclass(cls, FsRouterError)

    def test_http_errors(self) -> None:
        assert issubclass(NotFound, HTTPError)
        assert issubclass(MethodNotAllowed, HTTPError)
        assert issubclass(HTTPError, FsRouterError)

    def test_handler_errors(self) -> None:
        assert issubclass(HandlerLoadError, HandlerError)
        assert issubclass(HandlerContractError, HandlerError)
        assert not issubclass(HandlerError, ConfigurationError)


class TestConfigurationMessages:
    def test_root_not_found(self) -> None:
        err = RootDirNotFound("/srv/pages")
        assert str(err) == "directory /srv/pages could not be found"

    def test_root_relative(self) -> None:
        err = RootDirRelative("pages")
        assert "pages is a relative path" in str(err)

    def test_no_routes(self) -> None:
        err = NoRoutesDiscovered("/srv/pages")
        assert str(err) == "directory /srv/pages is empty - 0 routes are being served"

    def test_no_routes_without_root(self) -> None:
        assert NoRoutesDiscovered().root_dir is None

    def test_invalid_pattern(self) -> None:
        err = InvalidRoutePattern("a/[...b]/[...c].py", "too many")
        assert err.file == "a/[...b]/[...c].py"
        assert "too many" in str(err)

    def test_duplicate(self) -> None:
        err = DuplicateRoute("/about", ("about.py", "about.md"))
        assert str(err) == "route /about is defined by more than one file: about.py, about.md"


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad")) == "400: Bad"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not found"


class TestMethodNotAllowed:
    def test_allow_header_sorted(self) -> None:
        err = MethodNotAllowed(frozenset({"POST", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, POST"),)
        assert "GET, POST" in err.detail


class TestHandlerErrors:
    def test_load_error_with_cause(self) -> None:
        err = HandlerLoadError("a.py", SyntaxError("bad"))
        assert str(err) == "could not load handler from a.py: bad"

    def test_load_error_without_cause(self) -> None:
        assert str(HandlerLoadError("a.py")) == "could not load handler from a.py"

    def test_contract_error(self) -> None:
        err = HandlerContractError("a.py", "no handler")
        assert err.reason == "no handler"
        assert str(err) == "a.py: no handler"
