"""Tests for fsrouter.server.negotiation — return value conversion."""

import pytest

from fsrouter.errors import HandlerContractError
from fsrouter.http.response import Response
from fsrouter.server.negotiation import negotiate


class TestNegotiate:
    def test_response_passthrough(self) -> None:
        response = Response("x", status=202)
        assert negotiate(response, file="a.py") is response

    def test_str_is_html(self) -> None:
        response = negotiate("<p>hi</p>", file="a.py")
        assert response.status == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert response.text == "<p>hi</p>"

    def test_bytes(self) -> None:
        response = negotiate(b"\x00\x01", file="a.py")
        assert response.content_type == "application/octet-stream"
        assert response.body_bytes == b"\x00\x01"

    @pytest.mark.parametrize("value", [{"a": 1}, [1, 2]])
    def test_json(self, value: object) -> None:
        response = negotiate(value, file="a.py")
        assert response.content_type == "application/json"

    def test_status_tuple(self) -> None:
        response = negotiate(("created", 201), file="a.py")
        assert response.status == 201
        assert response.text == "created"

    def test_status_headers_tuple(self) -> None:
        response = negotiate(({"id": 1}, 201, {"Location": "/items/1"}), file="a.py")
        assert response.status == 201
        assert response.header("location") == "/items/1"
        assert response.content_type == "application/json"

    def test_none_breaks_contract(self) -> None:
        with pytest.raises(HandlerContractError, match="returned None") as exc_info:
            negotiate(None, file="a.py")
        assert exc_info.value.file == "a.py"

    def test_unsupported_type(self) -> None:
        with pytest.raises(HandlerContractError, match="unsupported type int"):
            negotiate(42, file="a.py")
