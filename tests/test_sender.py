"""Tests for fsrouter.server.sender — Response to ASGI messages."""

from typing import Any

from fsrouter.http.response import Response
from fsrouter.server.sender import send_response


async def _send(response: Response, **kwargs: Any) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []

    async def send(message: dict[str, Any]) -> None:
        messages.append(message)

    await send_response(response, send, **kwargs)
    return messages


class TestSendResponse:
    async def test_start_and_body(self) -> None:
        start, body = await _send(Response("hi").with_header("X-Id", "1"))
        assert start["type"] == "http.response.start"
        assert start["status"] == 200
        headers = dict(start["headers"])
        assert headers[b"content-type"] == b"text/html; charset=utf-8"
        assert headers[b"x-id"] == b"1"
        assert headers[b"content-length"] == b"2"
        assert body == {"type": "http.response.body", "body": b"hi"}

    async def test_no_body_for_204(self) -> None:
        start, body = await _send(Response("ignored", status=204))
        assert dict(start["headers"])[b"content-length"] == b"0"
        assert body["body"] == b""

    async def test_head_keeps_length(self) -> None:
        start, body = await _send(Response("hello"), head=True)
        assert dict(start["headers"])[b"content-length"] == b"5"
        assert body["body"] == b""
