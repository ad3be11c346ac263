"""In-process test client for fsrouter applications.

Requests go straight into the ASGI callable and the captured messages come
back as the same ``Response`` type handlers return. No sockets involved.
"""

import json as json_module
from typing import Any
from urllib.parse import urlencode

from fsrouter._internal.asgi import Message, Scope
from fsrouter.http.response import Response

type ASGIApp = Any


def build_scope(
    method: str,
    path: str,
    headers: dict[str, str] | None = None,
    query: dict[str, str] | None = None,
) -> Scope:
    """ASGI ``http`` scope for *path*, which may carry its own query string."""
    path_part, _, query_string = path.partition("?")
    if query:
        extra = urlencode(query)
        query_string = f"{query_string}&{extra}" if query_string else extra
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method.upper(),
        "path": path_part,
        "raw_path": path_part.encode("latin-1"),
        "query_string": query_string.encode("latin-1"),
        "root_path": "",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 0),
    }


class _Exchange:
    """One request body in, the app's response messages out."""

    __slots__ = ("_body", "_delivered", "messages")

    def __init__(self, body: bytes) -> None:
        self._body = body
        self._delivered = False
        self.messages: list[Message] = []

    async def receive(self) -> Message:
        if self._delivered:
            return {"type": "http.disconnect"}
        self._delivered = True
        return {"type": "http.request", "body": self._body, "more_body": False}

    async def send(self, message: Message) -> None:
        self.messages.append(message)

    def response(self) -> Response:
        status = 200
        content_type = "text/html; charset=utf-8"
        headers: list[tuple[str, str]] = []
        chunks: list[bytes] = []
        for message in self.messages:
            if message["type"] == "http.response.start":
                status = message["status"]
                for raw_name, raw_value in message.get("headers", []):
                    name, value = raw_name.decode("latin-1"), raw_value.decode("latin-1")
                    if name == "content-type":
                        content_type = value
                    elif name != "content-length":
                        headers.append((name, value))
            elif message["type"] == "http.response.body":
                chunks.append(message.get("body", b""))
        return Response(
            body=b"".join(chunks),
            status=status,
            content_type=content_type,
            headers=tuple(headers),
        )


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for fsrouter applications.

    Usage::

        async with TestClient(router) as client:
            response = await client.get("/blog/42")
            assert response.status == 200
    """

    __slots__ = ("app",)

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __aenter__(self) -> TestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def get(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
    ) -> Response:
        return await self.request("GET", path, headers=headers, query=query)

    async def head(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        return await self.request("HEAD", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> Response:
        """Send a POST request. *json* is serialized and sets the content type."""
        if json is not None:
            body = json_module.dumps(json).encode("utf-8")
            headers = {"content-type": "application/json", **(headers or {})}
        return await self.request("POST", path, headers=headers, body=body)

    async def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        return await self.request("PUT", path, headers=headers, body=body)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> Response:
        return await self.request("DELETE", path, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        query: dict[str, str] | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        exchange = _Exchange(body or b"")
        await self.app(build_scope(method, path, headers, query), exchange.receive, exchange.send)
        return exchange.response()

    async def lifespan(self) -> list[str]:
        """Run a lifespan startup/shutdown cycle and return the types of the messages sent back."""
        incoming = iter(({"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}))
        sent: list[str] = []

        async def receive() -> Message:
            return next(incoming)

        async def send(message: Message) -> None:
            sent.append(message["type"])

        await self.app({"type": "lifespan", "asgi": {"version": "3.0"}}, receive, send)
        return sent
