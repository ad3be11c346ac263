"""Immutable HTTP request handed to route handlers."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from fsrouter._internal.asgi import Receive, Scope
from fsrouter.http.multidict import Headers, QueryParams


class BodyReader:
    """Drains the ASGI receive channel once and keeps the bytes."""

    __slots__ = ("_data", "_receive")

    def __init__(self, receive: Receive) -> None:
        self._receive = receive
        self._data: bytes | None = None

    async def read(self) -> bytes:
        if self._data is None:
            chunks: list[bytes] = []
            more = True
            while more:
                message = await self._receive()
                chunks.append(message.get("body", b""))
                more = message.get("more_body", False)
            self._data = b"".join(chunks)
        return self._data


@dataclass(frozen=True, slots=True)
class Request:
    """What a route handler sees of an incoming HTTP request.

    ``path_params`` is empty until the request is dispatched; the router
    then hands the handler a copy carrying the values bound by the
    matched pattern. Copies share one ``BodyReader``, so the body is
    received once however many times it is read.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    client: tuple[str, int] | None = None
    http_version: str = "1.1"
    path_params: Mapping[str, str] = field(default_factory=dict)
    _reader: BodyReader | None = field(default=None, repr=False, compare=False)

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if not self.query.raw:
            return self.path
        return f"{self.path}?{self.query.raw.decode('latin-1')}"

    def with_path_params(self, params: Mapping[str, str]) -> Request:
        return replace(self, path_params=params)

    async def body(self) -> bytes:
        if self._reader is None:
            return b""
        return await self._reader.read()

    async def text(self) -> str:
        return (await self.body()).decode("utf-8")

    async def json(self) -> Any:
        return json.loads(await self.body())

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Build a Request from an ASGI ``http`` scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"] or "/",
            headers=Headers.from_asgi(scope.get("headers", ())),
            query=QueryParams(scope.get("query_string", b"")),
            client=(client[0], client[1]) if client else None,
            http_version=scope.get("http_version", "1.1"),
            _reader=BodyReader(receive),
        )
