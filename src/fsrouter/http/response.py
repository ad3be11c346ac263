"""Outgoing HTTP response value.

Handlers may return a ``Response`` directly; every other return value is
turned into one by ``fsrouter.server.negotiation``.
"""

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """Status, content type, extra headers and a body.

    Immutable: ``with_status`` and ``with_header`` return modified copies.
    Header names keep the case they were given; ``header()`` looks them up
    case-insensitively.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    @classmethod
    def json(cls, data: Any, status: int = 200) -> Response:
        return cls(json_module.dumps(data), status, "application/json")

    @classmethod
    def text_plain(cls, body: str, status: int = 200) -> Response:
        return cls(body, status, "text/plain; charset=utf-8")

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        return self.with_headers({name: value})

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Append *headers* after the existing ones."""
        return replace(self, headers=self.headers + tuple(headers.items()))

    def header(self, name: str) -> str | None:
        wanted = name.lower()
        return next((value for key, value in self.headers if key.lower() == wanted), None)

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8 when it was given as text."""
        match self.body:
            case str():
                return self.body.encode("utf-8")
            case _:
                return self.body

    @property
    def text(self) -> str:
        match self.body:
            case bytes():
                return self.body.decode("utf-8")
            case _:
                return self.body
