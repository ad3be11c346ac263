"""Static file routes — the file's bytes are the response body."""

import mimetypes
from collections.abc import Callable
from typing import Any

import anyio

from fsrouter.errors import HandlerLoadError, MethodNotAllowed
from fsrouter.http.request import Request
from fsrouter.http.response import Response
from fsrouter.routing.segment import RoutePattern

_READ_METHODS = frozenset({"GET", "HEAD"})


def content_type_for(route: RoutePattern) -> str:
    """Guess the Content-Type from the file name; text types get a charset."""
    guessed, _ = mimetypes.guess_type(route.abs_path.name)
    if guessed is None:
        return "application/octet-stream"
    if guessed.startswith("text/"):
        return f"{guessed}; charset=utf-8"
    return guessed


def load_static_handler(route: RoutePattern) -> Callable[..., Any]:
    """Return a handler that serves the route file as-is.

    The file is read on every request, so edits show up without a restart.
    """
    path = anyio.Path(route.abs_path)
    content_type = content_type_for(route)

    async def serve_file(request: Request) -> Response:
        if request.method not in _READ_METHODS:
            raise MethodNotAllowed(_READ_METHODS)
        try:
            body = await path.read_bytes()
        except OSError as exc:
            raise HandlerLoadError(route.file, exc) from exc
        return Response(body=body, content_type=content_type)

    return serve_file
