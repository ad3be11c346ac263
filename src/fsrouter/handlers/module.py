"""Python route modules.

A route file is a plain module. It exports either a ``handler`` callable
that serves every method, or functions named after HTTP methods::

    # pages/blog/[id].py
    from fsrouter import create_route

    @create_route
    def handler(request, params):
        return f"post {params['id']}"

    # pages/api/items.py
    def get(request):
        return {"items": []}

    async def post(request):
        return Response.json(await request.json(), status=201)

When both are present, ``handler`` serves the methods that have no
function of their own.
"""

import importlib.util
import re
from collections.abc import Callable
from typing import Any, TypeVar

from fsrouter._internal.invoke import invoke_handler
from fsrouter.errors import HandlerContractError, HandlerLoadError, MethodNotAllowed
from fsrouter.http.request import Request
from fsrouter.routing.segment import RoutePattern

# HTTP method names recognised as handler functions
HTTP_METHODS = frozenset({"get", "post", "put", "delete", "patch", "head", "options"})

_MODULE_NAME_RE = re.compile(r"\W")

F = TypeVar("F", bound=Callable[..., Any])


def create_route(handler: F) -> F:
    """Mark *handler* as a route handler. Returns it unchanged."""
    return handler


class MethodHandler:
    """Dispatches to the per-method functions of one route module."""

    __slots__ = ("fallback", "file", "methods")

    def __init__(
        self,
        file: str,
        methods: dict[str, Callable[..., Any]],
        fallback: Callable[..., Any] | None = None,
    ) -> None:
        self.file = file
        self.methods = methods
        self.fallback = fallback

    @property
    def allowed(self) -> frozenset[str]:
        allowed = set(self.methods)
        if "GET" in allowed:
            allowed.add("HEAD")
        return frozenset(allowed)

    async def __call__(self, request: Request, params: dict[str, str]) -> Any:
        func = self.methods.get(request.method)
        if func is None and request.method == "HEAD":
            func = self.methods.get("GET")
        if func is None:
            func = self.fallback
        if func is None:
            raise MethodNotAllowed(self.allowed)
        return await invoke_handler(func, request, params)


def load_module_handler(route: RoutePattern) -> Callable[..., Any]:
    """Import a route's ``.py`` file and return its handler.

    Raises:
        HandlerLoadError: The module could not be imported.
        HandlerContractError: The module exports no usable handler.
    """
    module_name = "_fsrouter_route_" + _MODULE_NAME_RE.sub("_", route.file)
    spec = importlib.util.spec_from_file_location(module_name, route.abs_path)
    if spec is None or spec.loader is None:
        raise HandlerLoadError(route.file)

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise HandlerLoadError(route.file, exc) from exc

    methods: dict[str, Callable[..., Any]] = {}
    for name in HTTP_METHODS:
        func = getattr(module, name, None)
        if func is not None and callable(func):
            methods[name.upper()] = func

    handler = getattr(module, "handler", None)
    if handler is not None and not callable(handler):
        raise HandlerContractError(route.file, "'handler' must be a function")

    if not methods:
        if handler is None:
            raise HandlerContractError(
                route.file, "module defines neither 'handler' nor an HTTP method function"
            )
        return handler

    return MethodHandler(route.file, methods, fallback=handler)
