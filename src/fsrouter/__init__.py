"""fsrouter — file-system based routing for ASGI.

The files under a root directory are the routes. Bracketed names become
URL parameters::

    pages/
    ├─ index.py            ->  /
    ├─ about.md            ->  /about
    ├─ blog/
    │  ├─ [id].py          ->  /blog/42            {"id": "42"}
    │  ├─ archive.py       ->  /blog/archive
    ├─ docs/
    │  ├─ [...path].py     ->  /docs/a/b/c         {"path": "a/b/c"}

Basic usage::

    from pathlib import Path
    from fsrouter import FsRouter

    app = FsRouter(Path(__file__).parent / "pages")
    app.run()

A Python route file exports ``handler`` or functions named after HTTP
methods::

    # pages/blog/[id].py
    def get(request, params):
        return {"id": params["id"]}
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Dispatcher",
    "FsRouter",
    "FsRouterError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "RouteMatch",
    "RoutePattern",
    "RouteTable",
    "RouterConfig",
    "build_route_table",
    "compare_patterns",
    "create_route",
    "parse_route_path",
    "walk_route_files",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fsrouter`` fast while providing a clean top-level API.
    """
    if name == "FsRouter":
        from fsrouter.app import FsRouter

        return FsRouter

    if name == "RouterConfig":
        from fsrouter.config import RouterConfig

        return RouterConfig

    if name == "Request":
        from fsrouter.http.request import Request

        return Request

    if name == "Response":
        from fsrouter.http.response import Response

        return Response

    if name == "create_route":
        from fsrouter.handlers.module import create_route

        return create_route

    if name in ("RouteMatch", "RoutePattern"):
        from fsrouter.routing import segment as _segment

        return getattr(_segment, name)

    if name == "parse_route_path":
        from fsrouter.routing.parser import parse_route_path

        return parse_route_path

    if name == "compare_patterns":
        from fsrouter.routing.specificity import compare_patterns

        return compare_patterns

    if name in ("RouteTable", "build_route_table"):
        from fsrouter.routing import table as _table

        return getattr(_table, name)

    if name == "Dispatcher":
        from fsrouter.routing.matcher import Dispatcher

        return Dispatcher

    if name == "walk_route_files":
        from fsrouter.discovery import walk_route_files

        return walk_route_files

    if name in ("ConfigurationError", "FsRouterError", "HTTPError", "MethodNotAllowed", "NotFound"):
        from fsrouter import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
