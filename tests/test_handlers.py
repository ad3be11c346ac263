"""Tests for fsrouter.handlers — module, static, and registry loading."""

from pathlib import Path
from typing import Any

import pytest

from fsrouter.errors import HandlerContractError, HandlerLoadError, MethodNotAllowed
from fsrouter.handlers import (
    FileHandlerRegistry,
    MethodHandler,
    create_route,
    load_module_handler,
    load_static_handler,
)
from fsrouter.handlers.static import content_type_for
from fsrouter.http.request import Request
from fsrouter.http.response import Response
from fsrouter.routing.parser import parse_route_path
from fsrouter.routing.segment import RoutePattern


def _route(root: Path, file: str) -> RoutePattern:
    return parse_route_path(file, root)


def _request(method: str = "GET", path: str = "/") -> Request:
    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": b"", "more_body": False}

    scope = {"type": "http", "method": method, "path": path, "headers": [], "query_string": b""}
    return Request.from_asgi(scope, receive)


class TestCreateRoute:
    def test_identity(self) -> None:
        def handler(request):
            return "x"

        assert create_route(handler) is handler


class TestLoadModuleHandler:
    def test_handler_export(self, route_tree) -> None:
        root = route_tree({"a.py": "def handler(request, params):\n    return 'a'\n"})
        handler = load_module_handler(_route(root, "a.py"))
        assert handler(None, {}) == "a"

    def test_create_route_export(self, route_tree) -> None:
        source = (
            "from fsrouter import create_route\n\n"
            "@create_route\n"
            "def handler(request, params):\n"
            "    return params['id']\n"
        )
        root = route_tree({"[id].py": source})
        handler = load_module_handler(_route(root, "[id].py"))
        assert handler(None, {"id": "9"}) == "9"

    async def test_method_functions(self, route_tree) -> None:
        source = "def get(request):\n    return 'got'\n\nasync def post(request, params):\n    return 'posted'\n"
        root = route_tree({"items.py": source})
        handler = load_module_handler(_route(root, "items.py"))
        assert isinstance(handler, MethodHandler)
        assert handler.allowed == frozenset({"GET", "HEAD", "POST"})
        assert await handler(_request("GET"), {}) == "got"
        assert await handler(_request("HEAD"), {}) == "got"
        assert await handler(_request("POST"), {}) == "posted"

    async def test_method_not_allowed(self, route_tree) -> None:
        root = route_tree({"items.py": "def post(request):\n    return 'x'\n"})
        handler = load_module_handler(_route(root, "items.py"))
        with pytest.raises(MethodNotAllowed) as exc_info:
            await handler(_request("GET"), {})
        assert exc_info.value.headers == (("Allow", "POST"),)

    async def test_handler_is_fallback(self, route_tree) -> None:
        source = "def post(request):\n    return 'post'\n\ndef handler():\n    return 'any'\n"
        root = route_tree({"items.py": source})
        handler = load_module_handler(_route(root, "items.py"))
        assert await handler(_request("POST"), {}) == "post"
        assert await handler(_request("DELETE"), {}) == "any"

    def test_import_error(self, route_tree) -> None:
        root = route_tree({"bad.py": "raise RuntimeError('boom')\n"})
        with pytest.raises(HandlerLoadError, match="boom") as exc_info:
            load_module_handler(_route(root, "bad.py"))
        assert exc_info.value.file == "bad.py"

    def test_syntax_error(self, route_tree) -> None:
        root = route_tree({"bad.py": "def (:\n"})
        with pytest.raises(HandlerLoadError):
            load_module_handler(_route(root, "bad.py"))

    def test_no_export(self, route_tree) -> None:
        root = route_tree({"empty.py": "VALUE = 1\n"})
        with pytest.raises(HandlerContractError, match="neither 'handler'"):
            load_module_handler(_route(root, "empty.py"))

    def test_handler_not_callable(self, route_tree) -> None:
        root = route_tree({"odd.py": "handler = 'text'\n"})
        with pytest.raises(HandlerContractError, match="must be a function"):
            load_module_handler(_route(root, "odd.py"))

    def test_modules_are_isolated(self, route_tree) -> None:
        root = route_tree(
            {
                "a/page.py": "def handler():\n    return 'a'\n",
                "b/page.py": "def handler():\n    return 'b'\n",
            }
        )
        assert load_module_handler(_route(root, "a/page.py"))() == "a"
        assert load_module_handler(_route(root, "b/page.py"))() == "b"


class TestStaticHandler:
    def test_content_types(self, tmp_path: Path) -> None:
        assert content_type_for(_route(tmp_path, "a.html")) == "text/html; charset=utf-8"
        assert content_type_for(_route(tmp_path, "a.json")) == "application/json"
        assert content_type_for(_route(tmp_path, "a.unknownext")) == "application/octet-stream"

    async def test_serves_file(self, route_tree) -> None:
        root = route_tree({"about.html": "<h1>About</h1>"})
        handler = load_static_handler(_route(root, "about.html"))
        response = await handler(_request())
        assert isinstance(response, Response)
        assert response.body_bytes == b"<h1>About</h1>"
        assert response.content_type == "text/html; charset=utf-8"

    async def test_reads_current_content(self, route_tree) -> None:
        root = route_tree({"about.html": "v1"})
        handler = load_static_handler(_route(root, "about.html"))
        (root / "about.html").write_text("v2")
        assert (await handler(_request())).body_bytes == b"v2"

    async def test_rejects_post(self, route_tree) -> None:
        root = route_tree({"about.html": "x"})
        handler = load_static_handler(_route(root, "about.html"))
        with pytest.raises(MethodNotAllowed):
            await handler(_request("POST"))

    async def test_deleted_file(self, route_tree) -> None:
        root = route_tree({"about.html": "x"})
        handler = load_static_handler(_route(root, "about.html"))
        (root / "about.html").unlink()
        with pytest.raises(HandlerLoadError):
            await handler(_request())


class TestFileHandlerRegistry:
    def test_default_extensions(self) -> None:
        assert FileHandlerRegistry().extensions == frozenset({".py", ".html", ".md"})

    def test_caches_by_file(self, route_tree) -> None:
        root = route_tree({"a.py": "def handler():\n    return 'a'\n"})
        registry = FileHandlerRegistry()
        route = _route(root, "a.py")
        assert registry.resolve(route) is registry.resolve(route)

    def test_failed_load_not_cached(self, route_tree) -> None:
        root = route_tree({"a.py": "raise RuntimeError('boom')\n"})
        registry = FileHandlerRegistry()
        route = _route(root, "a.py")
        with pytest.raises(HandlerLoadError):
            registry.resolve(route)
        (root / "a.py").write_text("def handler():\n    return 'fixed'\n")
        assert registry.resolve(route)() == "fixed"

    def test_unknown_extension(self, route_tree) -> None:
        root = route_tree({"a.txt": "x"})
        with pytest.raises(HandlerContractError, match="no handler loader"):
            FileHandlerRegistry().resolve(_route(root, "a.txt"))

    def test_register(self, route_tree) -> None:
        root = route_tree({"a.txt": "x"})
        registry = FileHandlerRegistry()
        registry.register(".txt", lambda route: (lambda: route.file))
        assert ".txt" in registry.extensions
        assert registry.resolve(_route(root, "a.txt"))() == "a.txt"

    def test_loaders_override(self, route_tree) -> None:
        root = route_tree({"a.html": "x"})
        registry = FileHandlerRegistry({".html": lambda route: (lambda: "custom")})
        assert registry.resolve(_route(root, "a.html"))() == "custom"
