"""Tests for fsrouter.handlers.markdown — Markdown routes as HTML pages."""

from typing import Any

import pytest

from fsrouter.errors import HandlerContractError, MethodNotAllowed
from fsrouter.handlers.markdown import MarkdownPageRenderer, PageMeta, markdown_loader, split_front_matter
from fsrouter.handlers.registry import FileHandlerRegistry
from fsrouter.http.request import Request
from fsrouter.routing.parser import parse_route_path


def _request(method: str = "GET") -> Request:
    async def receive() -> dict[str, Any]:
        return {"type": "http.request", "body": b"", "more_body": False}

    scope = {"type": "http", "method": method, "path": "/", "headers": [], "query_string": b""}
    return Request.from_asgi(scope, receive)


class TestSplitFrontMatter:
    def test_without_front_matter(self) -> None:
        assert split_front_matter("# Hi\n") == ({}, "# Hi\n")

    def test_with_front_matter(self) -> None:
        meta, body = split_front_matter("---\ntitle: About\nfavicon: /f.ico\n---\n# Hi\n")
        assert meta == {"title": "About", "favicon": "/f.ico"}
        assert body == "# Hi\n"

    def test_empty_block(self) -> None:
        meta, body = split_front_matter("---\n\n---\nbody")
        assert meta == {}
        assert body == "body"

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ValueError, match="mapping"):
            split_front_matter("---\n- a\n- b\n---\nbody")

    def test_rule_later_in_document_is_body(self) -> None:
        source = "# Title\n\n---\nnot: meta\n---\n"
        assert split_front_matter(source) == ({}, source)


class TestMarkdownPageRenderer:
    def test_page_shell(self) -> None:
        html = MarkdownPageRenderer().render("# Hello", PageMeta(title="Greeting"))
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Greeting</title>" in html
        assert "<h1" in html
        assert "Hello" in html
        assert 'class="markdown-body"' in html

    def test_title_is_escaped(self) -> None:
        html = MarkdownPageRenderer().render("x", PageMeta(title="<script>"))
        assert "<title>&lt;script&gt;</title>" in html

    def test_favicon(self) -> None:
        html = MarkdownPageRenderer().render("x", PageMeta(favicon="/icon.png"))
        assert 'href="/icon.png"' in html
        assert "<title>" not in html

    def test_empty_source(self) -> None:
        html = MarkdownPageRenderer().render("", PageMeta())
        assert "<main>" in html


class TestMarkdownHandler:
    async def test_serves_page(self, route_tree) -> None:
        root = route_tree({"about.md": "---\ntitle: About us\n---\n# About\n"})
        load = markdown_loader(MarkdownPageRenderer())
        response = await load(parse_route_path("about.md", root))(_request())
        assert response.status == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert "<title>About us</title>" in response.text
        assert "<h1" in response.text

    async def test_title_defaults_to_file_name(self, route_tree) -> None:
        root = route_tree({"guide.md": "text"})
        load = markdown_loader(MarkdownPageRenderer())
        response = await load(parse_route_path("guide.md", root))(_request())
        assert "<title>guide</title>" in response.text

    async def test_bad_front_matter(self, route_tree) -> None:
        root = route_tree({"bad.md": "---\n[unclosed\n---\ntext"})
        load = markdown_loader(MarkdownPageRenderer())
        with pytest.raises(HandlerContractError, match="invalid front matter"):
            await load(parse_route_path("bad.md", root))(_request())

    async def test_rejects_post(self, route_tree) -> None:
        root = route_tree({"a.md": "x"})
        load = markdown_loader(MarkdownPageRenderer())
        with pytest.raises(MethodNotAllowed):
            await load(parse_route_path("a.md", root))(_request("POST"))

    async def test_through_registry(self, route_tree) -> None:
        root = route_tree({"a.md": "# Alpha", "b.md": "# Bravo"})
        registry = FileHandlerRegistry()
        first = await registry.resolve(parse_route_path("a.md", root))(_request())
        second = await registry.resolve(parse_route_path("b.md", root))(_request())
        assert "Alpha" in first.text and "Bravo" not in first.text
        assert "Bravo" in second.text
