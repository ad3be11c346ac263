"""Markdown routes — rendered to a standalone HTML page.

An optional YAML front matter block sets page metadata::

    ---
    title: About us
    favicon: /favicon.ico
    ---
    # About

``title`` defaults to the file name without its extension.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import anyio
import yaml
from kida import Environment
from kida.template import Markup

from fsrouter.errors import HandlerContractError, HandlerLoadError, MethodNotAllowed
from fsrouter.http.request import Request
from fsrouter.http.response import Response

if TYPE_CHECKING:
    from patitas import Markdown

    from fsrouter.routing.segment import RoutePattern

_FRONT_MATTER_RE = re.compile(r"\A---\r?\n(.*?)\r?\n---\r?\n", re.DOTALL)

_READ_METHODS = frozenset({"GET", "HEAD"})

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    {% if title %}<title>{{ title }}</title>{% end %}
    {% if favicon %}<link rel="icon" href="{{ favicon }}" />{% end %}
    <style>
      main { max-width: 800px; margin: 0 auto; }
    </style>
  </head>
  <body class="markdown-body">
    <main>
      {{ body }}
    </main>
  </body>
</html>
"""


@dataclass(frozen=True, slots=True)
class PageMeta:
    """Front matter fields the page shell understands."""

    title: str | None = None
    favicon: str | None = None


def split_front_matter(source: str) -> tuple[dict[str, Any], str]:
    """Separate a leading ``---`` YAML block from the Markdown body.

    Returns the parsed mapping (empty when there is no block) and the body.

    Raises:
        yaml.YAMLError: The block is not valid YAML.
        ValueError: The block is valid YAML but not a mapping.
    """
    match = _FRONT_MATTER_RE.match(source)
    if match is None:
        return {}, source
    data = yaml.safe_load(match.group(1)) or {}
    if not isinstance(data, dict):
        msg = "front matter must be a mapping"
        raise ValueError(msg)
    return data, source[match.end() :]


class MarkdownPageRenderer:
    """Render Markdown source to a full HTML page.

    Wraps ``patitas.Markdown`` for the body and a kida template for the
    page shell. One renderer is shared by every Markdown route.
    """

    __slots__ = ("_md", "_template")

    def __init__(self, *, highlight: bool = False) -> None:
        self._md: Markdown = _get_markdown(highlight=highlight)
        self._template = Environment(autoescape=True).from_string(_PAGE_TEMPLATE)

    def render(self, source: str, meta: PageMeta) -> str:
        body = self._md(source) if source else ""
        return self._template.render(
            {"title": meta.title, "favicon": meta.favicon, "body": Markup(body)}
        )


def _get_markdown(*, highlight: bool) -> Markdown:
    from patitas import Markdown

    return Markdown(plugins=["all"], highlight=highlight)


def markdown_loader(renderer: MarkdownPageRenderer) -> Callable[[RoutePattern], Callable[..., Any]]:
    """Build a registry loader that serves ``.md`` routes through *renderer*."""

    def load_markdown_handler(route: RoutePattern) -> Callable[..., Any]:
        path = anyio.Path(route.abs_path)
        default_title = route.abs_path.stem

        async def serve_markdown(request: Request) -> Response:
            if request.method not in _READ_METHODS:
                raise MethodNotAllowed(_READ_METHODS)
            try:
                source = await path.read_text(encoding="utf-8")
            except OSError as exc:
                raise HandlerLoadError(route.file, exc) from exc

            try:
                front, body = split_front_matter(source)
            except (yaml.YAMLError, ValueError) as exc:
                raise HandlerContractError(route.file, f"invalid front matter: {exc}") from exc

            meta = PageMeta(
                title=str(front.get("title") or default_title),
                favicon=front.get("favicon"),
            )
            html = await anyio.to_thread.run_sync(renderer.render, body, meta)
            return Response(body=html)

        return serve_markdown

    return load_markdown_handler
