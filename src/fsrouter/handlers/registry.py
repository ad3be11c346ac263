"""Handler registry — turns a matched route into something callable.

The router only depends on the ``HandlerRegistry`` protocol. The default
``FileHandlerRegistry`` picks a loader by file extension and caches what
it loads, so each route file is imported or prepared once per process.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol, TypeAlias, runtime_checkable

from fsrouter.errors import HandlerContractError
from fsrouter.handlers.module import load_module_handler
from fsrouter.handlers.static import load_static_handler
from fsrouter.routing.segment import RoutePattern

logger = logging.getLogger("fsrouter.handlers")

# Route handler, called with (request, params), (request) or nothing
Handler: TypeAlias = Callable[..., Any]

# Loader, prepares the handler for one route file
Loader: TypeAlias = Callable[[RoutePattern], Handler]


@runtime_checkable
class HandlerRegistry(Protocol):
    """Capability to resolve a route to its handler."""

    def resolve(self, route: RoutePattern) -> Handler: ...


class FileHandlerRegistry:
    """Resolves routes by file extension, caching loaded handlers.

    Default loaders:

    - ``.py``: import the module (see ``fsrouter.handlers.module``)
    - ``.html``: serve the file as-is
    - ``.md``: render Markdown to an HTML page

    Usage::

        registry = FileHandlerRegistry()
        registry.register(".txt", load_static_handler)
        handler = registry.resolve(route)
    """

    __slots__ = ("_cache", "_loaders", "_lock", "_markdown_highlight")

    def __init__(
        self,
        loaders: Mapping[str, Loader] | None = None,
        *,
        markdown_highlight: bool = False,
    ) -> None:
        self._loaders: dict[str, Loader] = {
            ".py": load_module_handler,
            ".html": load_static_handler,
            ".md": self._load_markdown,
        }
        if loaders:
            self._loaders.update(loaders)
        self._markdown_highlight = markdown_highlight
        self._cache: dict[Path, Handler] = {}
        self._lock = threading.Lock()

    @property
    def extensions(self) -> frozenset[str]:
        return frozenset(self._loaders)

    def register(self, extension: str, loader: Loader) -> None:
        """Serve files with *extension* through *loader*."""
        with self._lock:
            self._loaders[extension] = loader

    def resolve(self, route: RoutePattern) -> Handler:
        """Return the handler for *route*, loading it on first use.

        Failed loads are not cached: the next request retries, so a
        fixed file is picked up without a restart.

        Raises:
            HandlerLoadError: The file could not be loaded.
            HandlerContractError: No loader for the extension, or the
                file does not provide a handler.
        """
        handler = self._cache.get(route.abs_path)
        if handler is not None:
            return handler

        with self._lock:
            handler = self._cache.get(route.abs_path)
            if handler is None:
                loader = self._loaders.get(route.extension)
                if loader is None:
                    raise HandlerContractError(
                        route.file, f"no handler loader for {route.extension or 'extensionless'!r} files"
                    )
                logger.debug("loading handler for %s from %s", route.pattern, route.file)
                handler = loader(route)
                self._cache[route.abs_path] = handler
        return handler

    def _load_markdown(self, route: RoutePattern) -> Handler:
        # patitas, kida and yaml are only imported once a Markdown route is served
        from fsrouter.handlers.markdown import MarkdownPageRenderer, markdown_loader

        renderer = MarkdownPageRenderer(highlight=self._markdown_highlight)
        loader = markdown_loader(renderer)
        self._loaders[".md"] = loader
        return loader(route)
