"""fsrouter application class.

Walks the root directory and builds the route table when constructed.
Immutable afterwards: the table, dispatcher and registry are shared by
every request without locking.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from fsrouter._internal.asgi import Receive, Scope, Send
from fsrouter.config import RouterConfig
from fsrouter.discovery import normalize_root_dir, walk_route_files
from fsrouter.errors import NoRoutesDiscovered
from fsrouter.handlers.registry import FileHandlerRegistry, HandlerRegistry
from fsrouter.http.request import Request
from fsrouter.observer import LoggingObserver, NoRoutesWarning, RouterObserver
from fsrouter.routing.matcher import Dispatcher
from fsrouter.routing.segment import RouteMatch, RoutePattern
from fsrouter.routing.table import RouteTable, build_route_table
from fsrouter.server.errors import default_not_found
from fsrouter.server.handler import handle_request


class FsRouter:
    """ASGI application serving the route files under a directory.

    Given a project with the following layout::

        my-app/
        ├─ pages/
        │  ├─ blog/
        │  │  ├─ [id].py
        │  │  ├─ index.py
        │  ├─ about.md
        │  ├─ index.py
        ├─ app.py

    each route file is served at the URL its path describes::

        # my-app/app.py
        from pathlib import Path
        from fsrouter import FsRouter

        app = FsRouter(Path(__file__).parent / "pages")

    Configuration problems (missing or relative root directory, no route
    files, clashing routes) raise while constructing, so a broken router
    never starts serving.

    Args:
        root_dir: Absolute directory (or ``file://`` URL) holding the routes.
        config: Router configuration.
        not_found: Called with the request when no route matches. Its return
            value is converted like a handler's. Defaults to a plain 404.
        registry: Resolves routes to handlers. Defaults to
            ``FileHandlerRegistry``.
        observer: Receives routing events. Defaults to ``LoggingObserver``.
    """

    __slots__ = (
        "_dispatcher",
        "_not_found",
        "_observer",
        "_registry",
        "config",
        "root_dir",
        "table",
    )

    def __init__(
        self,
        root_dir: str | Path,
        config: RouterConfig | None = None,
        *,
        not_found: Callable[[Request], Any] | None = None,
        registry: HandlerRegistry | None = None,
        observer: RouterObserver | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._observer: RouterObserver = observer or LoggingObserver()
        self._registry: HandlerRegistry = registry or FileHandlerRegistry(
            markdown_highlight=self.config.markdown_highlight
        )
        self._not_found = not_found or default_not_found

        self.root_dir: Path = normalize_root_dir(root_dir)
        files = walk_route_files(self.root_dir, self.config.extensions, observer=self._observer)

        table: RouteTable | None
        try:
            table = build_route_table(files, self.root_dir, observer=self._observer)
        except NoRoutesDiscovered:
            if not self.config.allow_empty:
                raise
            self._observer.emit(NoRoutesWarning(root_dir=str(self.root_dir)))
            table = None

        self.table: RouteTable | None = table
        self._dispatcher = Dispatcher(table, self._observer) if table is not None else None

        if self.config.preload_handlers:
            for route in self.routes:
                self._registry.resolve(route)

    @property
    def routes(self) -> tuple[RoutePattern, ...]:
        """Every route: exact routes first, then parameterized in match order."""
        if self.table is None:
            return ()
        return self.table.routes

    def match(self, path: str) -> RouteMatch | None:
        """Resolve *path* without calling a handler. ``None`` when nothing matches."""
        if self._dispatcher is None:
            return None
        return self._dispatcher.find(path)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve this router with the pounce development server."""
        from fsrouter.server.dev import run_dev_server

        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            reload_dirs=(str(self.root_dir),),
            # The app module itself is Python even when no route file is
            reload_include=tuple(dict.fromkeys((".py", *self.config.extensions))),
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            dispatcher=self._dispatcher,
            registry=self._registry,
            not_found=self._not_found,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        # The table is built in __init__, so there is nothing to start or stop
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
