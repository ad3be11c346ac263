"""Routing events and the observers that receive them.

The route table and the dispatcher never log directly. They hand frozen
event objects to the observer they were constructed with::

    router = FsRouter(root, observer=LoggingObserver())

``LoggingObserver`` is the default and writes to the ``fsrouter.routing``
logger. Tests use ``RecordingObserver`` to assert on events.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fsrouter.routing.segment import RoutePattern

logger = logging.getLogger("fsrouter.routing")


@dataclass(frozen=True, slots=True)
class RoutesDiscovered:
    """The directory walk finished."""

    root_dir: str
    files: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TableBuilt:
    """The route table was assembled. ``ordered`` is in match order."""

    exact: tuple["RoutePattern", ...]
    ordered: tuple["RoutePattern", ...]


@dataclass(frozen=True, slots=True)
class NoRoutesWarning:
    """The root directory held no route files and the router serves nothing."""

    root_dir: str


@dataclass(frozen=True, slots=True)
class RouteShadowed:
    """A catch-all tried earlier matches every URL *route* could match."""

    route: "RoutePattern"
    by: "RoutePattern"


@dataclass(frozen=True, slots=True)
class RouteMatched:
    """A request path resolved to a route."""

    path: str
    route: "RoutePattern"
    params: dict[str, str]
    exact: bool


@dataclass(frozen=True, slots=True)
class RouteNotMatched:
    """A request path matched no route."""

    path: str


type RouterEvent = (
    RoutesDiscovered | TableBuilt | NoRoutesWarning | RouteShadowed | RouteMatched | RouteNotMatched
)


@runtime_checkable
class RouterObserver(Protocol):
    """Sink for routing events."""

    def emit(self, event: RouterEvent) -> None: ...


class NullObserver:
    """Discards every event."""

    __slots__ = ()

    def emit(self, event: RouterEvent) -> None:
        pass


class LoggingObserver:
    """Writes routing events to a stdlib logger.

    Discovery and per-request traces go to DEBUG, the boot summary to
    INFO, an empty root directory and unreachable routes to WARNING.
    """

    __slots__ = ("_logger",)

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def emit(self, event: RouterEvent) -> None:
        log = self._logger
        match event:
            case RoutesDiscovered(root_dir=root_dir, files=files):
                log.debug("discovered %d route files under %s: %s", len(files), root_dir, files)
            case TableBuilt(exact=exact, ordered=ordered):
                log.info(
                    "serving %d routes (%d exact, %d parameterized)",
                    len(exact) + len(ordered),
                    len(exact),
                    len(ordered),
                )
                log.debug("parameterized match order: %s", [r.pattern for r in ordered])
            case NoRoutesWarning(root_dir=root_dir):
                log.warning("directory %s is empty - 0 routes are being served", root_dir)
            case RouteShadowed(route=route, by=by):
                log.warning(
                    "file %s is unreachable: %s (%s) is tried first and matches all its urls",
                    route.file,
                    by.pattern,
                    by.file,
                )
            case RouteMatched(path=path, route=route, params=params, exact=True):
                log.debug("url %s matched exact file %s", path, route.file)
            case RouteMatched(path=path, route=route, params=params):
                log.debug(
                    "url %s matched file %s (pattern %s) with parameters %s",
                    path,
                    route.file,
                    route.pattern,
                    params,
                )
            case RouteNotMatched(path=path):
                log.debug("url %s matched no route", path)


class RecordingObserver:
    """Keeps every event in ``events``, in emission order."""

    __slots__ = ("events",)

    def __init__(self) -> None:
        self.events: list[RouterEvent] = []

    def emit(self, event: RouterEvent) -> None:
        self.events.append(event)

    def of_type[E](self, kind: type[E]) -> list[E]:
        return [e for e in self.events if isinstance(e, kind)]


def configure_logging(level: str | int = "info") -> None:
    """Send ``fsrouter.*`` records to stderr at *level*.

    Used by the CLI. Applications embedding the router configure logging
    themselves. Calling it again only changes the level.

    Raises:
        ValueError: *level* is not a known logging level name.
    """
    if isinstance(level, str):
        levels = logging.getLevelNamesMapping()
        try:
            level = levels[level.upper()]
        except KeyError:
            msg = f"unknown log level {level!r}"
            raise ValueError(msg) from None

    package_logger = logging.getLogger("fsrouter")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)
