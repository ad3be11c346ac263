"""Request path matching against a built route table.

Matching is a left-to-right walk over precompiled segments using plain
string comparison. Nothing is compiled per request.
"""

from fsrouter.errors import NotFound
from fsrouter.observer import NullObserver, RouteMatched, RouteNotMatched, RouterObserver
from fsrouter.routing.segment import RouteMatch, Segment, SegmentKind
from fsrouter.routing.table import RouteTable


def split_path(url_path: str) -> list[str]:
    """Split a URL path into its non-empty components."""
    return [p for p in url_path.split("/") if p]


def match_segments(segments: tuple[Segment, ...], parts: list[str]) -> dict[str, str] | None:
    """Match URL components against pattern segments.

    Returns the bound parameters, or ``None`` when the pattern does not
    consume every component (or runs out of components first).

    - static: component must equal the literal text (case-sensitive)
    - dynamic: binds exactly one component
    - catch-all: binds one or more components joined with ``/``; when
      segments follow it, it leaves exactly enough components for them
    - optional-dynamic: binds a component when present; as the final
      segment it may also match nothing, in which case its name is absent
    """
    params: dict[str, str] = {}
    index = 0
    last = len(segments) - 1

    for position, seg in enumerate(segments):
        remaining = len(parts) - index

        if seg.kind is SegmentKind.CATCH_ALL:
            trailing = last - position
            take = remaining - trailing
            if take < 1:
                return None
            params[seg.name] = "/".join(parts[index : index + take])  # type: ignore[index]
            index += take
            continue

        if remaining == 0:
            if seg.kind is SegmentKind.OPTIONAL and position == last:
                return params
            return None

        part = parts[index]
        if seg.kind is SegmentKind.STATIC:
            if part != seg.text:
                return None
        else:
            params[seg.name] = part  # type: ignore[index]
        index += 1

    if index != len(parts):
        return None
    return params


def lookup(table: RouteTable, url_path: str) -> tuple[RouteMatch, bool] | None:
    """Find the route for *url_path*.

    Tries the exact map first, then scans the ordered list. Returns the
    match and whether it came from the exact map, or ``None``.
    """
    parts = split_path(url_path)
    # /blog/, //blog and /blog share one key; the empty path is /
    key = "/" + "/".join(parts)

    route = table.exact.get(key)
    if route is not None:
        return RouteMatch(route=route, params={}), True

    for route in table.ordered:
        params = match_segments(route.segments, parts)
        if params is not None:
            return RouteMatch(route=route, params=params), False

    return None


class Dispatcher:
    """Resolves request paths against an immutable route table.

    Safe to share between concurrent requests: dispatching only reads the
    table and allocates the per-request parameter dict.

    Usage::

        dispatcher = Dispatcher(build_route_table(files, root))
        match = dispatcher.dispatch("/blog/42")
        match.route.file    # "blog/[id].py"
        match.params        # {"id": "42"}
    """

    __slots__ = ("_observer", "table")

    def __init__(self, table: RouteTable, observer: RouterObserver | None = None) -> None:
        self.table = table
        self._observer = observer or NullObserver()

    def find(self, url_path: str) -> RouteMatch | None:
        """Return the match for *url_path*, or ``None`` when nothing matches."""
        found = lookup(self.table, url_path)
        if found is None:
            self._observer.emit(RouteNotMatched(path=url_path))
            return None
        match, exact = found
        self._observer.emit(
            RouteMatched(path=url_path, route=match.route, params=match.params, exact=exact)
        )
        return match

    def dispatch(self, url_path: str) -> RouteMatch:
        """Return the match for *url_path*.

        Raises ``NotFound`` if no route matches.
        """
        match = self.find(url_path)
        if match is None:
            raise NotFound(f"No route matches {url_path!r}")
        return match
