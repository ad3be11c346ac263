"""Route table — exact map plus specificity-ordered list.

Built once from the discovered file list, immutable afterwards. Patterns
without parameters live in the exact map; every other pattern is in the
ordered list, most specific first.
"""

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from fsrouter.errors import DuplicateRoute, InvalidRoutePattern, NoRoutesDiscovered
from fsrouter.observer import NullObserver, RouteShadowed, RouterObserver, TableBuilt
from fsrouter.routing.parser import parse_route_path
from fsrouter.routing.segment import RoutePattern, SegmentKind
from fsrouter.routing.specificity import sort_patterns


class RouteTable:
    """Immutable route lookup structures.

    Attributes:
        exact: Pattern string -> route, for routes with no parameters.
        ordered: Parameterized routes in the order they are tried.
        root_dir: Directory the routes were discovered in, if known.
    """

    __slots__ = ("exact", "ordered", "root_dir")

    def __init__(
        self,
        exact: Mapping[str, RoutePattern],
        ordered: tuple[RoutePattern, ...],
        root_dir: Path | None = None,
    ) -> None:
        self.exact: Mapping[str, RoutePattern] = MappingProxyType(dict(exact))
        self.ordered = ordered
        self.root_dir = root_dir

    @property
    def routes(self) -> tuple[RoutePattern, ...]:
        """Every route: exact routes first, then parameterized in match order."""
        return (*self.exact.values(), *self.ordered)

    def __iter__(self) -> Iterator[RoutePattern]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.exact) + len(self.ordered)

    def __repr__(self) -> str:
        return f"RouteTable(exact={len(self.exact)}, ordered={len(self.ordered)})"


def validate_pattern(route: RoutePattern) -> None:
    """Reject patterns whose parameters cannot be resolved predictably."""
    kinds = [seg.kind for seg in route.segments]
    catch_alls = kinds.count(SegmentKind.CATCH_ALL)
    if catch_alls > 1:
        raise InvalidRoutePattern(route.file, "only one catch-all segment is allowed per route")
    if catch_alls and SegmentKind.OPTIONAL in kinds:
        raise InvalidRoutePattern(
            route.file, "a catch-all segment cannot be combined with an optional segment"
        )


def _shape(route: RoutePattern) -> tuple[tuple[SegmentKind, str], ...]:
    # Parameter names don't affect what a route matches: [id] and [slug] collide.
    # [[x]] binds one component wherever [x] does, so the two collide as well.
    return tuple(
        (SegmentKind.DYNAMIC if seg.kind is SegmentKind.OPTIONAL else seg.kind, seg.text)
        for seg in route.segments
    )


def _check_duplicates(routes: list[RoutePattern]) -> None:
    seen: dict[tuple[tuple[SegmentKind, str], ...], list[RoutePattern]] = {}
    for route in routes:
        seen.setdefault(_shape(route), []).append(route)
    for group in seen.values():
        if len(group) > 1:
            raise DuplicateRoute(group[0].pattern, tuple(r.file for r in group))


def _covers(wide: RoutePattern, narrow: RoutePattern) -> bool:
    """Whether every URL *narrow* matches is also matched by *wide*.

    Only decided for a *wide* pattern ending in a catch-all; anything
    else is reported as not covering.
    """
    if not wide.segments or wide.segments[-1].kind is not SegmentKind.CATCH_ALL:
        return False
    prefix = len(wide.segments) - 1
    if len(narrow.segments) <= prefix:
        return False

    for outer, inner in zip(wide.segments[:prefix], narrow.segments):
        if inner.kind is SegmentKind.CATCH_ALL:
            return False
        if outer.kind is SegmentKind.STATIC and inner != outer:
            return False

    tail = narrow.segments[prefix:]
    # A lone trailing [[x]] also matches the bare prefix, which the catch-all does not
    return not (len(tail) == 1 and tail[0].kind is SegmentKind.OPTIONAL)


def find_shadowed(ordered: tuple[RoutePattern, ...]) -> list[tuple[RoutePattern, RoutePattern]]:
    """``(route, by)`` pairs where a catch-all tried earlier takes every URL of *route*."""
    shadowed: list[tuple[RoutePattern, RoutePattern]] = []
    for position, wide in enumerate(ordered):
        if not wide.has_catch_all:
            continue
        shadowed.extend(
            (narrow, wide) for narrow in ordered[position + 1 :] if _covers(wide, narrow)
        )
    return shadowed


def build_route_table(
    files: Iterable[str],
    root_dir: str | Path | None = None,
    *,
    observer: RouterObserver | None = None,
) -> RouteTable:
    """Parse route files and assemble the lookup structures.

    Performs no I/O; *files* come from the directory walk (or a test).

    Args:
        files: Route file paths relative to *root_dir*, in discovery order.
        root_dir: Absolute root directory, used for each route's ``abs_path``.
        observer: Receives a ``TableBuilt`` event, then one ``RouteShadowed``
            per route that an earlier catch-all leaves unreachable.

    Raises:
        NoRoutesDiscovered: *files* is empty.
        InvalidRoutePattern: A file derives an unsupported pattern.
        DuplicateRoute: Two files derive the same route.
    """
    root = Path(root_dir) if root_dir is not None else None
    routes = [parse_route_path(file, root) for file in files]
    if not routes:
        raise NoRoutesDiscovered(root)

    for route in routes:
        validate_pattern(route)
    _check_duplicates(routes)

    exact = {route.pattern: route for route in routes if route.is_exact}
    ordered = tuple(sort_patterns(route for route in routes if not route.is_exact))

    table = RouteTable(exact, ordered, root)
    observer = observer or NullObserver()
    observer.emit(TableBuilt(exact=tuple(exact.values()), ordered=ordered))
    for route, by in find_shadowed(ordered):
        observer.emit(RouteShadowed(route=route, by=by))
    return table
