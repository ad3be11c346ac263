"""``fsrouter routes`` — print the route table.

Exact routes come first, then the parameterized routes in the order the
dispatcher tries them.
"""

import argparse
import sys

from fsrouter.cli._resolve import build_router
from fsrouter.routing.segment import RoutePattern


def run_routes(args: argparse.Namespace) -> None:
    """List the routes under ``args.root``, or resolve ``args.match``."""
    router = build_router(args)

    if args.match is not None:
        match = router.match(args.match)
        if match is None:
            print(f"No route matches {args.match!r}", file=sys.stderr)
            raise SystemExit(1)
        print(f"{match.route.pattern}  {match.route.file}")
        for name, value in match.params.items():
            print(f"  {name} = {value}")
        return

    table = router.table
    if table is None:
        print("No routes registered.")
        return

    exact = list(table.exact.values())
    ordered = list(table.ordered)
    width = max(max(len(r.pattern) for r in table.routes), 7)  # "PATTERN" header

    fmt = f"{{:<6}}  {{:<{width}}}  {{}}"
    print(fmt.format("KIND", "PATTERN", "FILE"))
    print("-" * min(width + 14 + max(len(r.file) for r in table.routes), 80))
    _print_rows(fmt, "exact", exact)
    _print_rows(fmt, "param", ordered)


def _print_rows(fmt: str, kind: str, routes: list[RoutePattern]) -> None:
    for route in routes:
        print(fmt.format(kind, route.pattern, route.file))
