"""fsrouter CLI — serve a route directory and inspect its route table.

Entry point registered as ``fsrouter`` in ``pyproject.toml``::

    [project.scripts]
    fsrouter = "fsrouter.cli:main"
"""

import argparse
import sys


def _add_root_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", help="Directory holding the route files")
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        metavar="SUFFIX",
        help="Route file extension (repeatable, default: .py .html .md)",
    )
    parser.add_argument(
        "--allow-empty",
        action="store_true",
        help="Serve an empty directory (every request 404s) instead of failing",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: info)")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fsrouter`` command."""
    parser = argparse.ArgumentParser(
        prog="fsrouter",
        description="fsrouter — file-system based routing for ASGI.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fsrouter serve ---------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Start the dev server")
    _add_root_argument(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    serve_parser.add_argument(
        "--debug",
        action="store_true",
        help="Tracebacks in 500 responses and reload on file changes",
    )

    # -- fsrouter routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the route table")
    _add_root_argument(routes_parser)
    routes_parser.add_argument(
        "--match",
        default=None,
        metavar="PATH",
        help="Show which route a URL path resolves to instead of the table",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from fsrouter.cli._serve import run_serve

        run_serve(args)
    elif args.command == "routes":
        from fsrouter.cli._routes import run_routes

        run_routes(args)
