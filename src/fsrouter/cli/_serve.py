"""``fsrouter serve`` — development server command."""

import argparse

from fsrouter.cli._resolve import build_router


def run_serve(args: argparse.Namespace) -> None:
    """Build the router for ``args.root`` and serve it with pounce.

    CLI flags override the config defaults.
    """
    overrides: dict[str, object] = {"debug": args.debug}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port

    router = build_router(args, **overrides)
    router.run()
