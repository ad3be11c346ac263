"""Router construction from CLI arguments.

Shared by ``fsrouter serve`` and ``fsrouter routes``. Relative roots are
resolved against the current directory here; the library itself only
accepts absolute ones.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from fsrouter.app import FsRouter
from fsrouter.config import RouterConfig
from fsrouter.errors import ConfigurationError
from fsrouter.observer import configure_logging


def resolve_root(root: str) -> str:
    """Absolute form of *root*. ``file://`` URLs pass through unchanged."""
    if root.startswith("file://"):
        return root
    return str(Path(root).resolve())


def build_router(args: argparse.Namespace, **overrides: object) -> FsRouter:
    """Build the router described by *args*, exiting with status 1 on error.

    Prints ``Error: <message>`` to stderr for configuration errors.
    """
    config = RouterConfig(allow_empty=args.allow_empty)
    if args.ext:
        config = replace(config, extensions=tuple(_dotted(ext) for ext in args.ext))
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    if overrides:
        config = replace(config, **overrides)

    try:
        configure_logging(config.log_level)
        return FsRouter(resolve_root(args.root), config)
    except (ConfigurationError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _dotted(ext: str) -> str:
    return ext if ext.startswith(".") else f".{ext}"
