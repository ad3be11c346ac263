"""Filesystem route discovery.

Resolves the root directory and walks it for route files. Anything with
a configured extension becomes a route; path components starting with
``.`` or ``__`` (``.git``, ``__pycache__``, ``__init__.py``) are skipped.

The walk is sorted so the same tree always yields the same discovery
order, which the route table uses as its final tie-break.
"""

from collections.abc import Iterable
from pathlib import Path
from urllib.parse import unquote, urlparse

from fsrouter.errors import RootDirNotFound, RootDirRelative
from fsrouter.observer import NullObserver, RouterObserver, RoutesDiscovered

_FILE_SCHEME = "file://"


def normalize_root_dir(root_dir: str | Path) -> Path:
    """Turn a root directory argument into an absolute path.

    Accepts plain paths and ``file://`` URLs. Relative paths are rejected:
    they would depend on the process working directory.

    Raises:
        RootDirRelative: *root_dir* is not absolute.
    """
    raw = str(root_dir)
    if raw.startswith(_FILE_SCHEME):
        raw = unquote(urlparse(raw).path)

    path = Path(raw)
    if not path.is_absolute():
        raise RootDirRelative(root_dir)
    return path


def _is_hidden(part: str) -> bool:
    return part.startswith((".", "__"))


def walk_route_files(
    root_dir: Path,
    extensions: Iterable[str],
    *,
    observer: RouterObserver | None = None,
) -> list[str]:
    """Walk *root_dir* and return route files relative to it.

    Args:
        root_dir: Absolute directory to walk.
        extensions: File suffixes to include, e.g. ``(".py", ".md")``.
        observer: Receives a ``RoutesDiscovered`` event.

    Returns:
        Sorted relative paths with ``/`` separators. Directories are
        never included.

    Raises:
        RootDirNotFound: *root_dir* does not exist, is not a directory,
            or cannot be read.
    """
    if not root_dir.is_dir():
        raise RootDirNotFound(root_dir)

    allowed = frozenset(extensions)
    try:
        entries = sorted(root_dir.rglob("*"))
    except OSError as exc:
        raise RootDirNotFound(root_dir) from exc

    files: list[str] = []
    for item in entries:
        rel = item.relative_to(root_dir)
        if any(_is_hidden(part) for part in rel.parts):
            continue
        if item.suffix not in allowed or not item.is_file():
            continue
        files.append(rel.as_posix())

    (observer or NullObserver()).emit(RoutesDiscovered(root_dir=str(root_dir), files=tuple(files)))
    return files
