"""File path to route pattern parsing.

Examples::

    "about.py"               -> /about
    "blog/index.py"          -> /blog
    "blog/[id]/index.py"     -> /blog/[id]
    "docs/[...path].py"      -> /docs/[...path]
    "shop/[[category]].py"   -> /shop/[[category]]
    "index.py"               -> /

Bracket names must be word characters. Anything else in brackets
(``[]``, ``[a-b]``, ``[[...x]]``) is kept as literal text, so an odd file
name never stops discovery.
"""

import re
from pathlib import Path, PurePosixPath

from fsrouter.routing.segment import RoutePattern, Segment, SegmentKind

_CATCH_ALL_RE = re.compile(r"\[\.\.\.(\w+)\]")
_OPTIONAL_RE = re.compile(r"\[\[(\w+)\]\]")
_DYNAMIC_RE = re.compile(r"\[(\w+)\]")

_INDEX = "index"


def strip_extension(file: str) -> str:
    """Remove the last ``.``-delimited suffix of the final path component."""
    suffix = PurePosixPath(file).suffix
    if not suffix:
        return file
    return file[: -len(suffix)]


def parse_segment(part: str) -> Segment:
    """Classify one path component."""
    if match := _CATCH_ALL_RE.fullmatch(part):
        return Segment(SegmentKind.CATCH_ALL, name=match.group(1))
    if match := _OPTIONAL_RE.fullmatch(part):
        return Segment(SegmentKind.OPTIONAL, name=match.group(1))
    if match := _DYNAMIC_RE.fullmatch(part):
        return Segment(SegmentKind.DYNAMIC, name=match.group(1))
    return Segment(SegmentKind.STATIC, text=part)


def format_pattern(segments: tuple[Segment, ...]) -> str:
    """Render segments back into the canonical ``/a/[b]`` form."""
    if not segments:
        return "/"
    return "/" + "/".join(str(seg) for seg in segments)


def parse_route_path(file: str | PurePosixPath, root_dir: str | Path | None = None) -> RoutePattern:
    """Parse a file path, relative to the route root, into a RoutePattern.

    Never raises on a relative path: malformed bracket syntax becomes a
    static segment. Combinations the matcher cannot resolve are rejected
    later, when the table is built.

    Args:
        file: Path of the route file relative to the root directory.
            Backslashes are treated as separators.
        root_dir: Absolute root directory, used to compute ``abs_path``.
            When omitted, ``abs_path`` is ``file`` itself.
    """
    rel = str(file).replace("\\", "/")
    parts = [p for p in strip_extension(rel).split("/") if p]

    if parts and parts[-1] == _INDEX:
        parts.pop()

    segments = tuple(parse_segment(part) for part in parts)

    static_count = 0
    dynamic_count = 0
    has_catch_all = False
    raw_length = 0
    base_length = 0
    in_base = True
    for seg in segments:
        if seg.kind is SegmentKind.STATIC:
            static_count += 1
            raw_length += len(seg.text)
            if in_base:
                base_length += 1
            continue
        in_base = False
        if seg.kind is SegmentKind.CATCH_ALL:
            has_catch_all = True
        else:
            dynamic_count += 1

    abs_path = Path(root_dir, rel) if root_dir is not None else Path(rel)

    return RoutePattern(
        file=rel,
        abs_path=abs_path,
        segments=segments,
        pattern=format_pattern(segments),
        static_count=static_count,
        dynamic_count=dynamic_count,
        param_count=len(segments) - static_count,
        has_catch_all=has_catch_all,
        base_length=base_length,
        raw_length=raw_length,
    )
