"""Segment, RoutePattern, and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SegmentKind(Enum):
    """How a pattern segment consumes URL components."""

    STATIC = "static"  # blog        - literal text, one component
    DYNAMIC = "dynamic"  # [id]        - one component, bound
    CATCH_ALL = "catch-all"  # [...path]  - one or more components, bound
    OPTIONAL = "optional-dynamic"  # [[lang]]  - zero or one trailing component


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route pattern.

    Static:    ``blog``       (kind=STATIC, text="blog")
    Dynamic:   ``[id]``       (kind=DYNAMIC, name="id")
    Catch-all: ``[...path]``  (kind=CATCH_ALL, name="path")
    Optional:  ``[[lang]]``   (kind=OPTIONAL, name="lang")
    """

    kind: SegmentKind
    text: str = ""
    name: str | None = None

    def __str__(self) -> str:
        if self.kind is SegmentKind.STATIC:
            return self.text
        if self.kind is SegmentKind.CATCH_ALL:
            return f"[...{self.name}]"
        if self.kind is SegmentKind.OPTIONAL:
            return f"[[{self.name}]]"
        return f"[{self.name}]"


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A route pattern derived from one file under the root directory.

    Created once during table construction. The counters are computed by
    the parser so the comparator and the table never re-derive them.

    Attributes:
        file: Path of the source file relative to the root, POSIX separators.
        abs_path: Absolute path of the source file.
        segments: Ordered segments; empty for the root route ``/``.
        pattern: Canonical pattern string, e.g. ``/blog/[id]``.
        static_count: Number of static segments.
        dynamic_count: Number of dynamic and optional-dynamic segments.
        param_count: Number of non-static segments (catch-all included).
        has_catch_all: Whether any segment is a catch-all.
        base_length: Static segments before the first parameter.
        raw_length: Total characters of static segment text.
    """

    file: str
    abs_path: Path
    segments: tuple[Segment, ...]
    pattern: str
    static_count: int
    dynamic_count: int
    param_count: int
    has_catch_all: bool
    base_length: int
    raw_length: int

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def is_exact(self) -> bool:
        """True when the pattern has no parameters and can be looked up directly."""
        return self.param_count == 0

    @property
    def length(self) -> int:
        return len(self.segments)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.name for seg in self.segments if seg.name is not None)

    @property
    def extension(self) -> str:
        return self.abs_path.suffix

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful dispatch.

    ``params`` is built fresh for every request and belongs to it alone.
    """

    route: RoutePattern
    params: dict[str, str]
