"""fsrouter exception hierarchy.

Shared across discovery, the route table, the dispatcher, handler
loading, and the ASGI handler so every module raises and catches the
same types.

Configuration errors abort startup.  ``HTTPError`` and ``HandlerError``
are request-level and never escape the request that raised them.
"""

from dataclasses import dataclass
from pathlib import Path


class FsRouterError(Exception):
    """Base for all fsrouter-specific errors."""


class ConfigurationError(FsRouterError):
    """Raised when the router cannot be built from its configuration.

    Raised while constructing ``FsRouter``; no partial table is served.
    """


class RootDirNotFound(ConfigurationError):  # noqa: N818
    """The root directory does not exist or is not a directory."""

    def __init__(self, root_dir: str | Path) -> None:
        self.root_dir = str(root_dir)
        super().__init__(f"directory {self.root_dir} could not be found")


class RootDirRelative(ConfigurationError):  # noqa: N818
    """The root directory was given as a relative path."""

    def __init__(self, root_dir: str | Path) -> None:
        self.root_dir = str(root_dir)
        super().__init__(
            f"directory {self.root_dir} is a relative path - please provide an "
            "absolute path, e.g. Path(__file__).parent / 'pages'"
        )


class NoRoutesDiscovered(ConfigurationError):  # noqa: N818
    """The directory walk yielded zero eligible files."""

    def __init__(self, root_dir: str | Path | None = None) -> None:
        self.root_dir = str(root_dir) if root_dir is not None else None
        where = f"directory {self.root_dir}" if self.root_dir else "route set"
        super().__init__(f"{where} is empty - 0 routes are being served")


class InvalidRoutePattern(ConfigurationError):
    """A file name derives a pattern the matcher cannot resolve predictably."""

    def __init__(self, file: str, reason: str) -> None:
        self.file = file
        self.reason = reason
        super().__init__(f"invalid route file {file!r}: {reason}")


class DuplicateRoute(ConfigurationError):
    """Two or more files derive the same route, so all but one are unreachable."""

    def __init__(self, pattern: str, files: tuple[str, ...]) -> None:
        self.pattern = pattern
        self.files = files
        listed = ", ".join(files)
        super().__init__(f"route {pattern} is defined by more than one file: {listed}")


@dataclass(frozen=True, slots=True)
class HTTPError(FsRouterError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher or handlers. The ASGI handler catches these
    and turns them into a response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route pattern matched the request path."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — the route file exists but exports no handler for this method."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class HandlerError(FsRouterError):
    """Base for request-level handler failures. Always answered with a 500."""


class HandlerLoadError(HandlerError):
    """The route file could not be loaded (import error, unreadable file)."""

    def __init__(self, file: str, cause: BaseException | None = None) -> None:
        self.file = file
        msg = f"could not load handler from {file}"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)


class HandlerContractError(HandlerError):
    """The route file loaded but does not honour the handler contract."""

    def __init__(self, file: str, reason: str) -> None:
        self.file = file
        self.reason = reason
        super().__init__(f"{file}: {reason}")
