"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(debug=True, port=3000, extensions=(".py",))
    """

    # Discovery: files with these suffixes become routes
    extensions: tuple[str, ...] = (".py", ".html", ".md")

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Serve an empty root (every request 404s) instead of refusing to start.
    # The condition is still logged as a warning.
    allow_empty: bool = False

    # Load every handler while building the router instead of on first match
    preload_handlers: bool = False

    # Logging
    log_level: str = "info"

    # Markdown routes
    markdown_highlight: bool = False
