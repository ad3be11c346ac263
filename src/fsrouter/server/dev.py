"""Development server: pounce serving a live FsRouter."""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_dirs: tuple[str, ...] = (),
    reload_include: tuple[str, ...] = (".py",),
) -> None:
    """Serve *app* with a single pounce worker until interrupted.

    pounce is imported here so the router itself never depends on it.

    Args:
        app: The ASGI callable, normally an ``FsRouter``.
        host: Bind host address.
        port: Bind port number.
        reload: Restart when route files change.
        reload_dirs: Directories watched besides the working directory,
            normally the route root.
        reload_include: File suffixes whose changes trigger a reload,
            normally the route extensions.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    Server(
        ServerConfig(
            host=host,
            port=port,
            workers=1,
            reload=reload,
            reload_include=reload_include,
            reload_dirs=reload_dirs,
        ),
        app,
    ).run()
