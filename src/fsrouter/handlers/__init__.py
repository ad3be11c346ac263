"""Route handlers — loading route files and calling what they export.

The router resolves handlers through ``HandlerRegistry.resolve(route)``
only after a request matched, unless ``RouterConfig.preload_handlers``
asks for everything to be loaded up front.
"""

from fsrouter.handlers.module import HTTP_METHODS, MethodHandler, create_route, load_module_handler
from fsrouter.handlers.registry import FileHandlerRegistry, Handler, HandlerRegistry, Loader
from fsrouter.handlers.static import load_static_handler

__all__ = [
    "HTTP_METHODS",
    "FileHandlerRegistry",
    "Handler",
    "HandlerRegistry",
    "Loader",
    "MethodHandler",
    "create_route",
    "load_module_handler",
    "load_static_handler",
]
