"""Invoke helpers — call route handlers uniformly.

Route handlers can be ``def`` or ``async def`` and may take
``(request, params)``, ``(request)`` or no arguments at all. The
sync/async check and the argument count check live here and nowhere else.

Usage::

    from fsrouter._internal.invoke import invoke_handler

    result = await invoke_handler(handler, request, params)
"""

import inspect
from typing import Any


def positional_arity(func: Any) -> int:
    """Number of positional arguments *func* accepts, capped at 2.

    ``*args`` counts as accepting both.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return 2
    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return 2
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return min(count, 2)


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


async def invoke_handler(handler: Any, request: Any, params: dict[str, str]) -> Any:
    """Call a route handler with as many of ``(request, params)`` as it accepts."""
    arity = positional_arity(handler)
    if arity >= 2:
        return await invoke(handler, request, params)
    if arity == 1:
        return await invoke(handler, request)
    return await invoke(handler)
