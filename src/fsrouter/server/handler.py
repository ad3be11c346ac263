"""ASGI handler — translates ASGI scope/messages to fsrouter types.

The only component that touches raw HTTP scopes directly. Builds the
Request, dispatches it against the route table, calls the resolved
handler, and sends the Response back through ASGI send().
"""

from fsrouter._internal.asgi import Receive, Scope, Send
from fsrouter._internal.invoke import invoke_handler
from fsrouter.errors import HTTPError, NotFound
from fsrouter.handlers.registry import HandlerRegistry
from fsrouter.http.request import Request
from fsrouter.http.response import Response
from fsrouter.routing.matcher import Dispatcher
from fsrouter.server.errors import NotFoundHandler, handle_http_error, handle_internal_error
from fsrouter.server.negotiation import negotiate
from fsrouter.server.sender import send_response


async def route_request(
    request: Request,
    *,
    dispatcher: Dispatcher | None,
    registry: HandlerRegistry,
) -> Response:
    """Dispatch *request* and run the handler of the matched route.

    Raises ``NotFound`` when no route matches (or the router has no
    routes at all). Handler failures propagate to the caller.
    """
    if dispatcher is None:
        raise NotFound(f"No route matches {request.path!r}")

    match = dispatcher.dispatch(request.path)
    handler = registry.resolve(match.route)
    routed = request.with_path_params(match.params)
    result = await invoke_handler(handler, routed, match.params)
    return negotiate(result, file=match.route.file)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher | None,
    registry: HandlerRegistry,
    not_found: NotFoundHandler,
    debug: bool,
) -> None:
    """Process a single HTTP request.

    Every failure is answered inside this request: ``HTTPError`` maps to
    its status, anything else to a 500.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await route_request(request, dispatcher=dispatcher, registry=registry)
    except HTTPError as exc:
        try:
            response = await handle_http_error(exc, request, not_found, debug)
        except Exception as inner:
            response = handle_internal_error(inner, request, debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send, head=request.method == "HEAD")
