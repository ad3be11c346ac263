"""Error handling pipeline for routed requests.

Maps HTTPError exceptions and unexpected failures to Responses. The
not-found response is the caller's to choose; everything else has a
plain-text default.
"""

import logging
import traceback
from collections.abc import Callable
from typing import Any

from fsrouter._internal.invoke import invoke
from fsrouter.errors import HTTPError
from fsrouter.http.request import Request
from fsrouter.http.response import Response
from fsrouter.server.negotiation import negotiate

logger = logging.getLogger("fsrouter.server")

# Called with the request when no route matched
NotFoundHandler = Callable[[Request], Any]


def default_not_found(request: Request) -> Response:
    return Response.text_plain("Not found", status=404)


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    not_found: NotFoundHandler,
    debug: bool,
) -> Response:
    """Map an HTTPError to a Response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    if exc.status == 404:
        result = await invoke(not_found, request)
        response = negotiate(result, file="<not_found>")
        # Preserve the 404 unless the hook chose its own non-200 status
        if response.status == 200:
            response = response.with_status(404)
        return response

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response.text_plain(detail, status=exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Answer an unexpected exception with a 500."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        body = "".join(traceback.format_exception(exc))
        return Response.text_plain(body, status=500)
    return Response.text_plain("Internal Server Error", status=500)
