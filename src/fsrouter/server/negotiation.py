"""Content negotiation — converts handler return values to Responses.

Dispatch order:

1. ``Response``            -> pass through
2. ``str``                 -> 200, text/html
3. ``bytes``               -> 200, application/octet-stream
4. ``dict`` / ``list``     -> 200, application/json
5. ``(value, int)``        -> negotiate value, override status
6. ``(value, int, dict)``  -> negotiate value, override status + headers

Anything else breaks the handler contract.
"""

from typing import Any

from fsrouter.errors import HandlerContractError
from fsrouter.http.response import Response


def negotiate(value: Any, *, file: str) -> Response:
    """Convert a handler's return value for the route defined in *file*.

    Raises:
        HandlerContractError: The value has no response form.
    """
    match value:
        case Response():
            return value
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case dict() | list():
            return Response.json(value)
        case (inner, int() as status):
            return negotiate(inner, file=file).with_status(status)
        case (inner, int() as status, dict() as headers):
            return negotiate(inner, file=file).with_status(status).with_headers(headers)
        case None:
            raise HandlerContractError(file, "handler returned None")
        case _:
            msg = f"handler returned unsupported type {type(value).__name__}"
            raise HandlerContractError(file, msg)
