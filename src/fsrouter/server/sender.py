"""Response to ASGI ``http.response.start`` and ``http.response.body``."""

from fsrouter._internal.asgi import Send
from fsrouter.http.response import Response

# Besides 1xx, these statuses never carry a body
_EMPTY_STATUSES = frozenset({204, 304})


def encode_headers(response: Response, content_length: int) -> list[tuple[bytes, bytes]]:
    """Latin-1 header pairs with lower-cased names: content-type, extras, content-length."""
    pairs = [
        ("content-type", response.content_type),
        *response.headers,
        ("content-length", str(content_length)),
    ]
    return [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in pairs]


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send *response* as one start message and one body message.

    With ``head=True`` the headers describe the full body but none is sent.
    """
    empty = response.status < 200 or response.status in _EMPTY_STATUSES
    body = b"" if empty else response.body_bytes
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": encode_headers(response, len(body)),
        }
    )
    await send({"type": "http.response.body", "body": b"" if head else body})
