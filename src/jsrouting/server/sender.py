"""Write a Response to an ASGI ``send`` callable."""

from jsrouting._internal.asgi import Send
from jsrouting.http.response import Response

# Statuses that never carry a message body (RFC 9110)
_BODYLESS = frozenset({204, 304})


def _encode(value: str) -> bytes:
    return value.encode("latin-1")


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Emit ``http.response.start`` and a single ``http.response.body``.

    A ``HEAD`` response advertises the length of the body a ``GET``
    would carry and sends none.
    """
    status = response.status
    body = b"" if status < 200 or status in _BODYLESS else response.body_bytes

    headers = [(b"content-type", _encode(response.content_type))]
    headers.extend((_encode(name.lower()), _encode(value)) for name, value in response.headers)
    headers.append((b"content-length", _encode(str(len(body)))))

    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})
