"""ASGI handler — translates ASGI scope/messages to jsrouting types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, matches the endpoint's own paths, renders,
and sends the Response back through ASGI send().
"""

from collections.abc import Callable
from dataclasses import replace

from jsrouting._internal.asgi import Receive, Scope, Send
from jsrouting.errors import HTTPError
from jsrouting.http.request import Request
from jsrouting.http.response import Response
from jsrouting.routing.router import Router
from jsrouting.server.errors import handle_http_error, handle_internal_error
from jsrouting.server.sender import send_response


async def handle_request(
    scope: Scope,
    send: Send,
    *,
    router: Router,
    render: Callable[[Request], Response],
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the endpoint pipeline."""
    request = Request.from_asgi(scope)

    try:
        match = router.match(request.method, request.route_path)
        response = render(replace(request, path_params=match.path_params))
    except HTTPError as exc:
        response = handle_http_error(exc, request, debug=debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=debug)

    await send_response(response, send, head=request.method == "HEAD")


async def handle_lifespan(receive: Receive, send: Send) -> None:
    """Acknowledge the ASGI lifespan protocol.

    The endpoint holds no resources, so startup and shutdown complete
    immediately.
    """
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return
