"""Error responses for the routing endpoint.

Client errors become their ``HTTPError`` status with the detail as a
plain-text body. Anything else is logged with its traceback and
reported as a bare 500.
"""

import logging

from jsrouting.errors import HTTPError
from jsrouting.http.request import Request
from jsrouting.http.response import Response

logger = logging.getLogger("jsrouting.server")


def handle_http_error(exc: HTTPError, request: Request, *, debug: bool = False) -> Response:
    logger.debug("%s %s answered %d: %s", request.method, request.path, exc.status, exc.detail)
    if not exc.detail:
        body = f"Error {exc.status}"
    else:
        body = str(exc) if debug else exc.detail
    return Response(body=body, status=exc.status, headers=exc.headers)


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """500 response for an unexpected exception; the exception is logged."""
    logger.exception("500 %s %s", request.method, request.path)
    body = "Internal Server Error"
    if debug:
        body = f"{body}: {type(exc).__name__}: {exc}"
    return Response(body=body, status=500)
