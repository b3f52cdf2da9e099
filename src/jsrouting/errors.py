"""jsrouting exception hierarchy.

Shared across the resolvers, the endpoint, and the ASGI handler so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class JsRoutingError(Exception):
    """Base for all jsrouting-specific errors."""


class ConfigurationError(JsRoutingError):
    """Raised when endpoint or exposure configuration is malformed.

    Signals an operator mistake (a ``cache`` section that is not a mapping,
    an unknown cache directive, an unsupported format). Surfaces as a 500.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(JsRoutingError):
    """An error that maps directly to an HTTP status code.

    The ASGI handler catches these and renders a plain-text response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """400 — the request is malformed."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class InvalidCallback(BadRequest):  # noqa: N818
    """400 — the JSONP ``callback`` parameter is not a valid JS reference.

    The offending token is deliberately left out of the detail.
    """

    def __init__(self, detail: str = "Invalid JSONP callback value") -> None:
        super().__init__(detail=detail)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no endpoint path matched the request."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — path exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
