"""Immutable HTTP request.

Frozen metadata built from the ASGI scope. The routing endpoint only
serves reads, so the request body is never consumed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsrouting.http.headers import Headers
from jsrouting.http.query import QueryParams

_DEFAULT_PORTS = {"http": 80, "https": 443}


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``scheme``, ``server`` and ``root_path`` come straight from the ASGI
    scope; ``host`` and ``port`` prefer the ``Host`` header, the way a
    reverse proxy presents the public name of the site.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    path_params: dict[str, str] = field(default_factory=dict)
    scheme: str = "http"
    server: tuple[str, int] | None = None
    root_path: str = ""

    # -- Computed properties --

    @property
    def host(self) -> str:
        """Host name without port, from ``Host`` or the server address."""
        header = self.headers.get("host")
        if header:
            name, _, _ = _split_host(header)
            return name
        if self.server:
            return self.server[0]
        return ""

    @property
    def port(self) -> int:
        """Port the client addressed, falling back to the scheme default."""
        header = self.headers.get("host")
        if header:
            _, _, port = _split_host(header)
            if port is not None:
                return port
            return _DEFAULT_PORTS.get(self.scheme, 80)
        if self.server:
            return self.server[1]
        return _DEFAULT_PORTS.get(self.scheme, 80)

    @property
    def route_path(self) -> str:
        """Path below the mount point.

        Some servers repeat ``root_path`` at the front of ``path`` and some
        do not; both forms give the same result.
        """
        root = self.root_path.rstrip("/")
        if root and (self.path == root or self.path.startswith(root + "/")):
            return self.path[len(root) :] or "/"
        return self.path

    def param(self, name: str, default: str | None = None) -> str | None:
        """Look up *name* in path parameters, then in the query string."""
        if name in self.path_params:
            return self.path_params[name]
        return self.query.get(name, default)

    # -- Factory --

    @classmethod
    def from_asgi(
        cls,
        scope: dict[str, Any],
        path_params: dict[str, str] | None = None,
    ) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            path_params=path_params or {},
            scheme=scope.get("scheme", "http"),
            server=tuple(server) if server else None,
            root_path=scope.get("root_path", ""),
        )


def _split_host(value: str) -> tuple[str, str, int | None]:
    """Split a ``Host`` header into ``(name, sep, port)``.

    Handles bracketed IPv6 literals (``[::1]:8080``).
    """
    if value.startswith("["):
        end = value.find("]")
        if end != -1:
            name = value[: end + 1]
            rest = value[end + 1 :]
            if rest.startswith(":") and rest[1:].isdigit():
                return name, ":", int(rest[1:])
            return name, "", None
    name, sep, port = value.rpartition(":")
    if sep and port.isdigit():
        return name, sep, int(port)
    return value, "", None
