"""Route, RouteMatch and RouterContext frozen dataclasses."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jsrouting.http.request import Request


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/users``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``name`` is the identifier clients generate URLs with. An empty
    ``methods`` set means any method, as does an empty ``schemes`` set.

    ``options`` is opaque to this package. A legacy ``expose`` option may
    appear in it; exposure is decided by configuration only.
    """

    path: str
    name: str | None = None
    methods: frozenset[str] = frozenset()
    handler: Callable[..., Any] | None = None
    defaults: Mapping[str, Any] = field(default_factory=dict)
    requirements: Mapping[str, str] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)
    host: str = ""
    schemes: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]


@dataclass(frozen=True, slots=True)
class RouterContext:
    """Where the router believes it is being served from.

    Holds the pieces needed to build absolute URLs: scheme, host, the
    configured port for each scheme, and the base URL the application
    is mounted under.
    """

    scheme: str = "http"
    host: str = "localhost"
    http_port: int = 80
    https_port: int = 443
    base_url: str = ""

    def with_request(self, request: Request) -> RouterContext:
        """Return a copy describing how *request* reached the server.

        Only the port of the request's own scheme is taken from the
        request; the other scheme keeps its configured port.
        """
        scheme = request.scheme
        port = request.port
        return replace(
            self,
            scheme=scheme,
            host=request.host or self.host,
            http_port=port if scheme == "http" else self.http_port,
            https_port=port if scheme == "https" else self.https_port,
            base_url=request.root_path.rstrip("/"),
        )
