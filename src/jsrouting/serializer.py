"""Routes payload and its serialization.

``RoutesResponse`` is what clients receive. Every field is always
present so the shape is the same for every group and locale::

    {
      "base_url": "",
      "routes": {"home": {"tokens": [["text", "/"]], "defaults": {}, ...}},
      "prefix": "",
      "host": "example.com",
      "scheme": "https",
      "locale": "en"
    }
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from jsrouting.errors import ConfigurationError
from jsrouting.routing.route import Route
from jsrouting.routing.router import compile_tokens, path_variables


@runtime_checkable
class Serializer(Protocol):
    """Anything with ``serialize(payload, format) -> str``."""

    def serialize(self, payload: Any, format: str = "json") -> str: ...


def route_defaults(route: Route) -> dict[str, Any]:
    """Defaults restricted to the route's own placeholders.

    Controller or handler defaults that are not URL parameters are
    server-side details and stay out of the payload.
    """
    variables = set(path_variables(route.path)) | set(path_variables(route.host))
    return {key: value for key, value in route.defaults.items() if key in variables}


def route_to_dict(route: Route) -> dict[str, Any]:
    """Client view of one route."""
    return {
        "tokens": compile_tokens(route.path, requirements=route.requirements),
        "defaults": route_defaults(route),
        "requirements": dict(route.requirements),
        "hosttokens": compile_tokens(route.host, requirements=route.requirements, host=True) if route.host else [],
        "methods": sorted(route.methods),
        "schemes": sorted(route.schemes),
    }


@dataclass(frozen=True, slots=True)
class RoutesResponse:
    """The routing payload for one request."""

    base_url: str = ""
    routes: Mapping[str, Route] = field(default_factory=dict)
    prefix: str = ""
    host: str = ""
    scheme: str = ""
    locale: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_url": self.base_url,
            "routes": {name: route_to_dict(route) for name, route in self.routes.items()},
            "prefix": self.prefix,
            "host": self.host,
            "scheme": self.scheme,
            "locale": self.locale,
        }


class JsonSerializer:
    """Compact JSON; the only format the endpoint ships with.

    Payloads exposing ``to_dict()`` are converted first; plain mappings
    and lists are serialized as they are.
    """

    __slots__ = ()

    formats = frozenset({"json"})

    def serialize(self, payload: Any, format: str = "json") -> str:  # noqa: A002
        if format not in self.formats:
            msg = f"Unsupported serialization format {format!r} (supported: {', '.join(sorted(self.formats))})"
            raise ConfigurationError(msg)
        data = payload.to_dict() if hasattr(payload, "to_dict") else payload
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
