"""Turn ``module:attribute`` into a RoutingEndpoint."""

import importlib

from jsrouting.endpoint import RoutingEndpoint

DEFAULT_ATTRIBUTE = "endpoint"


def resolve_endpoint(import_string: str) -> RoutingEndpoint:
    """Import the endpoint named by *import_string*.

    The attribute may be the endpoint itself or a zero-argument factory
    returning one.

    Raises:
        ModuleNotFoundError: The module does not exist.
        AttributeError: The module has no such attribute.
        TypeError: The attribute is neither an endpoint nor a working factory.
    """
    module_name, _, attribute = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attribute or DEFAULT_ATTRIBUTE)

    if not isinstance(target, RoutingEndpoint) and callable(target):
        try:
            target = target()
        except Exception as exc:
            raise TypeError(f"calling {import_string!r} failed: {exc}") from exc

    if not isinstance(target, RoutingEndpoint):
        raise TypeError(f"{import_string!r} is a {type(target).__name__}, not a RoutingEndpoint")
    return target
