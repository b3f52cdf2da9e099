"""jsrouting — expose a server's named routes to client-side code.

Serves the routes a client group may see, with the scheme, host and
base URL needed to build absolute URLs, as JSON or JSONP.

Basic usage::

    from jsrouting import Route, Router, RoutingEndpoint, YamlConfigSource

    router = Router()
    router.add(Route("/", name="home"))
    router.add(Route("/blog/{slug}", name="blog_show"))
    router.compile()

    app = RoutingEndpoint(router, YamlConfigSource("js_routing.yml"))

Serve ``app`` with any ASGI server.
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "CachePolicy",
    "ConfigurationError",
    "EndpointConfig",
    "ExposureConfig",
    "HTTPError",
    "I18nLocalePrefix",
    "InvalidCallback",
    "JsRoutingError",
    "JsonSerializer",
    "MappingConfigSource",
    "Request",
    "RequestContext",
    "Response",
    "Route",
    "Router",
    "RouterContext",
    "RoutesResponse",
    "RoutingEndpoint",
    "YamlConfigSource",
    "exposed_routes",
    "resolve_cache",
    "resolve_context",
    "wrap",
]

# Public name -> defining module. Keeps ``import jsrouting`` cheap.
_LAZY_IMPORTS: dict[str, str] = {
    "CachePolicy": "jsrouting.cache",
    "ConfigurationError": "jsrouting.errors",
    "EndpointConfig": "jsrouting.config",
    "ExposureConfig": "jsrouting.sources",
    "HTTPError": "jsrouting.errors",
    "I18nLocalePrefix": "jsrouting.context",
    "InvalidCallback": "jsrouting.errors",
    "JsRoutingError": "jsrouting.errors",
    "JsonSerializer": "jsrouting.serializer",
    "MappingConfigSource": "jsrouting.sources",
    "Request": "jsrouting.http.request",
    "RequestContext": "jsrouting.context",
    "Response": "jsrouting.http.response",
    "Route": "jsrouting.routing.route",
    "Router": "jsrouting.routing.router",
    "RouterContext": "jsrouting.routing.route",
    "RoutesResponse": "jsrouting.serializer",
    "RoutingEndpoint": "jsrouting.endpoint",
    "YamlConfigSource": "jsrouting.sources",
    "exposed_routes": "jsrouting.exposure",
    "resolve_cache": "jsrouting.cache",
    "resolve_context": "jsrouting.context",
    "wrap": "jsrouting.jsonp",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_path), name)
