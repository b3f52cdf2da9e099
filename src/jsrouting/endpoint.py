"""The routing endpoint — serves exposed routes to client code.

Composes exposure, context, serialization, JSONP and cache resolution
into one ASGI application::

    from jsrouting import RoutingEndpoint, YamlConfigSource

    endpoint = RoutingEndpoint(router, YamlConfigSource("config/js_routing.yml"))

    # GET /js/routing                 -> group "default"
    # GET /js/routing/staff           -> group "staff"
    # GET /js/routing?callback=cb     -> /**/cb({...});
"""

import logging

from jsrouting._internal.asgi import Receive, Scope, Send
from jsrouting.cache import resolve_cache
from jsrouting.config import EndpointConfig
from jsrouting.context import LocalePrefixStrategy, RequestContext, resolve_context
from jsrouting.exposure import exposed_routes
from jsrouting.http.request import Request
from jsrouting.http.response import Response
from jsrouting.jsonp import JsonpCallbackValidator, wrap
from jsrouting.routing.route import Route, RouterContext
from jsrouting.routing.router import Router
from jsrouting.serializer import JsonSerializer, RoutesResponse, Serializer
from jsrouting.server.handler import handle_lifespan, handle_request
from jsrouting.sources import ConfigSource, ExposureConfig

logger = logging.getLogger("jsrouting.endpoint")

_READ_METHODS = frozenset({"GET", "HEAD"})


class RoutingEndpoint:
    """ASGI application exposing a router's routes to clients.

    *router* is anything with ``route_collection()`` and
    ``get_context()`` (the bundled ``Router`` qualifies). The exposure
    document is loaded from *config_source* once per request.
    """

    __slots__ = (
        "_dispatch",
        "config",
        "config_source",
        "locale_prefix",
        "router",
        "serializer",
        "validator",
    )

    def __init__(
        self,
        router: Router,
        config_source: ConfigSource,
        *,
        config: EndpointConfig | None = None,
        serializer: Serializer | None = None,
        locale_prefix: LocalePrefixStrategy | None = None,
        validator: JsonpCallbackValidator | None = None,
    ) -> None:
        self.router = router
        self.config_source = config_source
        self.config = config or EndpointConfig()
        self.serializer = serializer or JsonSerializer()
        self.locale_prefix = locale_prefix
        self.validator = validator or JsonpCallbackValidator()
        self._dispatch = self._build_dispatch()

    def _build_dispatch(self) -> Router:
        base = self.config.path.rstrip("/")
        dispatch = Router()
        dispatch.add(Route(base or "/", name="jsrouting_index", methods=_READ_METHODS))
        dispatch.add(
            Route(f"{base}/{{{self.config.group_param}}}", name="jsrouting_group", methods=_READ_METHODS)
        )
        dispatch.compile()
        return dispatch

    # -- Request parameters --

    def group_for(self, request: Request) -> str:
        group = request.param(self.config.group_param)
        return self.config.default_group if group is None else group

    def locale_for(self, request: Request) -> str:
        return request.param(self.config.locale_param) or self.config.default_locale

    def router_context_for(self, request: Request) -> RouterContext:
        context = self.router.get_context()
        if self.config.context_from_request:
            return context.with_request(request)
        return context

    # -- Pipeline --

    def request_context(self, request: Request) -> RequestContext:
        """Absolute-URL context for *request*."""
        return self.context_for(self.router_context_for(request), self.locale_for(request))

    def context_for(self, router_context: RouterContext, locale: str) -> RequestContext:
        cfg = self.config
        return resolve_context(
            router_context,
            locale,
            environment=cfg.environment,
            production_environments=cfg.production_environments,
            suppress_base_url_outside_prod=cfg.suppress_base_url_outside_prod,
            locale_prefix=self.locale_prefix,
        )

    def build_payload(self, group: str, context: RequestContext, exposure: ExposureConfig) -> RoutesResponse:
        return RoutesResponse(
            base_url=context.base_url,
            routes=exposed_routes(self.router.route_collection(), exposure, group),
            prefix=context.prefix,
            host=context.host,
            scheme=context.scheme,
            locale=context.locale,
        )

    def render(self, request: Request) -> Response:
        """Run the pipeline for one request.

        Raises ``InvalidCallback`` for a bad JSONP callback and
        ``ConfigurationError`` for a malformed exposure document.
        """
        group = self.group_for(request)
        exposure = ExposureConfig.load(self.config_source, self.config.config_key)

        payload = self.build_payload(group, self.request_context(request), exposure)
        content = self.serializer.serialize(payload, self.config.format)
        content = wrap(content, request.query.get(self.config.callback_param), self.validator)

        response = Response(body=content, content_type=self.config.content_type)
        policy = resolve_cache(exposure, group)
        if policy is not None:
            response = response.with_headers(policy.headers())

        logger.debug("served %d route(s) for group %r", len(payload.routes), group)
        return response

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return
        await handle_request(
            scope,
            send,
            router=self._dispatch,
            render=self.render,
            debug=self.config.debug,
        )
