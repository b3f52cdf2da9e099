"""Absolute-URL context for client-side URL generation.

Clients building absolute URLs need the scheme, the host (with the port
when it is not the scheme's default), the base URL the application is
mounted under, and the locale prefix internationalized routes are
registered with. Everything here is a pure function of its arguments.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from jsrouting.routing.route import RouterContext

DEFAULT_PORTS: dict[str, int] = {"http": 80, "https": 443}

# Marker i18n routers put between the locale and the route name
ROUTING_PREFIX = "__RG__"


@runtime_checkable
class LocalePrefixStrategy(Protocol):
    """Computes the route-name prefix for a locale."""

    def prefix(self, locale: str) -> str: ...


class I18nLocalePrefix:
    """Locale-prefixed route names (``en__RG__home``)."""

    __slots__ = ("marker",)

    def __init__(self, marker: str = ROUTING_PREFIX) -> None:
        self.marker = marker

    def prefix(self, locale: str) -> str:
        return f"{locale}{self.marker}"


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Per-request absolute-URL components. Never cached across requests."""

    scheme: str
    host: str
    base_url: str
    prefix: str
    locale: str


def uses_non_standard_port(context: RouterContext) -> bool:
    """Whether the active scheme is served from a non-default port.

    Only the active scheme's port is consulted: an ``http`` context is
    never suffixed because of its ``https_port`` and vice versa.
    """
    if context.scheme == "http":
        return int(context.http_port) != DEFAULT_PORTS["http"]
    if context.scheme == "https":
        return int(context.https_port) != DEFAULT_PORTS["https"]
    return False


def resolve_host(context: RouterContext) -> str:
    """Host, with ``:port`` appended for a non-standard port."""
    if not uses_non_standard_port(context):
        return context.host
    port = context.http_port if context.scheme == "http" else context.https_port
    return f"{context.host}:{port}"


def resolve_base_url(
    context: RouterContext,
    *,
    environment: str,
    production_environments: tuple[str, ...] = ("prod",),
    suppress_outside_prod: bool = True,
) -> str:
    """The router's base URL, or ``""`` when suppressed for this environment."""
    if suppress_outside_prod and environment not in production_environments:
        return ""
    return context.base_url


def resolve_context(
    router_context: RouterContext,
    locale: str,
    *,
    environment: str = "prod",
    production_environments: tuple[str, ...] = ("prod",),
    suppress_base_url_outside_prod: bool = True,
    locale_prefix: LocalePrefixStrategy | None = None,
) -> RequestContext:
    """Derive the absolute-URL context for one request."""
    return RequestContext(
        scheme=router_context.scheme,
        host=resolve_host(router_context),
        base_url=resolve_base_url(
            router_context,
            environment=environment,
            production_environments=production_environments,
            suppress_outside_prod=suppress_base_url_outside_prod,
        ),
        prefix=locale_prefix.prefix(locale) if locale_prefix is not None else "",
        locale=locale,
    )
