"""Endpoint configuration.

EndpointConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups. The exposure document
(``routes_to_expose`` / ``cache``) is not part of it; that comes from a
ConfigSource at request time.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EndpointConfig:
    """Routing endpoint configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = EndpointConfig(environment="dev", debug=True)
    """

    # Mount point; the endpoint also serves ``{path}/{group}``
    path: str = "/js/routing"

    # Request parameters
    default_group: str = "default"
    group_param: str = "group"
    callback_param: str = "callback"
    locale_param: str = "_locale"
    default_locale: str = "en"

    # Serialization
    format: str = "json"
    content_type: str = "application/javascript"

    # Deployment mode
    environment: str = "prod"
    production_environments: tuple[str, ...] = ("prod",)

    # Base URLs computed outside production were cached with unsafe
    # front-controller paths; blank them unless the environment is production.
    suppress_base_url_outside_prod: bool = True

    # Derive scheme/host/port/base URL from the incoming request
    context_from_request: bool = True

    # Top-level key of the exposure document
    config_key: str = "js_routing"

    debug: bool = False
