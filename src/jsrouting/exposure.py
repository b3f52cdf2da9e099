"""Route exposure — which routes a client group may see.

Exposure is opt-in: a route reaches the client only when the
``routes_to_expose`` section names it, either for every group (``true``)
or for a list of groups.
"""

import logging
from collections.abc import Iterable, Mapping

from jsrouting.routing.route import Route
from jsrouting.sources import ExposureConfig

logger = logging.getLogger("jsrouting.exposure")


def is_exposed(entry: object, group: str) -> bool:
    """Whether one ``routes_to_expose`` value admits *group*.

    ``True`` admits every group (including ``""``). A list, tuple or set
    admits its members. Anything else (``False``, a bare string, a
    mapping, ``None``) admits nobody.
    """
    if entry is True:
        return True
    if isinstance(entry, (list, tuple, set, frozenset)):
        return group in entry
    return False


def exposed_routes(
    routes: Mapping[str, Route] | Iterable[tuple[str, Route]],
    config: ExposureConfig,
    group: str,
) -> dict[str, Route]:
    """Build the exposed route set for *group*.

    Iterates *routes* in their given (registration) order, so the result
    is stable for identical input.
    """
    items = routes.items() if isinstance(routes, Mapping) else routes
    to_expose = config.routes_to_expose
    exposed: dict[str, Route] = {}
    for name, route in items:
        if name in to_expose and is_exposed(to_expose[name], group):
            exposed[name] = route
    logger.debug("group %r: %d route(s) exposed", group, len(exposed))
    return exposed
