"""``jsrouting routes`` — list the routes a group would receive."""

import argparse
import sys
from typing import NoReturn

from jsrouting.cli._resolve import resolve_endpoint
from jsrouting.errors import ConfigurationError
from jsrouting.exposure import exposed_routes
from jsrouting.sources import ExposureConfig


def _fail(exc: Exception) -> NoReturn:
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


def run_routes(args: argparse.Namespace) -> None:
    """Print the URL context, then NAME, METHOD and PATH per exposed route."""
    try:
        endpoint = resolve_endpoint(args.endpoint)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        _fail(exc)

    config = endpoint.config
    group = config.default_group if args.group is None else args.group
    try:
        exposure = ExposureConfig.load(endpoint.config_source, config.config_key)
    except ConfigurationError as exc:
        _fail(exc)

    locale = args.locale or config.default_locale
    context = endpoint.context_for(endpoint.router.get_context(), locale)
    print(f"Group:  {group!r}")
    print(f"Base:   {context.scheme}://{context.host}{context.base_url}")
    print(f"Locale: {context.locale} (prefix {context.prefix!r})")
    print()

    routes = exposed_routes(endpoint.router.route_collection(), exposure, group)
    if not routes:
        print(f"No routes exposed to group {group!r}.")
        return

    rows = [(name, ", ".join(sorted(r.methods)) or "ANY", r.path) for name, r in routes.items()]
    widths = [max(len(title), *(len(row[i]) for row in rows)) for i, title in enumerate(("NAME", "METHOD"))]
    line = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{}}"
    print(line.format("NAME", "METHOD", "PATH"))
    print("-" * min(sum(widths) + 4 + max(len(row[2]) for row in rows), 80))
    for row in rows:
        print(line.format(*row))
