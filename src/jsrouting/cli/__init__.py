"""jsrouting CLI — inspect what an endpoint exposes.

Installed as the ``jsrouting`` console script.
"""

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsrouting",
        description="jsrouting — expose named server routes to client code.",
    )
    commands = parser.add_subparsers(dest="command")

    routes = commands.add_parser("routes", help="List the routes exposed to a group")
    routes.add_argument("endpoint", help="Import string, module:attribute (default attribute: endpoint)")
    routes.add_argument("--group", default=None, help="Client group (default: the endpoint's default)")
    routes.add_argument("--locale", default=None, help="Locale for the route-name prefix")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``jsrouting`` command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from jsrouting.cli._routes import run_routes

        run_routes(args)
