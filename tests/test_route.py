"""Tests for jsrouting.routing.route — Route and RouterContext."""

import pytest

from jsrouting.http.headers import Headers
from jsrouting.http.query import QueryParams
from jsrouting.http.request import Request
from jsrouting.routing.route import Route, RouterContext


def _request(*, scheme: str = "http", host: str | None = None, server=("localhost", 8000), root_path: str = ""):
    raw = ((b"host", host.encode("latin-1")),) if host is not None else ()
    return Request(
        method="GET",
        path="/js/routing",
        headers=Headers(raw),
        query=QueryParams(),
        scheme=scheme,
        server=server,
        root_path=root_path,
    )


class TestRoute:
    def test_defaults(self) -> None:
        route = Route("/")
        assert route.name is None
        assert route.methods == frozenset()
        assert route.options == {}
        assert route.host == ""

    def test_frozen(self) -> None:
        route = Route("/")
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]


class TestRouterContextWithRequest:
    def test_http_from_host_header(self) -> None:
        ctx = RouterContext(https_port=8443).with_request(_request(host="example.com:8080"))
        assert ctx.scheme == "http"
        assert ctx.host == "example.com"
        assert ctx.http_port == 8080
        assert ctx.https_port == 8443

    def test_https_default_port(self) -> None:
        ctx = RouterContext(http_port=8000).with_request(_request(scheme="https", host="example.com"))
        assert ctx.https_port == 443
        assert ctx.http_port == 8000

    def test_falls_back_to_server(self) -> None:
        ctx = RouterContext().with_request(_request(server=("10.0.0.1", 9000)))
        assert ctx.host == "10.0.0.1"
        assert ctx.http_port == 9000

    def test_base_url_from_root_path(self) -> None:
        ctx = RouterContext().with_request(_request(host="example.com", root_path="/app/"))
        assert ctx.base_url == "/app"
