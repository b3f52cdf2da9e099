"""Tests for jsrouting.http.request — frozen Request built from ASGI."""

import pytest

from jsrouting.http.request import Request


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 8000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        req = Request.from_asgi(_make_scope(path="/js/routing", scheme="https", root_path="/app"))

        assert req.method == "GET"
        assert req.path == "/js/routing"
        assert req.scheme == "https"
        assert req.root_path == "/app"
        assert req.server == ("localhost", 8000)

    def test_scheme_defaults_to_http(self) -> None:
        scope = _make_scope()
        del scope["scheme"]
        assert Request.from_asgi(scope).scheme == "http"

    def test_path_params(self) -> None:
        req = Request.from_asgi(_make_scope(), path_params={"group": "staff"})
        assert req.path_params == {"group": "staff"}

    def test_frozen(self) -> None:
        req = Request.from_asgi(_make_scope())
        with pytest.raises(AttributeError):
            req.method = "POST"  # type: ignore[misc]

    def test_missing_optional_keys(self) -> None:
        req = Request.from_asgi({"method": "GET", "path": "/"})
        assert req.server is None
        assert req.root_path == ""
        assert len(req.query) == 0


class TestRoutePath:
    def test_without_root_path(self) -> None:
        assert Request.from_asgi(_make_scope(path="/js/routing")).route_path == "/js/routing"

    def test_root_path_repeated_in_path(self) -> None:
        req = Request.from_asgi(_make_scope(path="/app/js/routing", root_path="/app"))
        assert req.route_path == "/js/routing"

    def test_root_path_not_repeated_in_path(self) -> None:
        req = Request.from_asgi(_make_scope(path="/js/routing", root_path="/app"))
        assert req.route_path == "/js/routing"

    def test_mount_point_itself(self) -> None:
        assert Request.from_asgi(_make_scope(path="/app", root_path="/app/")).route_path == "/"

    def test_prefix_must_end_at_segment(self) -> None:
        req = Request.from_asgi(_make_scope(path="/application/js", root_path="/app"))
        assert req.route_path == "/application/js"


class TestHostAndPort:
    def test_host_header(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[(b"host", b"example.com")]))
        assert req.host == "example.com"
        assert req.port == 80

    def test_host_header_with_port(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[(b"host", b"example.com:8080")]))
        assert req.host == "example.com"
        assert req.port == 8080

    def test_https_default_port(self) -> None:
        req = Request.from_asgi(_make_scope(scheme="https", headers=[(b"host", b"example.com")]))
        assert req.port == 443

    def test_ipv6_literal(self) -> None:
        req = Request.from_asgi(_make_scope(headers=[(b"host", b"[::1]:8080")]))
        assert req.host == "[::1]"
        assert req.port == 8080

    def test_no_host_header_uses_server(self) -> None:
        req = Request.from_asgi(_make_scope())
        assert req.host == "localhost"
        assert req.port == 8000

    def test_no_host_no_server(self) -> None:
        req = Request.from_asgi(_make_scope(server=None))
        assert req.host == ""
        assert req.port == 80


class TestParam:
    def test_path_param_wins(self) -> None:
        req = Request.from_asgi(_make_scope(query_string=b"group=query"), path_params={"group": "path"})
        assert req.param("group") == "path"

    def test_query_fallback(self) -> None:
        req = Request.from_asgi(_make_scope(query_string=b"group=query"))
        assert req.param("group") == "query"

    def test_default(self) -> None:
        req = Request.from_asgi(_make_scope())
        assert req.param("group", "default") == "default"
