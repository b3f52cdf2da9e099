"""Tests for jsrouting.http.response."""

import pytest

from jsrouting.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/plain; charset=utf-8"
        assert r.headers == ()

    def test_with_headers_accepts_pairs_and_mappings(self) -> None:
        assert Response().with_headers((("A", "1"),)).headers == (("A", "1"),)
        assert Response().with_headers({"B": "2"}).headers == (("B", "2"),)

    def test_with_headers_appends(self) -> None:
        r = Response().with_headers({"Vary": "Accept"}).with_headers({"Vary": "Cookie"})
        assert r.headers == (("Vary", "Accept"), ("Vary", "Cookie"))

    def test_with_headers_returns_new_object(self) -> None:
        r1 = Response("hello")
        r2 = r1.with_headers({"ETag": '"v1"'})
        assert r1.headers == ()
        assert r2.body == "hello"

    def test_header_lookup(self) -> None:
        r = Response(headers=(("Cache-Control", "public"),))
        assert r.header("cache-control") == "public"
        assert r.header("etag") is None
        assert r.header("etag", "-") == "-"

    def test_body_conversions(self) -> None:
        assert Response(body="héllo").body_bytes == "héllo".encode()
        assert Response(body=b"hello").text == "hello"

    def test_frozen(self) -> None:
        r = Response()
        with pytest.raises(AttributeError):
            r.status = 404  # type: ignore[misc]
