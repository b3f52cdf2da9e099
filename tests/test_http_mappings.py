"""Tests for jsrouting.http.headers and jsrouting.http.query."""

from jsrouting.http.headers import Headers
from jsrouting.http.query import QueryParams


class TestHeaders:
    def test_case_insensitive(self) -> None:
        h = Headers(((b"Content-Type", b"text/plain"),))
        assert h["content-type"] == "text/plain"
        assert h["CONTENT-TYPE"] == "text/plain"
        assert "Content-Type" in h

    def test_first_value_wins(self) -> None:
        h = Headers(((b"x-a", b"1"), (b"X-A", b"2")))
        assert h["x-a"] == "1"
        assert len(h) == 1

    def test_get_default(self) -> None:
        assert Headers().get("host") is None
        assert Headers().get("host", "fallback") == "fallback"

    def test_non_string_key(self) -> None:
        assert 1 not in Headers(((b"a", b"b"),))


class TestQueryParams:
    def test_first_value(self) -> None:
        q = QueryParams(b"group=a&group=b")
        assert q["group"] == "a"

    def test_blank_values_kept(self) -> None:
        q = QueryParams(b"callback=")
        assert "callback" in q
        assert q.get("callback") == ""

    def test_missing(self) -> None:
        assert QueryParams().get("callback") is None
        assert len(QueryParams()) == 0
