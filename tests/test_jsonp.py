"""Tests for jsrouting.jsonp — callback validation and wrapping."""

import pytest

from jsrouting.errors import HTTPError, InvalidCallback
from jsrouting.jsonp import JsonpCallbackValidator, is_identifier, wrap


class TestWrap:
    def test_no_callback_returns_content(self) -> None:
        assert wrap('{"a":1}', None) == '{"a":1}'

    def test_wraps_with_comment_prefix(self) -> None:
        assert wrap('{"a":1}', "cb") == '/**/cb({"a":1});'

    def test_dotted_callback(self) -> None:
        assert wrap("{}", "fos.Router.setData") == "/**/fos.Router.setData({});"

    @pytest.mark.parametrize(
        "callback",
        ["a;b", "cb alert(1)", "", "1cb", "cb()", "<script>", 'cb["; alert(1)"]', "a[0]b"],
    )
    def test_invalid_callback_raises(self, callback: str) -> None:
        with pytest.raises(InvalidCallback) as exc_info:
            wrap("{}", callback)
        assert exc_info.value.status == 400
        assert exc_info.value.detail == "Invalid JSONP callback value"

    def test_invalid_callback_is_http_400(self) -> None:
        assert issubclass(InvalidCallback, HTTPError)
        assert InvalidCallback().detail == "Invalid JSONP callback value"


class TestValidator:
    @pytest.mark.parametrize(
        "callback",
        [
            "hello",
            "$",
            "_private",
            "foo.bar",
            "a.b.c.d",
            'foo["bar"]',
            "foo['bar'].baz",
            "foo[0]",
            'foo["a.b"].baz',
            "foo[0][1].bar['x']",
            "ünïcödé",
            "a\u200cb",
        ],
    )
    def test_valid(self, callback: str) -> None:
        assert JsonpCallbackValidator().validate(callback)

    @pytest.mark.parametrize(
        "callback",
        [
            "foo;",
            "foo bar",
            "foo.",
            ".foo",
            "foo..bar",
            "function",
            "foo.return",
            "foo[bar]",
            'foo["bar"',
            "alert(document.cookie)",
            "(function xss(x){evil()})",
            "a[0]b",
            "[0]cb",
            'cb["x"]alert',
            'cb["; x y"]',
            "cb['a b']",
            "cb[0].",
            "cb[0][",
            "return[0]",
        ],
    )
    def test_invalid(self, callback: str) -> None:
        assert not JsonpCallbackValidator().validate(callback)


class TestIsIdentifier:
    def test_reserved_words(self) -> None:
        assert not is_identifier("var")
        assert not is_identifier("null")

    def test_digits_after_first_char(self) -> None:
        assert is_identifier("cb2")
        assert not is_identifier("2cb")
