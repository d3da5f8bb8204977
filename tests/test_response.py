"""Tests for raptor.http.response — Response chaining."""

import pytest

from raptor.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/html; charset=utf-8"
        assert r.headers == ()

    def test_with_status(self) -> None:
        original = Response("hi")
        changed = original.with_status(404)
        assert changed.status == 404
        assert original.status == 200

    def test_with_header_appends(self) -> None:
        r = Response().with_header("X-One", "1").with_header("X-Two", "2")
        assert r.headers == (("X-One", "1"), ("X-Two", "2"))

    def test_with_content_type(self) -> None:
        assert Response().with_content_type("text/plain").content_type == "text/plain"

    def test_body_bytes(self) -> None:
        assert Response("hé").body_bytes == "hé".encode()
        assert Response(b"raw").body_bytes == b"raw"

    def test_text(self) -> None:
        assert Response(b"hello").text == "hello"

    def test_header_lookup(self) -> None:
        r = Response().with_header("Allow", "GET")
        assert r.header("allow") == "GET"
        assert r.header("x-missing") is None

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]
