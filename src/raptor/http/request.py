"""Immutable HTTP request.

Frozen metadata with async body access. The request is honest about
what it is: received data that doesn't change.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from raptor._internal.asgi import Receive
from raptor.http.headers import Headers
from raptor.http.query import QueryParams

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``params`` is the flat, single-valued view handlers receive: query
    string fields merged with urlencoded body fields, body winning on
    conflicts.
    """

    path: str
    method: str = "GET"
    headers: Headers = field(default_factory=Headers)
    query: QueryParams = field(default_factory=QueryParams)
    form: QueryParams = field(default_factory=QueryParams)

    # Private: ASGI receive callable for body streaming
    _receive: Receive | None = field(default=None, repr=False, compare=False)

    # Private: mutable cache for the body
    # (dict contents are mutable even though the field reference is frozen)
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def params(self) -> dict[str, str]:
        """Query and form parameters merged into one plain dict."""
        return {**self.query, **self.form}

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def has_form_body(self) -> bool:
        """True if the body is urlencoded form data."""
        ct = self.content_type or ""
        return ct.split(";", 1)[0].strip().lower() == FORM_CONTENT_TYPE

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def with_form(self) -> Request:
        """Return a copy with ``form`` parsed from an urlencoded body.

        Requests without a form body are returned unchanged.
        """
        if not self.has_form_body:
            return self
        raw = await self.body()
        return replace(self, form=QueryParams(raw), _cache=self._cache)

    # -- Factories --

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any], receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        return cls(
            path=scope["path"],
            method=scope["method"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            _receive=receive,
        )

    @classmethod
    def build(
        cls, url: str, *, method: str = "GET", form: Mapping[str, str] | None = None
    ) -> Request:
        """Create a Request from a ``/path?query`` string, mostly for tests."""
        from urllib.parse import urlencode

        path, _, query_string = url.partition("?")
        return cls(
            path=path,
            method=method,
            query=QueryParams(query_string.encode("latin-1")),
            form=QueryParams(urlencode(form or {}).encode("latin-1")),
        )
