"""ASGI handler — translates ASGI scope/messages to raptor types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through the app's routers, and
sends the rendered body back through ASGI send().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from raptor._internal.asgi import Receive, Scope, Send
from raptor.errors import HTTPError
from raptor.http.request import Request
from raptor.http.response import Response
from raptor.server.errors import handle_http_error, handle_internal_error
from raptor.server.sender import send_response

if TYPE_CHECKING:
    from raptor.app import App


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    app: App,
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        request = await request.with_form()
        body = await app.dispatch(request)
        response = Response(body=body)
    except HTTPError as exc:
        response = handle_http_error(exc, request, debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send)
