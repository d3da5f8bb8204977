"""Error responses for requests that did not render.

The routing core translates nothing; this is where its errors become
HTTP responses. ``HTTPError`` subclasses (``NoRouteMatches``,
``InvalidPathArgument``) keep their status, everything else is a 500.
"""

import logging
import traceback
from html import escape

from raptor.errors import HTTPError
from raptor.http.request import Request
from raptor.http.response import Response

logger = logging.getLogger("raptor.server")


def handle_http_error(exc: HTTPError, request: Request, debug: bool) -> Response:
    """Map an HTTPError to a plain response with its status."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response(body=escape(detail), status=exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected exceptions (handler failures, MissingArgument) as 500s."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        trace = "".join(traceback.format_exception(exc))
        return Response(body=f"<pre>{escape(trace)}</pre>", status=500)
    return Response(body="Internal Server Error", status=500)
