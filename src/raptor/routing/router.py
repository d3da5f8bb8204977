"""Per-resource router and the route-table builder.

A Router owns the routes of one resource in declaration order and
hands a request to the first route whose template matches. There is no
specificity scoring: declaring ``show`` before ``new`` means
``/posts/new`` is taken by ``show``.

Usage::

    class Post:
        class Record: ...
        class PresentsOne: ...
        class PresentsMany: ...

    Post.Routes = routes(Post, "index", "new", "show")

or, step by step::

    router = Router(Post)
    router.index()
    router.show("find_published")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from raptor.errors import ConfigurationError, NoRouteMatches
from raptor.http.request import Request
from raptor.resources import Resource
from raptor.routing.route import Route

if TYPE_CHECKING:
    from raptor.templating.integration import TemplateRenderer

logger = logging.getLogger("raptor.routing")

Handler = str | Callable[..., Any]

# kind -> path template, filled in with the resource name
ROUTE_PATHS: dict[str, str] = {
    "show": "/%s/:id",
    "new": "/%s/new",
    "index": "/%s",
}

DEFAULT_HANDLERS: dict[str, str] = {
    "show": "Record.find_by_id",
    "new": "Record.new",
    "index": "Record.all",
}


class Router:
    """The ordered routes of a single resource."""

    __slots__ = ("_routes", "resource")

    def __init__(self, resource: Any) -> None:
        self.resource: Resource = Resource.wrap(resource)
        self._routes: list[Route] = []

    # -- Registration --

    def show(self, handler: Handler | None = None) -> Route:
        """Register ``/<name>/:id``, handled by ``Record.find_by_id`` by default."""
        return self._conventional("show", handler)

    def new(self, handler: Handler | None = None) -> Route:
        """Register ``/<name>/new``, handled by the ``Record`` constructor by default."""
        return self._conventional("new", handler)

    def index(self, handler: Handler | None = None) -> Route:
        """Register ``/<name>``, handled by ``Record.all`` by default."""
        return self._conventional("index", handler)

    def route(
        self, path: str, handler: Handler, kind: str, *, plural: bool | None = None
    ) -> Route:
        """Register a custom route rendering ``<name>/<kind>``.

        The presenter follows *kind* (``index`` is plural) unless *plural*
        is given.
        """
        return self.add(Route.build(path, handler, kind, self.resource, plural=plural))

    def add(self, route: Route) -> Route:
        if route.resource is not self.resource:
            msg = (
                f"Route for {route.resource.resource_name!r} cannot be added "
                f"to the {self.resource.resource_name!r} router"
            )
            raise ConfigurationError(msg)
        self._routes.append(route)
        return route

    def declare(self, kind: str, handler: Handler | None = None) -> Route:
        """Register a conventional route by kind name.

        Raises ``ConfigurationError`` for anything but show/new/index.
        """
        if kind not in ROUTE_PATHS:
            known = ", ".join(ROUTE_PATHS)
            name = self.resource.resource_name
            msg = f"Unknown route kind {kind!r} for {name!r}. Known kinds: {known}"
            raise ConfigurationError(msg)
        return self._conventional(kind, handler)

    def _conventional(self, kind: str, handler: Handler | None) -> Route:
        path = ROUTE_PATHS[kind] % self.resource.resource_name
        return self.add(Route.build(path, handler or DEFAULT_HANDLERS[kind], kind, self.resource))

    # -- Lookup --

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def matches(self, path: str) -> bool:
        return any(route.matches(path) for route in self._routes)

    def route_for_path(self, path: str) -> Route:
        """Return the first route matching *path*.

        Raises ``NoRouteMatches`` if none does.
        """
        for route in self._routes:
            if route.matches(path):
                return route
        raise NoRouteMatches(path)

    async def call(self, request: Request, renderer: TemplateRenderer) -> str:
        route = self.route_for_path(request.path)
        logger.debug("%s matched %s (%s)", request.path, route.path, route.kind)
        return await route.call(request, renderer)

    def __repr__(self) -> str:
        paths = ", ".join(str(route.path) for route in self._routes)
        return f"Router({self.resource.resource_name!r}, [{paths}])"


def routes(resource: Any, *declarations: str | tuple[str, Handler]) -> Router:
    """Build the router for *resource* from route declarations.

    Each declaration is a kind name (``"show"``) or a ``(kind, handler)``
    pair (``("index", "published")``). Unknown kinds fail here, at startup.
    """
    router = Router(resource)
    for declaration in declarations:
        if isinstance(declaration, str):
            router.declare(declaration)
        elif len(declaration) == 2:
            kind, handler = declaration
            router.declare(kind, handler)
        else:
            msg = (
                "Route declaration must be a kind or a (kind, handler) pair, "
                f"got {declaration!r}"
            )
            raise ConfigurationError(msg)
    return router
