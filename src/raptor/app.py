"""Raptor application class.

Holds one router per resource in registration order. Mutable during
setup, frozen when the first request arrives (or ``_ensure_frozen()``
is called).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from raptor._internal.asgi import Receive, Scope, Send
from raptor.config import AppConfig
from raptor.errors import ConfigurationError, NoRouteMatches
from raptor.http.request import Request
from raptor.routing.router import Router
from raptor.templating.integration import TemplateRenderer

logger = logging.getLogger("raptor.routing")


def _as_router(resource: Any) -> Router:
    """Accept a Router, or a resource class carrying one as ``Routes``."""
    if isinstance(resource, Router):
        return resource
    router = getattr(resource, "Routes", None)
    if isinstance(router, Router):
        return router
    msg = f"{resource!r} is neither a Router nor a resource with a Routes router"
    raise ConfigurationError(msg)


class App:
    """The raptor application: a chain of per-resource routers.

    ``dispatch`` tries each router in order. A router that has no
    matching route raises ``NoRouteMatches`` and the next one is tried;
    the last router's ``NoRouteMatches`` propagates. Any other error,
    and the first successful result, end the chain.

    Thread safety:
        The setup phase is single-threaded. The freeze transition uses a
        Lock + double-check so exactly one thread builds the template
        renderer, even when several ASGI workers send their first
        request concurrently.
    """

    __slots__ = ("_freeze_lock", "_frozen", "_renderer", "_routers", "config")

    def __init__(
        self,
        resources: Iterable[Any] = (),
        config: AppConfig | None = None,
        *,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._routers: list[Router] = [_as_router(r) for r in resources]
        self._renderer: TemplateRenderer | None = renderer
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Registration --

    def add(self, resource: Any) -> Router:
        """Append a router (or a resource with ``Routes``) to the chain."""
        self._check_not_frozen()
        router = _as_router(resource)
        self._routers.append(router)
        return router

    @property
    def routers(self) -> tuple[Router, ...]:
        return tuple(self._routers)

    # -- Dispatch --

    async def dispatch(self, request: Request) -> str:
        """Render the response body for *request*.

        Raises ``NoRouteMatches`` when no router can serve the path.
        """
        renderer = self._ensure_frozen()

        if not self._routers:
            raise NoRouteMatches(request.path)

        *leading, last = self._routers
        for router in leading:
            try:
                return await router.call(request, renderer)
            except NoRouteMatches:
                logger.debug(
                    "%s: no route in %s, trying next router",
                    request.path,
                    router.resource.resource_name,
                )
        return await last.call(request, renderer)

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3 entry point."""
        from raptor.server.handler import handle_request

        self._ensure_frozen()
        await handle_request(scope, receive, send, app=self, debug=self.config.debug)

    # -- Freeze --

    def _ensure_frozen(self) -> TemplateRenderer:
        """Freeze on first use and return the renderer requests are served with."""
        renderer = self._renderer
        if self._frozen and renderer is not None:
            return renderer
        with self._freeze_lock:
            renderer = self._renderer
            if self._frozen and renderer is not None:
                return renderer
            return self._freeze()

    def _freeze(self) -> TemplateRenderer:
        renderer = self._renderer or TemplateRenderer.from_config(self.config)
        self._renderer = renderer
        self._frozen = True
        return renderer

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot add routers after the app has started serving requests."
            raise RuntimeError(msg)
