"""Route — one path template bound to one handler and one template."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from raptor._internal.invoke import invoke
from raptor.errors import ConfigurationError
from raptor.http.request import Request
from raptor.resources import Resource
from raptor.routing.arguments import HandlerSpec, resolve_args
from raptor.routing.path import PathTemplate

if TYPE_CHECKING:
    from raptor.templating.integration import TemplateRenderer

logger = logging.getLogger("raptor.routing")

# Handler names that mean "construct a new Record"
CONSTRUCTOR_NAMES = frozenset({"new", "initialize", "__init__"})

PLURAL_KINDS = frozenset({"index"})


def handler_spec(resource: Resource, handler: str | Callable[..., Any]) -> HandlerSpec:
    """Turn a handler reference into a ``HandlerSpec`` for *resource*.

    *handler* is either a callable, or the name of a member of the
    resource's ``Record`` (``"find_by_id"``; the dotted ``"Record.all"``
    form is accepted too). Constructor names build a new ``Record`` and
    infer arguments from its ``__init__``.
    """
    if callable(handler):
        name = getattr(handler, "__qualname__", None) or repr(handler)
        return HandlerSpec.from_callable(name, handler)

    record_type = resource.record_type
    method_name = handler.rsplit(".", 1)[-1]
    if method_name in CONSTRUCTOR_NAMES:
        return HandlerSpec.from_callable(method_name, record_type, signature_of=record_type)

    func = getattr(record_type, method_name, None)
    if func is None or not callable(func):
        msg = f"{resource.resource_name}: Record has no handler named {method_name!r}"
        raise ConfigurationError(msg)
    return HandlerSpec.from_callable(method_name, func)


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created while a resource's route table is declared; stateless
    between calls.
    """

    path: PathTemplate
    handler: HandlerSpec
    kind: str
    resource: Resource
    plural: bool = False

    @classmethod
    def build(
        cls,
        path: str,
        handler: str | Callable[..., Any],
        kind: str,
        resource: Resource,
        *,
        plural: bool | None = None,
    ) -> Route:
        """Parse *path* and resolve *handler* against *resource*."""
        return cls(
            path=PathTemplate.parse(path),
            handler=handler_spec(resource, handler),
            kind=kind,
            resource=resource,
            plural=kind in PLURAL_KINDS if plural is None else plural,
        )

    @property
    def presenter_class(self) -> Any:
        if self.plural:
            return self.resource.many_presenter
        return self.resource.one_presenter

    def matches(self, path: str) -> bool:
        return self.path.matches(path)

    async def call(self, request: Request, renderer: TemplateRenderer) -> str:
        """Invoke the handler for *request* and render its presenter."""
        args = resolve_args(self.handler, self.path.extract_args(request.path), request.params)
        logger.debug(
            "%s %s -> %s.%s%r",
            request.method,
            request.path,
            self.resource.resource_name,
            self.handler.name,
            tuple(args),
        )
        record = await invoke(self.handler.func, *args)
        presenter = self.presenter_class(record)
        return renderer.render(self.resource.resource_name, self.kind, presenter)
