"""Raptor exception hierarchy.

Shared across the routing layer, App, and the ASGI adapter so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class RaptorError(Exception):
    """Base for all raptor-specific errors."""


class ConfigurationError(RaptorError):
    """Raised when a route table or resource definition is invalid.

    Always raised while routes are being declared, never per request.
    """


class MissingResourceConvention(ConfigurationError):
    """A resource class lacks one of ``Record``, ``PresentsOne``, ``PresentsMany``."""

    def __init__(self, resource: object, member: str) -> None:
        name = getattr(resource, "__qualname__", repr(resource))
        super().__init__(f"Resource {name} does not define {member!r}")
        self.resource = resource
        self.member = member


class MissingArgument(RaptorError):
    """A handler declares a parameter that nothing in the request can supply."""

    def __init__(self, handler: str, parameter: str, available: tuple[str, ...] = ()) -> None:
        detail = f"Cannot infer argument {parameter!r} for handler {handler!r}"
        if available:
            detail += f" (available: {', '.join(available)})"
        super().__init__(detail)
        self.handler = handler
        self.parameter = parameter


@dataclass(frozen=True, slots=True)
class HTTPError(RaptorError):
    """An error that maps directly to an HTTP status code.

    Raised by the routing layer or by handlers. The ASGI adapter catches
    these and turns them into a response with the matching status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — nothing can serve the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class NoRouteMatches(NotFound):  # noqa: N818
    """No route in a router matches the path.

    The only error ``App`` recovers from: it moves on to the next router
    and lets this propagate from the last one.
    """

    def __init__(self, path: str = "") -> None:
        super().__init__(f"No route matches {path!r}" if path else "No route matches")


class InvalidPathArgument(NotFound):  # noqa: N818
    """A named path segment could not be coerced to an integer."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Path argument {name!r} must be an integer, got {value!r}")
