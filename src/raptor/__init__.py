"""Raptor — resource routing and presenter rendering for ASGI apps.

Declare resources, give each a route table, and serve them::

    from raptor import App, routes

    class Post:
        class Record:
            @classmethod
            def find_by_id(cls, id): ...

            @classmethod
            def all(cls): ...

        class PresentsOne: ...
        class PresentsMany: ...

    Post.Routes = routes(Post, "show", "index")

    app = App([Post])

Each request path is matched against each resource's routes in turn;
the handler's arguments are inferred from its parameter names, and the
result is rendered through ``views/<resource>/<kind>.html``.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "InvalidPathArgument",
    "MissingArgument",
    "MissingResourceConvention",
    "NoRouteMatches",
    "NotFound",
    "RaptorError",
    "Request",
    "Resource",
    "Response",
    "Router",
    "routes",
]


# Public name -> defining module, imported on first access
_LAZY_IMPORTS: dict[str, str] = {
    "App": "raptor.app",
    "AppConfig": "raptor.config",
    "ConfigurationError": "raptor.errors",
    "HTTPError": "raptor.errors",
    "InvalidPathArgument": "raptor.errors",
    "MissingArgument": "raptor.errors",
    "MissingResourceConvention": "raptor.errors",
    "NoRouteMatches": "raptor.errors",
    "NotFound": "raptor.errors",
    "RaptorError": "raptor.errors",
    "Request": "raptor.http.request",
    "Resource": "raptor.resources",
    "Response": "raptor.http.response",
    "Router": "raptor.routing.router",
    "routes": "raptor.routing.router",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import raptor`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
