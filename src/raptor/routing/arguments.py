"""Argument inference for record handlers.

A handler's parameter names are read once, when its route is declared,
and stored on a ``HandlerSpec``. Per request, ``resolve_args`` looks each
name up in the values the request offers:

- named path segments (``/posts/:id`` offers ``id``), already integers
- ``params``, the whole flat query/form parameter map

Every declared parameter is required. A handler that only accepts
``*args`` and/or ``**kwargs`` is called with no arguments at all.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from raptor.errors import ConfigurationError, MissingArgument

PARAMS_ARGUMENT = "params"

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True, slots=True)
class HandlerSpec:
    """A registrable handler and the parameter names it declares."""

    name: str
    func: Callable[..., Any]
    parameters: tuple[str, ...] = ()
    variadic: bool = False

    @classmethod
    def from_callable(
        cls,
        name: str,
        func: Callable[..., Any],
        *,
        signature_of: Callable[..., Any] | None = None,
    ) -> HandlerSpec:
        """Build a spec by reading the signature of *signature_of* (default *func*).

        Constructors pass the class itself as *signature_of*, so inference
        runs against ``__init__`` rather than a generic ``__new__``.
        """
        target = signature_of if signature_of is not None else func
        try:
            sig = inspect.signature(target)
        except (TypeError, ValueError):
            # Builtins and C types without introspectable signatures
            return cls(name=name, func=func)

        params = list(sig.parameters.values())
        if params and all(p.kind in _VARIADIC for p in params):
            return cls(name=name, func=func, variadic=True)

        keyword_only = [p.name for p in params if p.kind is inspect.Parameter.KEYWORD_ONLY]
        if keyword_only:
            msg = (
                f"Handler {name!r} declares keyword-only parameters {keyword_only}; "
                "inferred arguments are passed positionally."
            )
            raise ConfigurationError(msg)

        return cls(
            name=name,
            func=func,
            parameters=tuple(p.name for p in params if p.kind in _POSITIONAL),
        )


def resolve_args(
    spec: HandlerSpec,
    path_args: Mapping[str, Any],
    params: Mapping[str, str],
) -> list[Any]:
    """Build the positional argument list to call *spec* with.

    Raises ``MissingArgument`` when a declared parameter has no value.
    """
    if spec.variadic:
        return []

    available: dict[str, Any] = {**path_args, PARAMS_ARGUMENT: params}
    args: list[Any] = []
    for name in spec.parameters:
        if name not in available:
            raise MissingArgument(spec.name, name, tuple(available))
        args.append(available[name])
    return args
