"""Invoke helpers — call sync or async handlers uniformly.

Record handlers can be plain functions, classmethods, constructors, or
``async def`` coroutines. Any code that calls a handler must handle all
of these. This module keeps the sync/async check in exactly one place.

Usage::

    from raptor._internal.invoke import invoke

    record = await invoke(handler, *args)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
