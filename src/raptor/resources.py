"""Resource descriptors.

A resource is a plain class that groups three nested members::

    class BlogPost:
        class Record: ...        # handlers: find_by_id, all, constructor
        class PresentsOne: ...   # wraps a single record for templates
        class PresentsMany: ...  # wraps a collection of records

``Resource`` wraps such a class, checks the three members are present as
soon as it is created, and derives the lowercase name used in paths and
template lookups.
"""

from __future__ import annotations

import re
from typing import Any

from raptor.errors import MissingResourceConvention

RECORD = "Record"
PRESENTS_ONE = "PresentsOne"
PRESENTS_MANY = "PresentsMany"

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(name: str) -> str:
    """Convert a CamelCase name to snake_case.

    Examples::

        "BlogPost"   -> "blog_post"
        "Widget"     -> "widget"
        "HTTPServer" -> "http_server"
    """
    return _WORD_BOUNDARY.sub("_", name).lower()


class Resource:
    """Read-only view of a resource class and its conventional members."""

    __slots__ = ("_many_presenter", "_one_presenter", "_record_type", "_resource", "resource_name")

    def __init__(self, resource: Any) -> None:
        self._resource = resource
        self._record_type = _member(resource, RECORD)
        self._one_presenter = _member(resource, PRESENTS_ONE)
        self._many_presenter = _member(resource, PRESENTS_MANY)
        qualname = getattr(resource, "__qualname__", None) or type(resource).__qualname__
        self.resource_name: str = underscore(qualname.rsplit(".", 1)[-1])

    @classmethod
    def wrap(cls, resource: Any) -> Resource:
        """Return *resource* if it is already a ``Resource``, else wrap it."""
        if isinstance(resource, cls):
            return resource
        return cls(resource)

    @property
    def definition(self) -> Any:
        return self._resource

    @property
    def record_type(self) -> Any:
        return self._record_type

    @property
    def one_presenter(self) -> Any:
        return self._one_presenter

    @property
    def many_presenter(self) -> Any:
        return self._many_presenter

    def __repr__(self) -> str:
        return f"Resource({self.resource_name!r})"


def _member(resource: Any, name: str) -> Any:
    try:
        return getattr(resource, name)
    except AttributeError:
        raise MissingResourceConvention(resource, name) from None
