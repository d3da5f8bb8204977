"""Path templates — literal and ``:named`` segments.

A template such as ``/posts/:id`` is parsed once into an immutable tuple
of segments. Matching is purely structural: equal segment counts, equal
literals, anything in a named position.
"""

from __future__ import annotations

from dataclasses import dataclass

from raptor.routing.params import convert_param

PARAM_MARKER = ":"


def split_path(path: str) -> list[str]:
    """Split a path on ``/``, ignoring trailing slashes.

    Examples::

        "/posts/42"  -> ["", "posts", "42"]
        "/posts/"    -> ["", "posts"]
        "/"          -> [""]
    """
    return path.rstrip("/").split("/")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path template.

    Literal: ``posts``  (is_param=False)
    Named:   ``:id``    (is_param=True, value="id")
    """

    value: str
    is_param: bool = False

    @classmethod
    def parse(cls, token: str) -> PathSegment:
        if token.startswith(PARAM_MARKER):
            return cls(value=token[len(PARAM_MARKER) :], is_param=True)
        return cls(value=token)

    def accepts(self, component: str) -> bool:
        return self.is_param or self.value == component


@dataclass(frozen=True, slots=True)
class PathTemplate:
    """An immutable path template compiled from a string like ``/posts/:id``."""

    template: str
    segments: tuple[PathSegment, ...]

    @classmethod
    def parse(cls, template: str) -> PathTemplate:
        return cls(
            template=template,
            segments=tuple(PathSegment.parse(token) for token in split_path(template)),
        )

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.value for seg in self.segments if seg.is_param)

    def matches(self, path: str) -> bool:
        """True if *path* has the same shape as this template."""
        components = split_path(path)
        if len(components) != len(self.segments):
            return False
        return all(seg.accepts(comp) for seg, comp in zip(self.segments, components, strict=True))

    def extract_args(self, path: str) -> dict[str, int]:
        """Return named segment values from *path*, coerced to ``int``.

        Assumes ``matches(path)`` already holds.
        Raises ``InvalidPathArgument`` for a non-integer value.
        """
        return {
            seg.value: convert_param(seg.value, comp)
            for seg, comp in zip(self.segments, split_path(path), strict=False)
            if seg.is_param
        }

    def __str__(self) -> str:
        return self.template
