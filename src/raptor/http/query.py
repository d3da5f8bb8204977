"""Single-valued parameters from a query string or urlencoded body.

Handlers see one value per name. When a name repeats, its first
occurrence is the one kept.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Read-only ``name -> value`` view of ``a=1&b=2`` encoded bytes."""

    __slots__ = ("_values",)

    def __init__(self, encoded: bytes = b"") -> None:
        values: dict[str, str] = {}
        for name, value in parse_qsl(encoded.decode("latin-1"), keep_blank_values=True):
            values.setdefault(name, value)
        self._values = values

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({self._values!r})"
