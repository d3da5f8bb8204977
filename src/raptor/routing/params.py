"""Path parameter conversion.

Named segments such as ``:id`` always carry integer identifiers; record
handlers downstream rely on receiving ``int`` values.
"""

from raptor.errors import InvalidPathArgument


def _is_integer(value: str) -> bool:
    digits = value[1:] if value.startswith("-") else value
    return digits.isascii() and digits.isdigit()


def convert_param(name: str, value: str) -> int:
    """Convert a captured path segment to an integer.

    Only ASCII digits with an optional leading ``-`` are accepted, so
    ``4_2``, ``+42`` and `` 42`` do not alias ``/posts/42``.
    Raises ``InvalidPathArgument`` otherwise.
    """
    if not _is_integer(value):
        raise InvalidPathArgument(name, value)
    return int(value, 10)
