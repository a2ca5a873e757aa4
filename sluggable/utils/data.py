"""Nested attribute lookup."""

from collections.abc import Mapping, Sequence
from typing import Any


def data_get(target: Any, path: str, default: Any = None) -> Any:
    """
    Resolve a dotted path against objects, mappings and sequences.

    Args:
        target: Object to start from (e.g. a record)
        path: Dotted path such as ``"author.name"`` or ``"tags.0"``
        default: Value returned when any segment is missing

    Returns:
        Resolved value, or ``default`` on any miss

    Examples:
        >>> data_get({"author": {"name": "Ada"}}, "author.name")
        'Ada'
        >>> data_get({"author": None}, "author.name") is None
        True
    """
    current = target

    for segment in path.split("."):
        if current is None:
            return default

        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, str):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return default
        else:
            current = getattr(current, segment, None)

    return default if current is None else current
