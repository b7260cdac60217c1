"""Dotted-path lookups into parsed JSON objects."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def lookup(value: Any, path: str) -> Any:
    """Return the value at dotted ``path`` or :data:`MISSING`.

    Examples
    --------
    >>> lookup({"fields": {"message": "hi"}}, "fields.message")
    'hi'
    >>> lookup({"fields": "flat"}, "fields.message")
    MISSING
    """
    current = value
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return MISSING
        current = current[part]
    return current


def first_present(value: Any, paths: Iterable[str]) -> Any:
    """Return the value of the first path present in ``value`` or :data:`MISSING`."""

    for path in paths:
        found = lookup(value, path)
        if found is not MISSING:
            return found
    return MISSING


__all__ = ["MISSING", "first_present", "lookup"]
