"""
Shared helpers for formatting option tokens.

Pure-Python, no dependencies beyond the standard library.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

H = TypeVar("H", bound=Hashable)


def format_number(value: float) -> str:
    """
    Render a number as a query token.

    Integral values drop the fractional part (``300.0`` → ``"300"``);
    other values use the shortest round-tripping representation.
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not numeric option values")
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def unique(items: Iterable[H]) -> list[H]:
    """Drop repeated items, keeping the first occurrence of each."""
    seen: set[H] = set()
    result: list[H] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
