"""
Small helpers for optional values and lists.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def is_value(value: object) -> bool:
    """True for anything except None."""
    return value is not None


def if_value(value: T | None, fn: Callable[[T], R]) -> R | None:
    """Apply ``fn`` when ``value`` is set, else return None."""
    if value is None:
        return None
    return fn(value)


def unique(items: Iterable[T], key: Callable[[T], Hashable] | None = None) -> list[T]:
    """Drop repeated items, keeping the first occurrence."""
    seen: set[Hashable] = set()
    result = []
    for item in items:
        marker = key(item) if key else item
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def compact(items: Iterable[T | None]) -> list[T]:
    """Drop None entries."""
    return [item for item in items if item is not None]


def true_or_none(condition: bool) -> bool | None:
    """Map False to None so the attribute is omitted instead of emitted."""
    return True if condition else None
