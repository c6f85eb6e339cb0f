"""Small algorithms over sequences."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def erase_if(items: MutableSequence[T], predicate: Callable[[T], bool]) -> None:
    """Remove in place every item for which ``predicate`` is true."""
    items[:] = [item for item in items if not predicate(item)]


def max_element(items: Iterable[T], key: Callable[[T], Any]) -> T | None:
    """Return the first item with the largest key, or None if there are none."""
    return max(items, key=key, default=None)