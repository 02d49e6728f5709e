"""Stable sort by derived key."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from .selectors import KeySelector, resolve_key

T = TypeVar("T")


def _decorate(index: int, key: Any) -> tuple[Any, ...]:
    # Absent keys form a trailing group ordered by position only.
    if key is None:
        return (1, index)
    return (0, key, index)


def sort_by(items: Iterable[T], key: KeySelector = None) -> list[T]:
    """Return a new list ordered ascending by ``key``.

    ``key`` is a callable, a field name, or ``None`` for the items
    themselves. Items whose key is ``None`` go last. Items with equal keys
    keep their input order.
    """

    selector = resolve_key(key)
    decorated = [
        (_decorate(index, selector(item)), item) for index, item in enumerate(items)
    ]
    decorated.sort(key=lambda entry: entry[0])
    return [item for _, item in decorated]


__all__ = [
    "sort_by",
]
