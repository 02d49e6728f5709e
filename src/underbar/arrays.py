"""Array combinators."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from .selectors import get_field

T = TypeVar("T")


def identity(value: T) -> T:
    return value


def pluck(items: Iterable[Any], field: str) -> list[Any]:
    return [get_field(item, field) for item in items]


def invoke(items: Iterable[Any], method: Callable[..., Any] | str, *args: Any) -> list[Any]:
    """Call ``method`` on every item.

    A callable receives the item as its first argument. A string names a
    method looked up on each item.
    """

    if isinstance(method, str):
        return [getattr(item, method)(*args) for item in items]
    return [method(item, *args) for item in items]


def _is_nested(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def flatten(nested: Iterable[Any], shallow: bool = False) -> list[Any]:
    """Expand nested lists and tuples depth-first, left to right.

    Walks an explicit stack of iterators, so nesting depth is not bounded by
    the interpreter's recursion limit.
    """

    out: list[Any] = []
    stack = [iter(nested)]
    while stack:
        for item in stack[-1]:
            if not _is_nested(item):
                out.append(item)
            elif shallow:
                out.extend(item)
            else:
                stack.append(iter(item))
                break
        else:
            stack.pop()
    return out

def zip_(*lists: Sequence[Any]) -> list[list[Any]]:
    """Group items by position, padding shorter inputs with ``None``."""

    length = max((len(values) for values in lists), default=0)
    return [
        [values[index] if index < len(values) else None for values in lists]
        for index in range(length)
    ]


def intersection(*lists: Sequence[Any]) -> list[Any]:
    if not lists:
        return []
    first, others = lists[0], lists[1:]
    result: list[Any] = []
    for item in first:
        if item in result:
            continue
        if all(item in other for other in others):
            result.append(item)
    return result


def difference(items: Iterable[Any], *others: Sequence[Any]) -> list[Any]:
    return [item for item in items if not any(item in other for other in others)]


__all__ = [
    "identity",
    "pluck",
    "invoke",
    "flatten",
    "zip_",
    "intersection",
    "difference",
]
