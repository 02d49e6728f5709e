"""Key selectors shared by the sorting and plucking helpers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .core.errors import InvalidArgumentError

KeySelector = Callable[[Any], Any] | str | None


def get_field(item: Any, name: str) -> Any:
    """Mapping lookup for mappings, attribute lookup otherwise; ``None`` when absent."""

    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def resolve_key(key: KeySelector) -> Callable[[Any], Any]:
    if key is None:
        return lambda item: item
    if isinstance(key, str):
        return lambda item: get_field(item, key)
    if callable(key):
        return key
    raise InvalidArgumentError(
        f"key must be callable, a field name or None, got {type(key).__name__}",
        argument="key",
    )


__all__ = [
    "KeySelector",
    "get_field",
    "resolve_key",
]
