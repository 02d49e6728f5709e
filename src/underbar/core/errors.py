"""Error types."""

from __future__ import annotations


class UnderbarError(Exception):
    """Base exception for this package."""


class InvalidArgumentError(UnderbarError, ValueError):
    """Input rejected before any work is done."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


__all__ = [
    "UnderbarError",
    "InvalidArgumentError",
]
