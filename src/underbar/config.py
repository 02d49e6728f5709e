"""Library configuration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .core.clock import Clock
from .core.errors import InvalidArgumentError
from .core.throttling import Throttled


@dataclass(slots=True, frozen=True)
class ThrottleConfig:
    """Throttling-related settings."""

    wait_ms: float = 100.0

    def validate(self) -> None:
        if isinstance(self.wait_ms, bool) or not isinstance(self.wait_ms, (int, float)):
            raise InvalidArgumentError("throttle.wait_ms must be a number", argument="wait_ms")
        if self.wait_ms <= 0:
            raise InvalidArgumentError("throttle.wait_ms must be > 0", argument="wait_ms")


@dataclass(slots=True, frozen=True)
class UnderbarConfig:
    """Runtime configuration for the time-based helpers."""

    throttle: ThrottleConfig = field(default_factory=ThrottleConfig)

    def validate(self) -> None:
        self.throttle.validate()


def throttle_from_config(
    fn: Callable[..., Any],
    config: UnderbarConfig | ThrottleConfig,
    *,
    clock: Clock | None = None,
) -> Throttled:
    config.validate()
    settings = config.throttle if isinstance(config, UnderbarConfig) else config
    return Throttled(fn, settings.wait_ms, clock=clock)


__all__ = [
    "ThrottleConfig",
    "UnderbarConfig",
    "throttle_from_config",
]
