"""Public package exports for underbar."""

from .arrays import difference, flatten, identity, intersection, invoke, pluck, zip_
from .config import ThrottleConfig, UnderbarConfig, throttle_from_config
from .core.clock import Clock, SystemClock
from .core.errors import InvalidArgumentError, UnderbarError
from .core.throttling import Throttled, throttle
from .sorting import sort_by

__all__ = [
    "throttle",
    "Throttled",
    "sort_by",
    "invoke",
    "flatten",
    "zip_",
    "intersection",
    "difference",
    "pluck",
    "identity",
    "Clock",
    "SystemClock",
    "ThrottleConfig",
    "UnderbarConfig",
    "throttle_from_config",
    "UnderbarError",
    "InvalidArgumentError",
]
