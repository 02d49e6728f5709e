"""Time sources used by time-based wrappers."""

from __future__ import annotations

import asyncio
import threading
import time
from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    """Current time in milliseconds plus delayed callback scheduling."""

    def now(self) -> float: ...

    def schedule_after(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


class SystemClock:
    """Wall clock for production use.

    Timers go on the given loop, else on the running asyncio loop. Outside
    any loop a daemon ``threading.Timer`` is used, so callers need their own
    lock around state the callback touches.
    """

    def __init__(self, *, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def schedule_after(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        delay_seconds = max(0.0, delay_ms) / 1000.0
        loop = self._loop or _running_loop()
        if loop is not None:
            return loop.call_later(delay_seconds, callback)
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return timer


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


__all__ = [
    "TimerHandle",
    "Clock",
    "SystemClock",
]
