"""Rate throttling utilities."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable
from typing import Any

from .clock import Clock, SystemClock, TimerHandle
from .errors import InvalidArgumentError

logger = logging.getLogger("underbar")


class Throttled:
    """Runs ``fn`` at most once per ``wait_ms`` with one collapsed trailing call.

    The first call of a burst runs immediately. Calls landing inside the
    cooldown window are not run; the most recent one is replayed once when
    the window closes. Every call returns the result of the latest real
    execution, which is stale while a trailing call is queued.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        wait_ms: float,
        *,
        clock: Clock | None = None,
    ) -> None:
        if not callable(fn):
            raise InvalidArgumentError("fn must be callable", argument="fn")
        if isinstance(wait_ms, bool) or not isinstance(wait_ms, (int, float)):
            raise InvalidArgumentError("wait_ms must be a number", argument="wait_ms")
        if not wait_ms > 0:
            raise InvalidArgumentError("wait_ms must be > 0", argument="wait_ms")
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._wait_ms = float(wait_ms)
        self._clock = clock or SystemClock()
        self._last_invoked_at: float | None = None
        self._last_result: Any = None
        self._pending_call: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._timer: TimerHandle | None = None
        self._timer_id = 0
        self._lock = threading.RLock()

    @property
    def wait_ms(self) -> float:
        return self._wait_ms

    @property
    def last_result(self) -> Any:
        return self._last_result

    @property
    def pending(self) -> bool:
        return self._pending_call is not None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            now = self._clock.now()
            if self._last_invoked_at is None or now - self._last_invoked_at >= self._wait_ms:
                self._clear_timer()
                self._pending_call = None
                return self._execute(now, args, kwargs)

            if self._timer is None:
                delay = self._last_invoked_at + self._wait_ms - now
                logger.debug("throttle deferred fn=%s delay_ms=%s", self._name(), delay)
                self._timer_id += 1
                self._timer = self._clock.schedule_after(
                    delay, functools.partial(self._fire, self._timer_id)
                )
            self._pending_call = (args, kwargs)
            return self._last_result

    def _fire(self, timer_id: int) -> None:
        with self._lock:
            # A leading call may have cancelled this timer after it started firing.
            if self._timer is None or timer_id != self._timer_id:
                return
            self._timer = None
            call = self._pending_call
            if call is None:
                return
            self._pending_call = None
            args, kwargs = call
            logger.debug("throttle trailing call fn=%s", self._name())
            self._execute(self._clock.now(), args, kwargs)

    def _execute(self, now: float, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        # Recorded first so a raising call still opens the cooldown window.
        self._last_invoked_at = now
        self._last_result = self._fn(*args, **kwargs)
        return self._last_result

    def _clear_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _name(self) -> str:
        return getattr(self._fn, "__qualname__", repr(self._fn))


def throttle(
    fn: Callable[..., Any],
    wait_ms: float,
    *,
    clock: Clock | None = None,
) -> Throttled:
    return Throttled(fn, wait_ms, clock=clock)


__all__ = [
    "Throttled",
    "throttle",
]
