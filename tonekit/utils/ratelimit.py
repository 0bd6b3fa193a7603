"""A token limiter whose per-second allowance climbs gradually to its ceiling."""

from __future__ import annotations

import threading
import time
from types import TracebackType
from typing import Optional

_SECOND_NS = 1_000_000_000


def _step(limit: int, period: int) -> int:
    if period == 0:
        raise ValueError("warm-up period must not be zero")
    return max(limit // period, 1)


class WarmingUpRateLimiter:
    """Limits calls per second, raising the allowance by a step each second up to max_token.

    A background thread calls tick() every second unless auto_tick is False.
    """

    def __init__(self, max_token: int, warm_up_period: int, auto_tick: bool = True):
        if max_token <= 0:
            raise ValueError("max_token must be positive")
        step = _step(max_token, warm_up_period)
        self._max_token = max_token
        self._warm_up_period = warm_up_period
        self._step_size = step
        self._current_max = step
        self._last_qps = 0
        self._current_qps = 0
        self._interval_ns = _SECOND_NS // (2 * step)
        self._last_access = time.monotonic_ns()
        self._cond = threading.Condition()
        self._stop = threading.Event()
        self._ticker: Optional[threading.Thread] = None
        if auto_tick:
            self._ticker = threading.Thread(target=self._run_ticker, daemon=True)
            self._ticker.start()

    def _run_ticker(self) -> None:
        while not self._stop.wait(1.0):
            self.tick()

    def take(self) -> None:
        """Block until a token is available and consume it."""
        with self._cond:
            while True:
                if self._current_qps < self._current_max:
                    now = time.monotonic_ns()
                    desire = self._last_access + self._interval_ns
                    if now < desire:
                        self._cond.wait((desire - now) / _SECOND_NS)
                        continue
                    self._last_access = now
                    self._current_qps += 1
                    return
                self._cond.wait()

    def tick(self) -> None:
        """Close the current second and raise the allowance for the next one."""
        with self._cond:
            self._last_qps = self._current_qps
            self._current_qps = 0
            self._current_max = min(self._last_qps + self._step_size, self._max_token)
            self._interval_ns = _SECOND_NS // (2 * self._current_max)
            self._cond.notify_all()

    def set_limit(self, limit: int) -> None:
        """Change the ceiling, keeping the warm-up period."""
        self.set_limit_and_warming_period(limit, self._warm_up_period)

    def set_warm_up_period(self, period: int) -> None:
        """Change the warm-up period, keeping the ceiling."""
        self.set_limit_and_warming_period(self._max_token, period)

    def set_limit_and_warming_period(self, limit: int, period: int) -> None:
        """Change ceiling and warm-up period; a non-positive limit is ignored."""
        if limit <= 0:
            return
        step = _step(limit, period)
        with self._cond:
            self._max_token = limit
            self._warm_up_period = period
            self._step_size = step

    def current_status(self) -> tuple[int, int, int, int]:
        """Return (last second's count, ceiling, current allowance, warm-up period)."""
        with self._cond:
            return self._last_qps, self._max_token, self._current_max, self._warm_up_period

    def close(self) -> None:
        """Stop the background ticker."""
        self._stop.set()
        ticker = self._ticker
        if ticker is not None and ticker is not threading.current_thread():
            ticker.join()

    def __enter__(self) -> "WarmingUpRateLimiter":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()