"""Tick timing helpers."""

from __future__ import annotations

import time


class TimeManager:
    """Produce the elapsed time of each tick fed to a path finder.

    In simulated mode every tick lasts exactly ``1 / tick_rate`` seconds and
    nothing sleeps. In realtime mode ticks are paced with ``time.sleep`` and
    the measured wall-clock delta is returned.
    """

    def __init__(self, tick_rate: float = 10.0, realtime: bool = False) -> None:
        if tick_rate <= 0:
            raise ValueError("tick_rate must be greater than zero")
        self.tick_rate: float = tick_rate
        self.realtime: bool = realtime
        self.tick_counter: int = 0
        self._last_tick: float = time.perf_counter()

    @property
    def interval(self) -> float:
        return 1.0 / self.tick_rate

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------
    def sleep_until_next_tick(self) -> float:
        """Wait for the next tick and return its elapsed seconds."""

        self.tick_counter += 1
        if not self.realtime:
            return self.interval

        previous = self._last_tick
        target = previous + self.interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_tick = target
        else:
            # We're behind schedule; start from current time
            self._last_tick = now
        return self._last_tick - previous


__all__ = ["TimeManager"]
