"""Frame timing helpers."""

from __future__ import annotations

import time
from typing import Callable


class DeltaTimer:
    """Measures time between successive updates and the total elapsed time."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last = clock()
        self.delta_seconds = 0.0
        self.elapsed_seconds = 0.0

    def update(self) -> None:
        now = self._clock()
        self.delta_seconds = now - self._last
        self._last = now
        self.elapsed_seconds += self.delta_seconds

    def reset(self) -> None:
        self._last = self._clock()
        self.delta_seconds = 0.0
        self.elapsed_seconds = 0.0

    @property
    def delta_millis(self) -> float:
        return self.delta_seconds * 1000.0

    @property
    def delta_nanos(self) -> int:
        return int(self.delta_seconds * 1e9)


class LoopedExecutionWrapper:
    """Calls a function once for every full period of accumulated time."""

    def __init__(self, runnable: Callable[[], None], time_to_repeat: float) -> None:
        self._runnable = runnable
        self._time_to_repeat = time_to_repeat
        self._current_time = 0.0

    def update(self, delta_time: float) -> None:
        self._current_time += delta_time
        if self._current_time < self._time_to_repeat:
            return
        repeats = int(self._current_time / self._time_to_repeat)
        self._current_time -= repeats * self._time_to_repeat
        for _ in range(repeats):
            self._runnable()

    def reset(self) -> None:
        self._current_time = 0.0

    def set_repeat_time(self, time_to_repeat: float) -> None:
        if time_to_repeat < 0:
            raise ValueError("repeat time must not be negative")
        self._time_to_repeat = time_to_repeat
        self.reset()