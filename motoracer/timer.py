"""Frame timing: delta time measurement and frame-rate capping."""

from __future__ import annotations

import time
from typing import Callable, Optional

FPS = 60
FRAME_DELAY = 1000 // FPS
MAX_DT = 50


class Timer:
    """Measures milliseconds between frames and waits to hold the frame rate.

    ``clock`` returns the current time in whole milliseconds; ``sleep`` waits
    for a number of seconds.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], int]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        if clock is None:
            origin = time.monotonic_ns()

            def clock() -> int:
                return (time.monotonic_ns() - origin) // 1_000_000

        self._clock = clock
        self._sleep = sleep if sleep is not None else time.sleep
        self.frame_start = 0
        self.last_frame = 0
        self.frame_time = 0

    def compute_delta_time(self) -> int:
        """Milliseconds since the previous frame, clamped to ``MAX_DT``."""
        self.frame_start = self._clock()
        dt = self.frame_start - self.last_frame
        self.last_frame = self.frame_start
        if dt < 0:
            return MAX_DT
        return min(dt, MAX_DT)

    def delay_time(self) -> None:
        """Sleep for what remains of the frame when it ran faster than ``FPS``."""
        self.frame_time = self._clock() - self.frame_start
        if self.frame_time < FRAME_DELAY:
            self._sleep((FRAME_DELAY - self.frame_time) / 1000.0)