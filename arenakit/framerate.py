"""A frame-rate limiter that spaces frames evenly in time."""

from __future__ import annotations

import time
from typing import Callable

FPS_UPPER_LIMIT = 200
FPS_LOWER_LIMIT = 1
FPS_DEFAULT = 30

_MASK32 = 0xFFFFFFFF
_START = time.monotonic()


def _default_clock() -> int:
    return int((time.monotonic() - _START) * 1000) & _MASK32


def _default_sleep(ms: int) -> None:
    time.sleep(ms / 1000)


class FramerateManager:
    """Keeps a loop running at a steady number of frames per second.

    ``clock`` returns milliseconds and ``sleep`` waits for a number of milliseconds.
    """

    def __init__(
        self,
        clock: Callable[[], int] = _default_clock,
        sleep: Callable[[int], None] = _default_sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self.framecount = 0
        self.rate = FPS_DEFAULT
        self.rate_ticks = 1000.0 / FPS_DEFAULT
        self.base_ticks = 0
        self.last_ticks = 0
        self.reset()

    def _ticks(self) -> int:
        # a base of zero marks an uninitialised manager, so never report 0
        return self._clock() or 1

    def reset(self) -> None:
        """Return to the default rate and restart timing."""
        self.framecount = 0
        self.rate = FPS_DEFAULT
        self.rate_ticks = 1000.0 / FPS_DEFAULT
        self.base_ticks = self._ticks()
        self.last_ticks = self.base_ticks

    def set_framerate(self, rate: int) -> None:
        """Set the target rate in Hz; raise ValueError outside the allowed range."""
        if not FPS_LOWER_LIMIT <= rate <= FPS_UPPER_LIMIT:
            raise ValueError(
                f"frame rate must be between {FPS_LOWER_LIMIT} and {FPS_UPPER_LIMIT}, got {rate}"
            )
        self.framecount = 0
        self.rate = rate
        self.rate_ticks = 1000.0 / rate

    def delay(self) -> int:
        """Wait until the next frame is due; return milliseconds since the last call."""
        if self.base_ticks == 0:
            self.reset()
        self.framecount += 1
        current = self._ticks()
        passed = (current - self.last_ticks) & _MASK32
        self.last_ticks = current
        target = (self.base_ticks + int(self.framecount * self.rate_ticks)) & _MASK32
        if current <= target:
            self._sleep(target - current)
        else:
            self.framecount = 0
            self.base_ticks = self._ticks()
        return passed