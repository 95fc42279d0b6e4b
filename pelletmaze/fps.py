"""Frames-per-second counter."""

from __future__ import annotations

import time
from typing import Callable


class FPSCounter:
    """Counts frames and reports how many fell in the last full second."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()
        self._frames = 0
        self.fps = 0

    def update(self) -> None:
        """Record one frame."""
        now = self._clock()
        if now - self._start >= 1.0:
            self.fps = self._frames
            self._frames = 0
            self._start = now
        self._frames += 1