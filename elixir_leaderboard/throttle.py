"""Fixed-interval request gate."""

import time


class Throttle:
    """Space requests so that at least ``interval`` seconds separate them.

    The gap is measured from the last ``touch()`` (the end of the previous
    request) or, if nothing was touched, from the last ``wait()``. The first
    ``wait()`` never blocks.
    """

    def __init__(self, interval: float, clock=None, sleep=None):
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self.interval = interval
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self._last: float | None = None

    def wait(self) -> float:
        """Block until the interval has elapsed. Returns seconds slept."""
        slept = 0.0
        if self._last is not None:
            remaining = self.interval - (self._clock() - self._last)
            if remaining > 0:
                self._sleep(remaining)
                slept = remaining
        self._last = self._clock()
        return slept

    def touch(self) -> None:
        """Mark the end of a request."""
        self._last = self._clock()
