"""
Timing utility for throttling periodic work inside the frame loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Gate that opens at most once per interval.

    The frame loop runs every ~16ms; periodic housekeeping such as resource
    usage logging goes through this gate instead.

    Example:
        self._usage_gate = OnceInMs(60000)

        # every frame
        if self._usage_gate.should_execute():
            self._log_memory_usage()
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Seconds source, monotonic by default
        """
        self.interval_ms = interval_ms
        self._interval = interval_ms / 1000.0
        self._clock = clock
        self._last_execution = None

    def should_execute(self) -> bool:
        """Return True (and restart the interval) if the interval has passed"""
        now = self._clock()
        if self._last_execution is None or now - self._last_execution >= self._interval:
            self._last_execution = now
            return True
        return False

    def reset(self) -> None:
        """Open the gate on the next check"""
        self._last_execution = None

    def remaining_ms(self) -> float:
        """Milliseconds until the gate opens again (0 when already open)"""
        if self._last_execution is None:
            return 0.0
        elapsed_ms = (self._clock() - self._last_execution) * 1000
        return max(0.0, self.interval_ms - elapsed_ms)
