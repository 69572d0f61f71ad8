"""
Elapsed-time bookkeeping between log lines.

Each Logger owns one ElapsedTimer. The timer only moves when a line is
actually printed, so suppressed calls never shorten the next reported
delta.
"""

import time
from typing import Callable, Optional


class ElapsedTimer:
    """Milliseconds since the previous emitted line.

    Usage::

        timer = ElapsedTimer()
        timer.elapsed_suffix()   # '+0'
        ...                      # 150ms of work
        timer.elapsed_suffix()   # '+150'

    Args:
        clock: Zero-argument callable returning a monotonic reading in
            nanoseconds. Defaults to time.monotonic_ns; tests inject a
            fake.
    """

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns):
        self._clock = clock
        self._last: Optional[int] = None

    @property
    def last(self) -> Optional[int]:
        """Clock reading of the previous stamp, or None before the first."""
        return self._last

    def elapsed_ms(self) -> Optional[int]:
        """Whole milliseconds since the last stamp (truncated), or None."""
        if self._last is None:
            return None
        return (self._clock() - self._last) // 1_000_000

    def stamp(self) -> None:
        """Record the current clock reading as the last emission time."""
        self._last = self._clock()

    def reset(self) -> None:
        """Forget the last stamp; the next suffix reports '+0'."""
        self._last = None

    def elapsed_suffix(self) -> str:
        """Format the delta marker for a line about to be emitted.

        Returns '+0' the first time, '+N' (N in whole milliseconds)
        afterward. The stamp is refreshed after the delta is taken.
        """
        ms = self.elapsed_ms()
        self.stamp()
        return f"+{ms or 0}"
