"""Clock sources used for expiration and audit timestamps.

Expiration instants are whole epoch seconds, matching the ``expire_time``
field of the persisted document. The store never reads the system time
directly; it asks the clock it was built with.
"""

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current time in epoch seconds."""

    def now(self) -> int:
        ...


class SystemClock:
    """Wall-clock time, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """A clock that only moves when told to.

    Useful for driving expiration deterministically, e.g. in tests or when
    replaying a recorded session.
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("Clock cannot start before the epoch")
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> int:
        """Move the clock forward and return the new time."""
        if seconds < 0:
            raise ValueError("Clock cannot move backwards")
        self._now += seconds
        return self._now

    def set(self, timestamp: int) -> None:
        if timestamp < self._now:
            raise ValueError("Clock cannot move backwards")
        self._now = timestamp

    def __repr__(self) -> str:
        return f"ManualClock(now={self._now})"
