"""Sources of "now" for the relative helpers (`ago`, `from_now`, `since`, `until`).

The system clock is the only ambient state reltime reads. It is passed in
explicitly wherever it is needed, so tests can pin it with a FixedClock.
"""

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current moment."""
        ...


@dataclass(frozen=True)
class SystemClock:
    """Reads the host clock. Naive local time unless a tzinfo is given."""

    tz: tzinfo | None = None

    def now(self) -> datetime:
        return datetime.now(self.tz)


@dataclass(frozen=True)
class FixedClock:
    """Always returns the same moment."""

    at: datetime

    def now(self) -> datetime:
        return self.at


SYSTEM_CLOCK: Clock = SystemClock()


def current_time(clock: Clock | None = None) -> datetime:
    """Return `clock.now()`, falling back to the system clock."""
    if clock is None:
        clock = SYSTEM_CLOCK
    return clock.now()
