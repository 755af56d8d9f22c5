"""A time of day without a date, e.g. "7:00 PM".

Example:
    >>> WallClock(5, 30, 27, "pm")
    WallClock(5:30:27 PM)
    >>> WallClock.from_string("21:05").to_string("twenty_four_hour", use_seconds=False)
    '21:05'
"""

import re
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Literal, TypeAlias

from typing_extensions import override

from reltime.duration import Duration
from reltime.errors import InvalidArgument, InvalidMeridiem, TimeOutOfBounds
from reltime.util import DAY

HourSystem: TypeAlias = Literal["twelve_hour", "twenty_four_hour"]
Meridiem: TypeAlias = Literal["am", "pm"]

_HOUR_SYSTEMS = ("twelve_hour", "twenty_four_hour")

_WALL_CLOCK_PATTERN = re.compile(
    r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?(?:\s*([A-Za-z]+))?\s*$"
)


def _check_system(system: str) -> None:
    if system not in _HOUR_SYSTEMS:
        raise InvalidArgument(
            f"system should be 'twelve_hour' or 'twenty_four_hour', got {system!r}"
        )


class WallClock:
    """A time of day, stored as seconds since midnight (0 to 86399)."""

    __slots__ = ("_seconds",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        meridiem: str | None = None,
    ) -> None:
        """
        Args:
            hour: 0-23, or 0-12 when a meridiem is given (12 AM is midnight)
            minute: 0-59
            second: 0-59
            meridiem: "am" or "pm" (any case), or None for a 24-hour time

        Raises:
            InvalidMeridiem: meridiem is not "am"/"pm"
            TimeOutOfBounds: a field is out of range
        """
        if not (0 <= minute < 60 and 0 <= second < 60):
            raise TimeOutOfBounds(
                f"minute and second must be in 0-59, got {minute}:{second}"
            )

        if meridiem is not None:
            meridiem = meridiem.lower()
            if meridiem not in ("am", "pm"):
                raise InvalidMeridiem(
                    f"meridiem must be 'am' or 'pm', got {meridiem!r}"
                )
            if not (0 <= hour <= 12):
                raise TimeOutOfBounds(
                    f"hour must be 0-12 with a meridiem, got {hour} {meridiem.upper()}"
                )
            hour = hour % 12 + (12 if meridiem == "pm" else 0)
        elif not (0 <= hour < 24):
            raise TimeOutOfBounds(f"hour must be 0-23, got {hour}")

        duration = Duration(hours=hour, minutes=minute, seconds=second)
        self._seconds: int = duration.seconds

    @classmethod
    def from_seconds(cls, seconds: int) -> "WallClock":
        """Build from seconds since midnight, the inverse of ``int(wall_clock)``."""
        if not (0 <= seconds < DAY):
            raise TimeOutOfBounds(
                f"A WallClock must be within one day (0-{DAY - 1} seconds), "
                f"got {seconds}"
            )
        self = object.__new__(cls)
        self._seconds = seconds
        return self

    @classmethod
    def from_units(cls, units: Mapping[str, int]) -> "WallClock":
        """Build from unit quantities, e.g. ``{"hour": 1, "second": 30 * 60}``."""
        return Duration.from_units(units).to_wall()

    @classmethod
    def from_string(cls, string: str) -> "WallClock":
        """Parse "H:MM", "H:MM:SS", optionally followed by AM/PM.

        Example:
            >>> WallClock.from_string("9:00 PM") == WallClock(21, 0)
            True
        """
        match = _WALL_CLOCK_PATTERN.match(string)
        if match is None:
            raise InvalidArgument(
                f"Cannot parse {string!r} as a time of day\n"
                f"Examples: '9:00 PM', '13:00', '23:34:45', '11:00:01 pm'"
            )
        hour, minute, second, meridiem = match.groups()
        return cls(int(hour), int(minute), int(second or 0), meridiem)

    @property
    def _parts(self) -> dict[str, int]:
        return self.to_duration().to_units("hours", "minutes", "seconds")

    @property
    def hour(self) -> int:
        """Hour on the 24-hour clock (0-23)."""
        return self._parts["hours"]

    @property
    def minute(self) -> int:
        return self._parts["minutes"]

    @property
    def second(self) -> int:
        return self._parts["seconds"]

    @property
    def meridiem(self) -> Meridiem:
        return "pm" if self.hour >= 12 else "am"

    def hour_in(self, system: HourSystem = "twenty_four_hour") -> int:
        """Hour on the requested clock: 0-23, or 1-12 for "twelve_hour"."""
        _check_system(system)
        if system == "twelve_hour":
            return self.hour % 12 or 12
        return self.hour

    def in_seconds(self) -> int:
        return self._seconds

    def in_minutes(self) -> int:
        return self.to_duration().to_unit("minutes")

    def in_hours(self) -> int:
        return self.to_duration().to_unit("hours")

    def to_duration(self) -> Duration:
        return Duration(seconds=self._seconds)

    def on(self, day: date) -> datetime:
        """Place this time of day on a date. A datetime's own time is ignored."""
        if isinstance(day, datetime):
            midnight = datetime.combine(day.date(), time.min, tzinfo=day.tzinfo)
        else:
            midnight = datetime.combine(day, time.min)
        return midnight + timedelta(seconds=self._seconds)

    def to_string(
        self,
        system: HourSystem = "twelve_hour",
        *,
        use_seconds: bool = True,
        include_meridiem: bool = True,
    ) -> str:
        """Render the time, e.g. "5:37:41 PM" or "17:37".

        The meridiem is only ever added on the twelve-hour clock.
        """
        _check_system(system)
        parts = [str(self.hour_in(system)), f"{self.minute:02d}"]
        if use_seconds:
            parts.append(f"{self.second:02d}")

        text = ":".join(parts)
        if system == "twelve_hour" and include_meridiem:
            text = f"{text} {self.meridiem.upper()}"
        return text

    @override
    def __str__(self) -> str:
        return self.to_string()

    @override
    def __repr__(self) -> str:
        return f"WallClock({self})"

    def __int__(self) -> int:
        return self._seconds

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds == other._seconds

    @override
    def __hash__(self) -> int:
        return hash(self._seconds)

    def __lt__(self, other: "WallClock") -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds < other._seconds

    def __le__(self, other: "WallClock") -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds <= other._seconds

    def __gt__(self, other: "WallClock") -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds > other._seconds

    def __ge__(self, other: "WallClock") -> bool:
        if not isinstance(other, WallClock):
            return NotImplemented
        return self._seconds >= other._seconds
