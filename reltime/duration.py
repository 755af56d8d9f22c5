"""The Duration value type.

A Duration holds two independent integers: `seconds`, the exact part (seconds
through weeks), and `months`, the calendar part (months through millennia).
The two are never converted into one another implicitly; `normalize` and
`denormalize` do it explicitly, using an approximate month/year length, and
that conversion is lossy by nature.

Durations are immutable. Every operation returns a new value.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING, Any

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from reltime import projection
from reltime.clock import Clock, current_time
from reltime.errors import InvalidArgument, InvalidOperand, TimeOutOfBounds
from reltime.formatting import Format, format_duration, resolve_format
from reltime.units import (
    BASES,
    DEFAULT_METHOD,
    NormalizationMethod,
    div,
    resolve_method,
    resolve_unit,
    sort_units,
)
from reltime.util import DAY, HOUR, MINUTE, MONTHS_PER_YEAR

if TYPE_CHECKING:
    from reltime.wall_clock import WallClock


def _check_quantity(unit: str, count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgument(
            f"Unit quantities must be int, got {unit}={count!r} "
            f"({type(count).__name__})"
        )
    return count


def _is_zero(other: Any) -> bool:
    return type(other) is int and other == 0


@dataclass(frozen=True, eq=False, init=False)
class Duration:
    """A relative amount of time, e.g. "5 minutes" or "1 year, 2 days".

    Build one from any mix of units (singular or plural names):

        >>> Duration(hours=1, days=2, year=10)
        Duration(seconds=176400, months=120)

    Comparison normalizes both sides first, so `Duration(years=1)` equals
    `Duration(days=365)` under the standard method.
    """

    seconds: int
    months: int

    def __init__(self, **units: int) -> None:
        seconds = 0
        months = 0
        for unit, count in units.items():
            info = resolve_unit(unit)
            count = _check_quantity(unit, count)
            if info.basis == "seconds":
                seconds += count * info.scale
            else:
                months += count * info.scale

        object.__setattr__(self, "seconds", seconds)
        object.__setattr__(self, "months", months)

    @classmethod
    def from_units(cls, units: Mapping[str, int]) -> "Duration":
        """Build from a mapping of unit name to quantity."""
        return cls(**units)

    @classmethod
    def from_dict(cls, data: Mapping[str, int]) -> "Duration":
        """Inverse of :meth:`as_dict`. Only "seconds" and "months" are accepted."""
        extra = set(data) - set(BASES)
        if extra:
            raise InvalidArgument(
                f"Expected only 'seconds' and 'months', got {sorted(extra)}"
            )
        return cls(seconds=data.get("seconds", 0), months=data.get("months", 0))

    def as_dict(self) -> dict[str, int]:
        """The canonical, exactly round-trippable form of this duration."""
        return {"seconds": self.seconds, "months": self.months}

    def get(self, basis: str) -> int:
        """Return one of the two raw components, "seconds" or "months".

        Raises:
            InvalidArgument: For any other name (including unit aliases)
        """
        if basis == "seconds":
            return self.seconds
        if basis == "months":
            return self.months
        raise InvalidArgument(
            f"get() takes 'seconds' or 'months', got {basis!r}\n"
            f"Hint: use to_unit({basis!r}) to convert to another unit"
        )

    # Conversion

    def to_unit(self, unit: str) -> int:
        """Express the whole duration in one unit, truncating toward zero.

        Second-based units normalize first; month-based units denormalize first.

        Example:
            >>> Duration(months=1).to_unit("days")
            30
            >>> Duration(days=366).to_unit("months")
            12
            >>> Duration(seconds=-1).to_unit("minutes")
            0
        """
        info = resolve_unit(unit)
        if info.basis == "seconds":
            return div(self.normalize().seconds, info.scale)
        return div(self.denormalize().months, info.scale)

    def _to_unit_part(self, unit: str) -> int:
        # Like to_unit, but counts only the unit's own basis (no normalization)
        info = resolve_unit(unit)
        return div(self.get(info.basis), info.scale)

    def to_units(self, *units: str) -> dict[str, int]:
        """Break the duration down into the given units.

        Units are taken largest first; each one receives what is left after the
        larger ones. Keys are the names exactly as passed, ordered largest first.

        Example:
            >>> Duration(minutes=90).to_units("hours", "minutes")
            {'hours': 1, 'minutes': 30}
            >>> Duration(years=2, months=14).to_units("years", "hours")
            {'years': 3, 'hours': 1440}
        """
        parts: dict[str, int] = {}
        remainder = self
        for unit in reversed(sort_units(units)):
            part = remainder.to_unit(unit)
            remainder -= Duration(**{unit: part})
            parts[unit] = part
        return parts

    def normalize(
        self, method: "str | NormalizationMethod" = DEFAULT_METHOD
    ) -> "Duration":
        """Replace the months component with its approximate length in seconds.

        Whole years in the months component are converted at the method's year
        length, the leftover months at its month length.

        Example:
            >>> Duration(months=14).normalize().seconds == (365 + 2 * 30) * DAY
            True
        """
        normal = resolve_method(method)

        normalized = 0
        remainder = self
        for unit, seconds_per_unit in normal.steps:
            part = remainder._to_unit_part(unit)
            normalized += part * seconds_per_unit
            remainder -= Duration(**{unit: part})

        return Duration(seconds=normalized) + remainder

    def denormalize(
        self, method: "str | NormalizationMethod" = DEFAULT_METHOD
    ) -> "Duration":
        """Move as much of the seconds component as possible into months.

        Whole approximate years are taken first, then whole approximate months;
        the leftover seconds stay in the seconds component.

        Example:
            >>> Duration(months=1, days=100).denormalize().to_units("months", "days")
            {'months': 4, 'days': 10}
        """
        normal = resolve_method(method)

        denormalized = Duration()
        remainder = self
        for unit, seconds_per_unit in normal.steps:
            count = div(remainder.seconds, seconds_per_unit)
            denormalized += Duration(**{unit: count})
            remainder -= Duration(seconds=count * seconds_per_unit)

        return denormalized + remainder

    # Calendar projection

    def after(self, timestamp: date) -> datetime:
        """The moment this duration later than `timestamp`.

        Example:
            >>> Duration(months=1).after(datetime(2000, 1, 31, 3, 45))
            datetime.datetime(2000, 2, 29, 3, 45)
        """
        return projection.after(self, timestamp)

    def before(self, timestamp: date) -> datetime:
        """The moment this duration earlier than `timestamp`.

        Example:
            >>> Duration(months=1).before(datetime(2000, 3, 31, 3, 45))
            datetime.datetime(2000, 2, 29, 3, 45)
        """
        return projection.before(self, timestamp)

    def ago(self, clock: Clock | None = None) -> datetime:
        return self.before(current_time(clock))

    def from_now(self, clock: Clock | None = None) -> datetime:
        return self.after(current_time(clock))

    @classmethod
    def between(cls, start: date, end: date) -> "Duration":
        """The exact time from `start` to `end` (negative if `end` is earlier).

        Sub-second differences are truncated toward zero.
        """
        delta = projection.coerce_timestamp(end) - projection.coerce_timestamp(start)
        return cls.from_timedelta(delta)

    @classmethod
    def since(cls, timestamp: date, clock: Clock | None = None) -> "Duration":
        return cls.between(timestamp, current_time(clock))

    @classmethod
    def until(cls, timestamp: date, clock: Clock | None = None) -> "Duration":
        return cls.between(current_time(clock), timestamp)

    # Interop

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Build from a timedelta; microseconds are truncated toward zero."""
        seconds = delta.days * DAY + delta.seconds
        microseconds = seconds * 1_000_000 + delta.microseconds
        return cls(seconds=div(microseconds, 1_000_000))

    def to_timedelta(
        self, method: "str | NormalizationMethod" = DEFAULT_METHOD
    ) -> timedelta:
        """Convert to a timedelta, normalizing any months component first."""
        return timedelta(seconds=self.normalize(method).seconds)

    @classmethod
    def from_relativedelta(cls, delta: relativedelta) -> "Duration":
        """Build from the relative fields of a dateutil relativedelta.

        Raises:
            InvalidArgument: If the relativedelta sets absolute fields
                (year, month, day, weekday, ...) or leapdays, or holds
                microseconds or a fractional day, hour, minute or second
        """
        absolute = [
            name
            for name in (
                "year",
                "month",
                "day",
                "weekday",
                "hour",
                "minute",
                "second",
                "microsecond",
            )
            if getattr(delta, name) is not None
        ]
        if absolute or delta.leapdays:
            raise InvalidArgument(
                f"Only relative relativedelta fields can become a Duration, "
                f"got absolute fields {absolute or ['leapdays']}\n"
                f"Example: relativedelta(years=1, days=2)"
            )

        inexact = [
            name
            for name in ("days", "hours", "minutes", "seconds")
            if getattr(delta, name) != int(getattr(delta, name))
        ]
        if delta.microseconds:
            inexact.append("microseconds")
        if inexact:
            raise InvalidArgument(
                f"A Duration holds whole seconds, got sub-second or fractional "
                f"relativedelta fields {inexact}\n"
                f"Hint: round the relativedelta to whole seconds first"
            )

        seconds = (
            delta.days * DAY
            + delta.hours * HOUR
            + delta.minutes * MINUTE
            + delta.seconds
        )
        return cls(
            seconds=int(seconds),
            months=int(delta.years * MONTHS_PER_YEAR + delta.months),
        )

    def to_relativedelta(self) -> relativedelta:
        """Convert to an equivalent dateutil relativedelta.

        Adding it to a datetime matches :meth:`after` only while the seconds
        component is shorter than one approximate month; :meth:`after` turns
        30 days or more into calendar months first.
        """
        return relativedelta(months=self.months, seconds=self.seconds)

    def to_wall(self) -> "WallClock":
        """Interpret an exact, sub-day duration as a time of day.

        Raises:
            TimeOutOfBounds: If there is a months component or the seconds
                fall outside a single day
        """
        from reltime.wall_clock import WallClock

        if self.months != 0:
            raise TimeOutOfBounds(
                f"Cannot convert a duration with months ({self}) to a WallClock"
            )
        return WallClock.from_seconds(self.seconds)

    # Formatting

    def to_string(self, format: Format = "long", **options: Any) -> str:
        """Render as text using a preset ("micro", "short", "long", "min_long")
        or a custom format mapping. See :mod:`reltime.formatting`.

        Example:
            >>> Duration(years=1, months=3, days=4).to_string()
            '1 year, 3 months, 4 days'
            >>> Duration(years=1, months=3, days=4).to_string("micro")
            '1y'
        """
        return format_duration(self, format, **options)

    def to_rounded_string(self, format: Format = "min_long", **options: Any) -> str:
        """Like :meth:`to_string`, but rounds the last shown unit half-up.

        Example:
            >>> Duration(days=3, hours=4, minutes=31).to_rounded_string()
            '3 days, 5 hours'
        """
        from reltime.rounding import DEFAULT_PLACES, round_duration

        syntax = resolve_format(format, **options)
        count = syntax.get("count")
        if count == "all":
            rounded = self
        else:
            rounded = round_duration(self, DEFAULT_PLACES if count is None else count)
        return format_duration(rounded, syntax)

    @override
    def __str__(self) -> str:
        return self.to_string()

    # Comparison

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_unit("seconds") == other.to_unit("seconds")

    @override
    def __hash__(self) -> int:
        return hash(self.to_unit("seconds"))

    def __lt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_unit("seconds") < other.to_unit("seconds")

    def __le__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_unit("seconds") <= other.to_unit("seconds")

    def __gt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_unit("seconds") > other.to_unit("seconds")

    def __ge__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_unit("seconds") >= other.to_unit("seconds")

    def __bool__(self) -> bool:
        return bool(self.seconds or self.months)

    # Arithmetic

    def __add__(self, other: Any) -> Any:
        """Add another Duration (component-wise) or project onto a date/datetime.

        Adding the int 0 returns the duration unchanged, so `sum()` works.
        """
        if isinstance(other, Duration):
            return Duration(
                seconds=self.seconds + other.seconds,
                months=self.months + other.months,
            )
        if isinstance(other, date):
            return self.after(other)
        if _is_zero(other):
            return self
        raise InvalidOperand(
            f"Cannot add {type(other).__name__!r} to Duration {self}\n"
            f"Hint: add a Duration, a date or a datetime"
        )

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Duration":
        if isinstance(other, Duration):
            return Duration(
                seconds=self.seconds - other.seconds,
                months=self.months - other.months,
            )
        if _is_zero(other):
            return self
        if isinstance(other, date):
            raise InvalidOperand(
                f"Cannot subtract a {type(other).__name__} from Duration {self}\n"
                f"Hint: use `timestamp - duration` or `duration.before(timestamp)`"
            )
        raise InvalidOperand(
            f"Cannot subtract {type(other).__name__!r} from Duration {self}"
        )

    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, date):
            return self.before(other)
        if _is_zero(other):
            return -self
        raise InvalidOperand(
            f"Cannot subtract Duration {self} from {type(other).__name__!r}"
        )

    def __neg__(self) -> "Duration":
        return Duration(seconds=-self.seconds, months=-self.months)

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return -self if self < Duration() else self

    def __mul__(self, other: Any) -> "Duration":
        if isinstance(other, bool) or not isinstance(other, int):
            raise InvalidOperand(
                f"Cannot multiply Duration {self} by {type(other).__name__!r}\n"
                f"Hint: durations scale by int only"
            )
        return Duration(seconds=self.seconds * other, months=self.months * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Duration":
        """Divide each component by an int, truncating each toward zero.

        The components are truncated independently, so the result is not
        always proportional to the original (`Duration(months=1, days=1) / 2`
        keeps no months but half a day).
        """
        if isinstance(other, bool) or not isinstance(other, int):
            raise InvalidOperand(
                f"Cannot divide Duration {self} by {type(other).__name__!r}\n"
                f"Hint: durations divide by int only"
            )
        if other == 0:
            raise ZeroDivisionError(f"Cannot divide Duration {self} by zero")
        return Duration(
            seconds=div(self.seconds, other), months=div(self.months, other)
        )

    __floordiv__ = __truediv__
