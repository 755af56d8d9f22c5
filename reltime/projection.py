"""Calendar projection: applying a Duration to a point in time.

The duration is decomposed into years, months, days and seconds (whole
approximate months in the exact part count as months). Years and months move
the calendar, with the day of month clamped to the end of a shorter month;
days and seconds are then added as a raw timedelta. `before` is `after` of the
negated duration, so the two directions share one rollover and clamping path.
"""

import logging
from calendar import monthrange
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING

from reltime.errors import InvalidOperand
from reltime.util import MONTHS_PER_YEAR

if TYPE_CHECKING:
    from reltime.duration import Duration

logger = logging.getLogger(__name__)


def coerce_timestamp(timestamp: object) -> datetime:
    """Accept a datetime as-is, promote a date to midnight of that date.

    Raises:
        InvalidOperand: For any other type
    """
    if isinstance(timestamp, datetime):
        return timestamp
    if isinstance(timestamp, date):
        return datetime.combine(timestamp, time.min)
    raise InvalidOperand(
        f"Expected a datetime or date, got {type(timestamp).__name__!r}: "
        f"{timestamp!r}\n"
        f"Examples:\n"
        f"  duration.after(datetime(2000, 1, 31, 3, 45))\n"
        f"  duration.before(date(2000, 3, 31))"
    )


def days_in_month(year: int, month: int) -> int:
    return monthrange(year, month)[1]


def month_carry(month: int) -> tuple[int, int]:
    """Wrap a month number into 1..12.

    Returns (month, year carry), so month 13 is (1, +1) and month 0 is (12, -1).
    """
    year_carry, month_offset = divmod(month - 1, MONTHS_PER_YEAR)
    return month_offset + 1, year_carry


def build_date(year: int, month: int, day: int) -> date:
    """Build a date, wrapping the month and clamping the day to the month's end.

    Example:
        >>> build_date(2000, 2, 31)
        datetime.date(2000, 2, 29)
        >>> build_date(2017, 0, 15)
        datetime.date(2016, 12, 15)
    """
    new_month, year_carry = month_carry(month)
    new_year = year + year_carry

    last_day = days_in_month(new_year, new_month)
    if day > last_day:
        logger.debug(
            "Clamping day %d to %d for %04d-%02d", day, last_day, new_year, new_month
        )
        day = last_day

    return date(new_year, new_month, day)


def after(duration: "Duration", timestamp: date) -> datetime:
    """Return the moment `duration` later than `timestamp`.

    The duration is broken down into years, months, days and seconds first,
    so an exact part of 30 days or more also moves the calendar. Time of day,
    microseconds and tzinfo of the input are kept.

    Example:
        >>> after(Duration(months=1), datetime(2000, 1, 31, 3, 45))
        datetime.datetime(2000, 2, 29, 3, 45)
        >>> after(Duration(days=40), datetime(2000, 1, 31))
        datetime.datetime(2000, 3, 10, 0, 0)
    """
    moment = coerce_timestamp(timestamp)
    parts = duration.to_units("years", "months", "days", "seconds")

    target = build_date(
        moment.year + parts["years"], moment.month + parts["months"], moment.day
    )
    moved = moment.replace(year=target.year, month=target.month, day=target.day)

    return moved + timedelta(days=parts["days"], seconds=parts["seconds"])


def before(duration: "Duration", timestamp: date) -> datetime:
    """Return the moment `duration` earlier than `timestamp`."""
    return after(-duration, timestamp)
