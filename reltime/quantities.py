"""Shorthand constructors for single-unit durations.

    >>> from reltime.quantities import minutes, months
    >>> minutes(5) + months(3)
    Duration(seconds=300, months=3)

Singular aliases (`minute`, `month`, ...) read better for a count of one.
"""

from reltime.duration import Duration


def seconds(n: int, /) -> Duration:
    return Duration(seconds=n)


def minutes(n: int, /) -> Duration:
    return Duration(minutes=n)


def hours(n: int, /) -> Duration:
    return Duration(hours=n)


def days(n: int, /) -> Duration:
    return Duration(days=n)


def weeks(n: int, /) -> Duration:
    return Duration(weeks=n)


def months(n: int, /) -> Duration:
    return Duration(months=n)


def years(n: int, /) -> Duration:
    return Duration(years=n)


def decades(n: int, /) -> Duration:
    return Duration(decades=n)


def centuries(n: int, /) -> Duration:
    return Duration(centuries=n)


def millennia(n: int, /) -> Duration:
    return Duration(millennia=n)


second = seconds
minute = minutes
hour = hours
day = days
week = weeks
month = months
year = years
decade = decades
century = centuries
millennium = millennia
