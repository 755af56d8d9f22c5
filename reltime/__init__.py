from .clock import Clock, FixedClock, SystemClock
from .duration import Duration
from .errors import (
    InvalidArgument,
    InvalidMeridiem,
    InvalidOperand,
    ReltimeError,
    TimeOutOfBounds,
    UnknownUnit,
)
from .formatting import FORMATS, format_duration
from .projection import after, before
from .quantities import (
    centuries,
    days,
    decades,
    hours,
    millennia,
    minutes,
    months,
    seconds,
    weeks,
    years,
)
from .rounding import round_duration
from .units import NORMALIZATION_METHODS, UNITS, NormalizationMethod, Unit
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR
from .wall_clock import WallClock

__all__ = [
    "Duration",
    "WallClock",
    "after",
    "before",
    "format_duration",
    "round_duration",
    "FORMATS",
    "UNITS",
    "Unit",
    "NORMALIZATION_METHODS",
    "NormalizationMethod",
    "Clock",
    "SystemClock",
    "FixedClock",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "months",
    "years",
    "decades",
    "centuries",
    "millennia",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "ReltimeError",
    "UnknownUnit",
    "InvalidOperand",
    "InvalidArgument",
    "InvalidMeridiem",
    "TimeOutOfBounds",
]
