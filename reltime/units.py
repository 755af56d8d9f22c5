"""The unit table: unit names, their scales, aliases and normalization presets.

Every unit is measured against one of two bases. Second-based units (seconds
through weeks) are exact; month-based units (months through millennia) are
calendar quantities whose length in seconds is only known approximately. The
tables below are built once at import time and are read-only afterwards, so
they can be shared freely between threads.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, TypeAlias

from reltime.errors import InvalidArgument, UnknownUnit
from reltime.util import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    MONTHS_PER_YEAR,
    SECOND,
    WEEK,
    YEAR,
)

Basis: TypeAlias = Literal["seconds", "months"]

BASES: tuple[Basis, ...] = ("seconds", "months")


@dataclass(frozen=True)
class Unit:
    """A unit's scale, expressed as a count of its basis."""

    basis: Basis
    scale: int

    @property
    def sort_key(self) -> tuple[int, int]:
        """(months, seconds) magnitude; any month-based unit outranks a week."""
        if self.basis == "months":
            return (self.scale, 0)
        return (0, self.scale)


UNITS: Mapping[str, Unit] = MappingProxyType(
    {
        "seconds": Unit("seconds", SECOND),
        "minutes": Unit("seconds", MINUTE),
        "hours": Unit("seconds", HOUR),
        "days": Unit("seconds", DAY),
        "weeks": Unit("seconds", WEEK),
        "months": Unit("months", 1),
        "years": Unit("months", MONTHS_PER_YEAR),
        "decades": Unit("months", 10 * MONTHS_PER_YEAR),
        "centuries": Unit("months", 100 * MONTHS_PER_YEAR),
        "millennia": Unit("months", 1000 * MONTHS_PER_YEAR),
    }
)

# Singular form -> canonical (plural) name
SINGULARS: Mapping[str, str] = MappingProxyType(
    {
        "second": "seconds",
        "minute": "minutes",
        "hour": "hours",
        "day": "days",
        "week": "weeks",
        "month": "months",
        "year": "years",
        "decade": "decades",
        "century": "centuries",
        "millennium": "millennia",
    }
)

UNIT_ALIASES: Mapping[str, Unit] = MappingProxyType(
    {
        **UNITS,
        **{singular: UNITS[plural] for singular, plural in SINGULARS.items()},
    }
)


@dataclass(frozen=True)
class NormalizationMethod:
    """Approximate lengths of a month and a year, in seconds.

    Only used to convert between the seconds and months bases. A caller may
    build their own and pass it anywhere a preset name is accepted.
    """

    month: int
    year: int

    def __post_init__(self) -> None:
        if self.month <= 0 or self.year <= 0:
            raise InvalidArgument(
                f"Normalization lengths must be positive, "
                f"got month={self.month}, year={self.year}"
            )

    @property
    def steps(self) -> tuple[tuple[str, int], ...]:
        """(unit, seconds per unit) pairs, largest unit first."""
        return (("years", self.year), ("months", self.month))


NORMALIZATION_METHODS: Mapping[str, NormalizationMethod] = MappingProxyType(
    {
        "standard": NormalizationMethod(month=MONTH, year=YEAR),
        "minimum": NormalizationMethod(month=28 * DAY, year=365 * DAY),
        "maximum": NormalizationMethod(month=31 * DAY, year=366 * DAY),
    }
)

DEFAULT_METHOD = "standard"


def resolve_unit(name: str) -> Unit:
    """Return the scale entry for a canonical unit name or an alias.

    Raises:
        UnknownUnit: If the name is not in the unit table
    """
    if not isinstance(name, str) or name not in UNIT_ALIASES:
        raise UnknownUnit(name, valid=list(UNIT_ALIASES))
    return UNIT_ALIASES[name]


def canonical_name(name: str) -> str:
    """Return the plural form of a unit name, e.g. "hour" -> "hours"."""
    resolve_unit(name)
    return SINGULARS.get(name, name)


def resolve_method(method: "str | NormalizationMethod") -> NormalizationMethod:
    if isinstance(method, NormalizationMethod):
        return method
    if method not in NORMALIZATION_METHODS:
        valid = ", ".join(NORMALIZATION_METHODS)
        raise InvalidArgument(
            f"Unknown normalization method: {method!r}\n"
            f"Valid methods: {valid}\n"
            f"Or pass a NormalizationMethod(month=..., year=...)"
        )
    return NORMALIZATION_METHODS[method]


def sort_units(names: Iterable[str]) -> list[str]:
    """Order unit names from smallest to largest magnitude.

    Names keep their original spelling; only the order changes.
    """
    return sorted(names, key=lambda name: resolve_unit(name).sort_key)


def div(x: int, divisor: int) -> int:
    """Integer division that truncates toward zero instead of flooring."""
    quotient = abs(x) // abs(divisor)
    return quotient if (x < 0) == (divisor < 0) else -quotient
