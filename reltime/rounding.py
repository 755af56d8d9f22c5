"""Rounding a Duration to a number of significant units ("places").

The duration is broken down into customary units (decades and weeks left out
by default), the largest `places` non-zero units are kept, and whatever is
left over rounds the smallest kept unit half-up:

    3 days, 4 hours, 31 minutes  ->  3 days, 5 hours
    3 days, 4 hours, 29 minutes  ->  3 days, 4 hours

Negative durations round half away from zero.
"""

import logging
from collections.abc import Iterable

from reltime.duration import Duration
from reltime.errors import InvalidArgument
from reltime.units import UNITS, canonical_name

logger = logging.getLogger(__name__)

DEFAULT_PLACES = 2
OMITTED_UNITS: tuple[str, ...] = ("decades", "weeks")


def split_terms(
    duration: Duration, places: int, omitted: Iterable[str] = OMITTED_UNITS
) -> tuple[list[Duration], list[Duration], str]:
    """Split `duration` into kept terms, remainder terms and the target unit.

    The target unit is the least significant kept unit, the one rounding
    adjusts. A zero duration yields no terms and targets seconds.
    """
    skipped = {canonical_name(unit) for unit in omitted}
    names = [unit for unit in UNITS if unit not in skipped]

    parts = {unit: n for unit, n in duration.to_units(*names).items() if n != 0}
    places = min(places, len(parts))

    units = list(parts)
    target_unit = units[places - 1] if parts else "seconds"

    terms = [Duration(**{unit: n}) for unit, n in parts.items()]
    return terms[:places], terms[places:], target_unit


def round_duration(
    duration: Duration,
    places: int = DEFAULT_PLACES,
    omitted: Iterable[str] = OMITTED_UNITS,
) -> Duration:
    """Round `duration` to its `places` most significant units.

    Example:
        >>> round_duration(Duration(hours=12, minutes=16, seconds=47)).to_string()
        '12 hours, 17 minutes'
    """
    if isinstance(places, bool) or not isinstance(places, int) or places < 1:
        raise InvalidArgument(f"places must be a positive int, got {places!r}")

    kept, remainder_terms, target_unit = split_terms(duration, places, omitted)

    rounded = sum(kept, Duration())
    remainder = sum(remainder_terms, Duration())

    # Twice the remainder reaches one whole target unit iff it is at least half
    offset = (remainder * 2).to_unit(target_unit)
    if offset:
        logger.debug("Rounding %s by %d %s", rounded, offset, target_unit)

    return rounded + Duration(**{target_unit: offset})
