"""Rendering durations as human-readable text.

Formats are plain data: a mapping of unit name to label, a separator placed
between a quantity and its label, a delimiter placed between unit groups, and
a count of how many of the largest non-zero units to show. A label is either a
single string or a (singular, plural) pair.

The units listed in a format are the only ones a duration is decomposed into,
so leaving a unit out of a format (weeks in `micro`, say) hides it.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from reltime.errors import InvalidArgument
from reltime.units import UNITS, sort_units

if TYPE_CHECKING:
    from reltime.duration import Duration

Label: TypeAlias = "str | tuple[str, str]"
Format: TypeAlias = "str | Mapping[str, Any]"

_LONG_UNITS: Mapping[str, Label] = MappingProxyType(
    {
        "seconds": ("second", "seconds"),
        "minutes": ("minute", "minutes"),
        "hours": ("hour", "hours"),
        "days": ("day", "days"),
        "weeks": ("week", "weeks"),
        "months": ("month", "months"),
        "years": ("year", "years"),
        "centuries": ("century", "centuries"),
        "millennia": ("millennium", "millennia"),
    }
)

FORMATS: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        "micro": MappingProxyType(
            {
                "units": MappingProxyType(
                    {
                        "seconds": "s",
                        "minutes": "m",
                        "hours": "h",
                        "days": "d",
                        "weeks": "w",
                        "months": "mo",
                        "years": "y",
                    }
                ),
                "separator": "",
                "delimiter": " ",
                "count": 1,
            }
        ),
        "short": MappingProxyType(
            {
                "units": MappingProxyType(
                    {
                        "seconds": "sec",
                        "minutes": "min",
                        "hours": "hr",
                        "days": "d",
                        "weeks": "wk",
                        "months": "mo",
                        "years": "yr",
                        "centuries": "ct",
                        "millennia": "ml",
                    }
                ),
                "separator": "",
                "delimiter": " ",
                "count": 2,
            }
        ),
        "long": MappingProxyType(
            {
                "units": _LONG_UNITS,
                "separator": " ",
                "delimiter": ", ",
                "count": None,
            }
        ),
        # Used for rounded output: long labels, years at most, two places
        "min_long": MappingProxyType(
            {
                "units": MappingProxyType(
                    {
                        unit: label
                        for unit, label in _LONG_UNITS.items()
                        if unit not in ("centuries", "millennia")
                    }
                ),
                "separator": " ",
                "delimiter": ", ",
                "count": 2,
            }
        ),
    }
)

_FORMAT_KEYS = frozenset(("units", "separator", "delimiter", "count"))


def resolve_format(format: Format = "long", **options: Any) -> dict[str, Any]:
    """Turn a preset name or a custom mapping into a complete format.

    A custom mapping is merged over the `long` preset; `options` then override
    individual keys of whichever format was chosen.

    Raises:
        InvalidArgument: Unknown preset name, unknown key or bad count
    """
    if isinstance(format, str):
        if format not in FORMATS:
            valid = ", ".join(FORMATS)
            raise InvalidArgument(
                f"Unknown format: {format!r}\nValid formats: {valid}"
            )
        syntax = dict(FORMATS[format])
    elif isinstance(format, Mapping):
        syntax = {**FORMATS["long"], **format}
    else:
        raise InvalidArgument(
            f"Expected a format name or mapping, got {type(format).__name__!r}\n"
            f"Examples:\n"
            f"  duration.to_string('short')\n"
            f"  duration.to_string({{'units': {{'hours': 'h'}}, 'separator': ''}})"
        )

    syntax.update(options)

    unknown = set(syntax) - _FORMAT_KEYS
    if unknown:
        raise InvalidArgument(
            f"Unknown format option(s): {', '.join(sorted(unknown))}\n"
            f"Valid options: {', '.join(sorted(_FORMAT_KEYS))}"
        )

    count = syntax.get("count")
    if count is not None and count != "all":
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidArgument(
                f"count must be a positive int, None or 'all', got {count!r}"
            )

    return syntax


def _pick_label(label: Label, quantity: int) -> str:
    if isinstance(label, str):
        return label
    singular, plural = label
    return singular if abs(quantity) == 1 else plural


def _zero_unit(units: Mapping[str, Label]) -> tuple[str, Label]:
    # Smallest listed unit, with the format's own label
    if not units:
        return "seconds", _LONG_UNITS["seconds"]
    unit = sort_units(units)[0]
    return unit, units[unit]


def format_duration(
    duration: "Duration", format: Format = "long", **options: Any
) -> str:
    """Render `duration` with a preset or custom format.

    Example:
        >>> format_duration(Duration(hours=1, minutes=3, seconds=4))
        '1 hour, 3 minutes, 4 seconds'
        >>> format_duration(Duration(hours=1, minutes=3, seconds=4), "short")
        '1hr 3min'
    """
    syntax = resolve_format(format, **options)
    units: Mapping[str, Label] = syntax["units"]

    count = syntax.get("count")
    if count is None or count == "all":
        count = len(UNITS)

    parts = [
        (unit, quantity)
        for unit, quantity in duration.to_units(*units).items()
        if quantity != 0
    ]
    if not parts:
        zero_unit, zero_label = _zero_unit(units)
        parts = [(zero_unit, 0)]
        units = {**units, zero_unit: zero_label}

    separator = syntax.get("separator")
    separator = " " if separator is None else separator
    delimiter = syntax.get("delimiter")
    delimiter = ", " if delimiter is None else delimiter

    return delimiter.join(
        f"{quantity}{separator}{_pick_label(units[unit], quantity)}"
        for unit, quantity in parts[:count]
    )
