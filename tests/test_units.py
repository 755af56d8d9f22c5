"""Tests for the unit table."""

import pytest

from reltime import DAY, UNITS
from reltime.errors import InvalidArgument, UnknownUnit
from reltime.units import (
    NormalizationMethod,
    Unit,
    canonical_name,
    div,
    resolve_method,
    resolve_unit,
    sort_units,
)


def test_resolve_unit_plural_and_singular():
    """Test that singular aliases resolve to the same scale as the plural."""
    assert resolve_unit("hours") == Unit("seconds", 3600)
    assert resolve_unit("hour") == resolve_unit("hours")
    assert resolve_unit("years") == Unit("months", 12)
    assert resolve_unit("millennium") == Unit("months", 12000)


def test_resolve_unknown_unit():
    """Test that unknown names fail with UnknownUnit, a KeyError."""
    with pytest.raises(UnknownUnit, match="Unknown unit: 'fortnight'"):
        resolve_unit("fortnight")

    with pytest.raises(KeyError):
        resolve_unit("Hours")


def test_unknown_unit_message_lists_valid_units():
    with pytest.raises(UnknownUnit) as excinfo:
        resolve_unit("fortnight")
    assert "Valid units:" in str(excinfo.value)
    assert "millennia" in str(excinfo.value)


def test_canonical_name():
    assert canonical_name("millennium") == "millennia"
    assert canonical_name("century") == "centuries"
    assert canonical_name("days") == "days"


def test_sort_units_by_magnitude():
    """Test that month-based units sort above every second-based unit."""
    names = ["years", "seconds", "weeks", "month", "hour"]
    assert sort_units(names) == ["seconds", "hour", "weeks", "month", "years"]


def test_sort_units_keeps_spelling():
    assert sort_units(["minute", "decades", "second"]) == [
        "second",
        "minute",
        "decades",
    ]


def test_div_truncates_toward_zero():
    assert div(7, 2) == 3
    assert div(-7, 2) == -3
    assert div(7, -2) == -3
    assert div(-1, 60) == 0
    assert div(-61, 60) == -1
    assert div(0, -5) == 0


def test_normalization_presets():
    assert resolve_method("standard") == NormalizationMethod(
        month=30 * DAY, year=365 * DAY
    )
    assert resolve_method("minimum").month == 28 * DAY
    assert resolve_method("maximum").year == 366 * DAY


def test_custom_normalization_method_passes_through():
    method = NormalizationMethod(month=2629746, year=31556952)
    assert resolve_method(method) is method
    assert method.steps == (("years", 31556952), ("months", 2629746))


def test_invalid_normalization_method():
    with pytest.raises(InvalidArgument, match="Unknown normalization method"):
        resolve_method("average")

    with pytest.raises(InvalidArgument, match="must be positive"):
        NormalizationMethod(month=0, year=365 * DAY)


def test_unit_table_is_read_only():
    with pytest.raises(TypeError):
        UNITS["fortnights"] = Unit("seconds", 14 * DAY)  # type: ignore[index]
