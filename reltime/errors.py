"""Exceptions raised by reltime.

Every error here signals a misuse of the API (a bad unit name, a bad operand
or a malformed argument). None of them are transient, so nothing retries them.
"""

from typing_extensions import override


class ReltimeError(Exception):
    """Base class for all reltime errors."""


class UnknownUnit(ReltimeError, KeyError):
    """A unit name is neither a canonical unit nor one of its aliases."""

    def __init__(self, unit: object, valid: "list[str] | None" = None):
        self.unit: object = unit
        message = f"Unknown unit: {unit!r}"
        if valid:
            message += f"\nValid units: {', '.join(valid)}"
        super().__init__(message)

    @override
    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0])


class InvalidOperand(ReltimeError, TypeError):
    """An operator was given a value of the wrong type."""


class InvalidArgument(ReltimeError, ValueError):
    """A low-level accessor or constructor was given a malformed argument."""


class InvalidMeridiem(InvalidArgument):
    """A wall-clock meridiem was neither "am" nor "pm"."""


class TimeOutOfBounds(InvalidArgument):
    """A wall-clock time fell outside a single day (00:00:00 to 23:59:59)."""
