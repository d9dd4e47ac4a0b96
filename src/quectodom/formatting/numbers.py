"""Numeric formatting helpers.

All functions are pure and return strings suitable as table cell content.
Signs are emitted from the ``minus``/``zero``/``plus`` symbols, so callers can
render e.g. ``+1.50`` or ``−1.50`` without post-processing.
"""

import math
from typing import Optional, Union

from quectodom.shared import FormatConfig

Number = Union[int, float]


def get_sign_of(val: Number, minus: str = "-", zero: str = "", plus: str = "") -> str:
    """Return the appropriate sign symbol for the given value.

    Args:
        val: The number to test
        minus: Symbol to emit if negative
        zero: Symbol to emit if zero
        plus: Symbol to emit if positive
    """
    if val < 0:
        return minus
    elif val == 0:
        return zero
    else:
        return plus


def _magnitude(val: Number) -> str:
    val = abs(val)
    if isinstance(val, float) and val.is_integer():
        return str(int(val))
    return str(val)


def format_int(
    val: Number,
    digits: int = 0,
    minus: str = "-",
    zero: str = "",
    plus: str = "",
) -> str:
    """Format an integer, padding with zeros to ensure expected width.

    The result may be longer than ``digits`` by the width of the sign.

    Args:
        val: The number to format
        digits: The minimum number of digits
        minus: Symbol to emit if negative
        zero: Symbol to emit if zero
        plus: Symbol to emit if positive
    """
    sign = get_sign_of(val, minus, zero, plus)
    return sign + _magnitude(val).rjust(digits, "0")


def format_float(
    val: Number,
    places: int,
    digits: Optional[int] = None,
    frac_sep: str = ".",
    minus: str = "-",
    zero: str = "",
    plus: str = "",
) -> str:
    """Format a float with a fixed number of decimal places.

    The fraction is rounded half-up; a carry out of the fraction increments
    the whole part (``1.999`` at two places is ``2.00``).

    Args:
        val: The float being formatted
        places: Number of digits after the decimal point
        digits: Minimum number of integer digits before the decimal point
        frac_sep: Fractional separator, typically "." or ","
        minus: Symbol to emit if negative
        zero: Symbol to emit if zero
        plus: Symbol to emit if positive
    """
    if places < 0:
        raise ValueError("places must be >= 0")

    sign = get_sign_of(val, minus, zero, plus)
    val = abs(val)
    whole = math.floor(val)
    scale = 10 ** places
    frac = math.floor((val - whole) * scale + 0.5)
    if frac >= scale:
        whole += 1
        frac -= scale

    whole_str = format_int(whole, digits) if digits else str(whole)
    if places == 0:
        return sign + whole_str
    return sign + whole_str + frac_sep + format_int(frac, places)


def format_unit(
    val: Number,
    unit: Optional[str],
    places: int = 3,
    digits: Optional[int] = None,
    frac_sep: str = ".",
    minus: str = "-",
    zero: str = "",
    plus: str = "",
) -> str:
    """Format a float followed by a unit, e.g. ``12.500 kW``."""
    text = format_float(val, places, digits, frac_sep, minus, zero, plus)
    if unit:
        text += " " + unit
    return text


class NumberFormatter:
    """Formatting functions bound to the settings of a :class:`FormatConfig`."""

    def __init__(self, config: Optional[FormatConfig] = None) -> None:
        self.config = config or FormatConfig()

    def sign(self, val: Number) -> str:
        c = self.config
        return get_sign_of(val, c.minus, c.zero, c.plus)

    def integer(self, val: Number, digits: Optional[int] = None) -> str:
        c = self.config
        width = c.digits if digits is None else digits
        return format_int(val, width or 0, c.minus, c.zero, c.plus)

    def decimal(self, val: Number, places: Optional[int] = None) -> str:
        c = self.config
        return format_float(
            val,
            c.places if places is None else places,
            c.digits,
            c.frac_sep,
            c.minus,
            c.zero,
            c.plus,
        )

    def unit(self, val: Number, unit: Optional[str], places: Optional[int] = None) -> str:
        c = self.config
        return format_unit(
            val,
            unit,
            c.places if places is None else places,
            c.digits,
            c.frac_sep,
            c.minus,
            c.zero,
            c.plus,
        )
