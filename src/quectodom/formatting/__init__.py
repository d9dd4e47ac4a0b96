"""Numeric and time formatting for table cell content."""

from .numbers import (
    NumberFormatter,
    format_float,
    format_int,
    format_unit,
    get_sign_of,
)
from .times import format_time

__all__ = [
    "NumberFormatter",
    "format_float",
    "format_int",
    "format_time",
    "format_unit",
    "get_sign_of",
]
