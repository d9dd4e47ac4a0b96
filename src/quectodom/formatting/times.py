"""Time-of-day formatting."""

from datetime import datetime
from typing import Union

from .numbers import format_int


def _parse(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    text = value.strip()
    # fromisoformat() only accepts a trailing Z from Python 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_time(value: Union[str, datetime]) -> str:
    """Format the time part of an ISO-8601 date/time as ``HH:MM``.

    Values with a UTC offset are converted to local time first; naive values
    are taken to be local already.
    """
    moment = _parse(value)
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return format_int(moment.hour, 2) + ":" + format_int(moment.minute, 2)
