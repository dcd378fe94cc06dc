"""Timestamp conversion and time-of-day formatting."""

from datetime import datetime, time

from datekit.core.errors import InvalidArgumentError
from datekit.core.parsing import DateLike, to_timestamp

_NS_PER_MS = 1_000_000


def date_to_timestamp(value: DateLike) -> int:
    """Milliseconds elapsed since 1970-01-01 00:00:00 UTC.

    '01 Jan 1970 00:00:00 UTC' -> 0
    '04 Dec 1995 00:12:00 UTC' -> 818035920000
    """
    return to_timestamp(value).value // _NS_PER_MS


def get_time(value) -> str:
    """Return 'hh:mm:ss' (24-hour, zero padded).

    datetimes and times are read as-is, without any zone conversion;
    strings are parsed and read in UTC.
    """
    if isinstance(value, (datetime, time)):
        return value.strftime("%H:%M:%S")
    if isinstance(value, str):
        return to_timestamp(value).strftime("%H:%M:%S")
    raise InvalidArgumentError.for_value("time", value, "expected a datetime or time")


def format_date(value: DateLike) -> str:
    """Format as 'M/D/YYYY, h:mm:ss AM|PM' in UTC.

    '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
    '1999-01-05T02:20:00.000Z' -> '1/5/1999, 2:20:00 AM'
    """
    ts = to_timestamp(value)
    suffix = "PM" if ts.hour >= 12 else "AM"
    hour = ts.hour % 12 or 12
    return (
        f"{ts.month}/{ts.day}/{ts.year}, "
        f"{hour}:{ts.minute:02d}:{ts.second:02d} {suffix}"
    )
