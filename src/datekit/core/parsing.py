"""Coercion of date-like inputs into `date` / UTC `pd.Timestamp`.

Strings go through pandas, so ISO 8601 ('2024-01-30T00:00:00.000Z') and
RFC-style text ('04 Dec 1995 00:12:00 UTC') are both accepted. Naive values
are read as UTC; zoned values are converted to UTC.
"""

from datetime import date, datetime
from typing import Union

import pandas as pd

from datekit.core.errors import InvalidArgumentError

DateLike = Union[str, date, datetime, pd.Timestamp]

DMY_FMT = "%d-%m-%Y"


def to_timestamp(value: DateLike) -> pd.Timestamp:
    """Convert a date-like into a UTC-aware pandas Timestamp."""
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError.for_value(
            "date", value, "expected a date-like value"
        )
    if not isinstance(value, (str, date)):
        raise InvalidArgumentError.for_value(
            "date", value, f"unsupported type {type(value).__name__}"
        )
    if isinstance(value, str) and not value.strip():
        raise InvalidArgumentError.for_value("date", value, "empty date string")
    try:
        ts = pd.Timestamp(value)
    except (ValueError, OverflowError) as e:
        raise InvalidArgumentError.for_value("date", value, str(e)) from e
    if pd.isna(ts):
        raise InvalidArgumentError.for_value("date", value, "not a calendar date")
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def to_date(value: DateLike) -> date:
    """Normalize a date-like to a calendar date (time-of-day dropped).

    Plain dates and naive datetimes keep their own calendar day; strings and
    zoned datetimes are read in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return to_timestamp(value).date()
    if isinstance(value, date):
        return value
    return to_timestamp(value).date()


def parse_dmy(text: str, fmt: str = DMY_FMT) -> date:
    """Parse a textual day-month-year date ('13-01-2024')."""
    if not isinstance(text, str):
        raise InvalidArgumentError.for_value("date", text, f"expected text in {fmt!r}")
    try:
        return datetime.strptime(text.strip(), fmt).date()
    except ValueError as e:
        raise InvalidArgumentError.for_value("date", text, str(e)) from e


def format_dmy(d: date, fmt: str = DMY_FMT) -> str:
    return d.strftime(fmt)
