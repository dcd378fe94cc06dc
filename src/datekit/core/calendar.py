"""Gregorian calendar lookups.

Weekday indices follow Python's `date.weekday()`: Monday=0 ... Sunday=6.
"""

from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date, timedelta
from numbers import Integral
from types import MappingProxyType
from typing import Mapping, Optional, Union

import numpy as np

from datekit.core.config import get_setting, load_default_config
from datekit.core.errors import InvalidArgumentError, check_integer
from datekit.core.logger import get_logger
from datekit.core.parsing import DateLike, to_date

logger = get_logger("core.calendar")

FRIDAY = 4

WEEKDAY_NAMES: Mapping[int, str] = MappingProxyType(
    dict(
        enumerate(
            (
                "Monday",
                "Tuesday",
                "Wednesday",
                "Thursday",
                "Friday",
                "Saturday",
                "Sunday",
            )
        )
    )
)

_DEFAULT_FRIDAY_13TH_MAX_MONTHS = 15


def get_day_name(value: DateLike) -> str:
    """Name of the day of the week ('03 Dec 1995 00:12:00 UTC' -> 'Sunday')."""
    return WEEKDAY_NAMES[to_date(value).weekday()]


def get_next_friday(value: DateLike) -> date:
    """First Friday strictly after the given date."""
    d = to_date(value)
    delta = (FRIDAY - d.weekday()) % 7 or 7
    try:
        return d + timedelta(days=delta)
    except OverflowError as e:
        raise InvalidArgumentError.for_value("date", d, "no Friday after it") from e


def get_count_days_in_month(month: int, year: int) -> int:
    month = check_integer("month", month, 1, 12)
    year = check_integer("year", year, MINYEAR, MAXYEAR)
    return monthrange(year, month)[1]


def get_count_weekends_in_month(month: int, year: int) -> int:
    """Total Saturdays and Sundays in the month."""
    days = get_count_days_in_month(month, year)
    first = np.datetime64(date(int(year), int(month), 1), "D")
    # end bound is exclusive; datetime64 reaches past date.max
    weekdays = int(np.busday_count(first, first + days))
    return days - weekdays


def get_week_number_by_date(value: DateLike) -> int:
    """ISO 8601 week number; weeks start on Monday."""
    return to_date(value).isocalendar()[1]


def get_next_friday_the_13th(
    value: DateLike, max_months: Optional[int] = None
) -> date:
    """Next 13th falling on a Friday, on or after the given date.

    Scans month by month for at most `max_months` months (defaults to
    `search.friday_13th_max_months` from config).
    """
    d = to_date(value)
    if max_months is None:
        max_months = get_setting(
            load_default_config(),
            "search.friday_13th_max_months",
            _DEFAULT_FRIDAY_13TH_MAX_MONTHS,
        )
    max_months = check_integer(
        "max_months", max_months, 1, 12 * (MAXYEAR - MINYEAR + 1)
    )

    year, month = d.year, d.month
    for _ in range(max_months):
        candidate = date(year, month, 13)
        if candidate >= d and candidate.weekday() == FRIDAY:
            return candidate
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
        if year > MAXYEAR:
            break

    logger.warning(f"No Friday the 13th within {max_months} months of {d}")
    raise InvalidArgumentError(
        "No Friday the 13th found in search window",
        context={"date": d, "max_months": max_months},
    )


def get_quarter(value: DateLike) -> int:
    return (to_date(value).month - 1) // 3 + 1


def is_leap_year(value: Union[DateLike, int]) -> bool:
    """Divisible by 4, except centuries not divisible by 400.

    Accepts a date-like or the year itself.
    """
    if isinstance(value, Integral) and not isinstance(value, bool):
        year = int(value)
    else:
        year = to_date(value).year
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0
