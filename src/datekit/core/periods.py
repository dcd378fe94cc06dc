"""Inclusive date periods."""

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Union

from datekit.core.errors import InvalidArgumentError
from datekit.core.parsing import DateLike, to_date


@dataclass(frozen=True)
class DatePeriod:
    start: date
    end: date

    @classmethod
    def from_mapping(cls, period: Mapping) -> "DatePeriod":
        """Build from {'start': ..., 'end': ...} with date-like values."""
        if not isinstance(period, Mapping):
            raise InvalidArgumentError.for_value("period", period, "expected a mapping")
        missing = [k for k in ("start", "end") if k not in period]
        if missing:
            raise InvalidArgumentError(
                "Period is missing keys", context={"missing": missing}
            )
        return cls(start=to_date(period["start"]), end=to_date(period["end"]))

    def __contains__(self, value: DateLike) -> bool:
        return self.start <= to_date(value) <= self.end


def get_count_days_on_period(date_start: DateLike, date_end: DateLike) -> int:
    """Days in [date_start, date_end], both ends counted; 0 when reversed."""
    delta = (to_date(date_end) - to_date(date_start)).days
    return max(delta + 1, 0)


def is_date_in_period(value: DateLike, period: Union[DatePeriod, Mapping]) -> bool:
    if not isinstance(period, DatePeriod):
        period = DatePeriod.from_mapping(period)
    return value in period
