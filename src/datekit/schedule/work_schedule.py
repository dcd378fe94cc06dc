"""Work/off-day schedule generation over an inclusive date range.

The cycle is `work_length` work days followed by `off_length` off days and
restarts at the range start, not at any calendar epoch.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Mapping, Optional

from datekit.core.config import get_setting, load_default_config
from datekit.core.errors import InvalidArgumentError, check_integer
from datekit.core.logger import get_logger
from datekit.core.parsing import DMY_FMT, format_dmy, parse_dmy, to_date

logger = get_logger("schedule.work_schedule")


def _as_day(name: str, value) -> date:
    if isinstance(value, date):
        return to_date(value)
    raise InvalidArgumentError.for_value(name, value, "expected a calendar date")


@dataclass(frozen=True)
class DateRange:
    """Inclusive [start, end]. A reversed range is valid and empty."""

    start: date
    end: date

    def __post_init__(self):
        object.__setattr__(self, "start", _as_day("start", self.start))
        object.__setattr__(self, "end", _as_day("end", self.end))


@dataclass(frozen=True)
class CyclePattern:
    work_length: int
    off_length: int

    def __post_init__(self):
        work_length = check_integer("work_length", self.work_length, 1)
        off_length = check_integer("off_length", self.off_length, 0)
        object.__setattr__(self, "work_length", work_length)
        object.__setattr__(self, "off_length", off_length)

    @property
    def cycle_length(self) -> int:
        return self.work_length + self.off_length

    def is_work_day(self, offset: int) -> bool:
        """Whether the day `offset` days after the cycle anchor is worked."""
        return offset % self.cycle_length < self.work_length


def generate_schedule(
    date_range: DateRange, work_length: int, off_length: int
) -> List[date]:
    """Dates in `date_range` that fall on a work day of the cycle.

    Args:
        date_range: Inclusive range; the cycle is anchored at its start.
        work_length: Consecutive work days per cycle, >= 1.
        off_length: Consecutive off days per cycle, >= 0.

    Returns:
        Strictly ascending list of work dates; empty when start > end.

    Raises:
        InvalidArgumentError: On invalid lengths or a non-DateRange range.
    """
    if not isinstance(date_range, DateRange):
        raise InvalidArgumentError.for_value(
            "date_range", date_range, "expected a DateRange"
        )
    pattern = CyclePattern(work_length=work_length, off_length=off_length)
    logger.debug(
        f"Generating schedule {date_range.start}..{date_range.end} "
        f"({pattern.work_length} on / {pattern.off_length} off)"
    )

    span = (date_range.end - date_range.start).days + 1
    return [
        date_range.start + timedelta(days=offset)
        for offset in range(span)
        if pattern.is_work_day(offset)
    ]


def get_work_schedule(
    period: Mapping[str, str],
    count_work_days: int,
    count_off_days: int,
    fmt: Optional[str] = None,
) -> List[str]:
    """Work schedule over a textual period, dates in and out as DD-MM-YYYY.

    { start: '01-01-2024', end: '15-01-2024' }, 1, 3
        -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    if fmt is None:
        fmt = get_setting(load_default_config(), "formats.schedule_date", DMY_FMT)
    if not isinstance(period, Mapping):
        raise InvalidArgumentError.for_value("period", period, "expected a mapping")
    missing = [k for k in ("start", "end") if k not in period]
    if missing:
        raise InvalidArgumentError(
            "Period is missing keys", context={"missing": missing}
        )

    date_range = DateRange(
        start=parse_dmy(period["start"], fmt), end=parse_dmy(period["end"], fmt)
    )
    schedule = generate_schedule(date_range, count_work_days, count_off_days)
    return [format_dmy(d, fmt) for d in schedule]
