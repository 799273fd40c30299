from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

import numpy as np

from datekit.calendar import CalendarError, DateLike, DateParseError, to_datetime
from datekit.periods import DatePeriod
from datekit.periods.periods import PeriodLike

logger = logging.getLogger(__name__)

SCHEDULE_DATE_FORMAT = "%d-%m-%Y"

ArrayLike = Union[int, "np.ndarray"]


@dataclass(frozen=True)
class WorkPattern:
    """
    Repeating cycle of ``work_days`` on followed by ``off_days`` off.

    Day offsets count from the anchor (offset 0 is the first work day).
    """

    work_days: int
    off_days: int

    def __post_init__(self) -> None:
        if self.work_days < 1:
            raise CalendarError(f"work_days must be at least 1; got {self.work_days}.")
        if self.off_days < 0:
            raise CalendarError(f"off_days must be non-negative; got {self.off_days}.")

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    def is_work_day(self, offset: ArrayLike) -> Union[bool, np.ndarray]:
        scalar = np.ndim(offset) == 0
        o = np.asarray(offset, dtype=np.int64)
        result = (o % self.cycle_length) < self.work_days
        return bool(result) if scalar else result

    def work_dates(self, start: date, end: date) -> list[date]:
        """Work days from *start* (the anchor) through *end*, inclusive."""
        n_days = (end - start).days + 1
        if n_days <= 0:
            return []
        offsets = np.arange(n_days, dtype=np.int64)
        hits = offsets[self.is_work_day(offsets)]
        return (np.datetime64(start, "D") + hits).tolist()


def parse_schedule_date(value: DateLike) -> date:
    """Read a ``DD-MM-YYYY`` string (or any other date-like) as a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), SCHEDULE_DATE_FORMAT).date()
        except ValueError as exc:
            raise DateParseError(
                f"Expected a {SCHEDULE_DATE_FORMAT!r} date; got {value!r}."
            ) from exc
    return to_datetime(value).date()


def format_schedule_date(day: date) -> str:
    """``DD-MM-YYYY`` with the year zero-padded to four digits."""
    return f"{day.day:02d}-{day.month:02d}-{day.year:04d}"


def get_work_schedule(period: PeriodLike, work_days: int, off_days: int) -> list[str]:
    """
    Working dates in *period* for a ``work_days`` on / ``off_days`` off rota.

    The rota starts on ``period.start``; both bounds are included.  Dates are
    returned in order as ``DD-MM-YYYY`` strings.
    """
    period = DatePeriod.coerce(period)
    pattern = WorkPattern(work_days, off_days)
    start = parse_schedule_date(period.start)
    end = parse_schedule_date(period.end)

    dates = pattern.work_dates(start, end)
    logger.debug(
        "%d work day(s) between %s and %s for pattern %s",
        len(dates), start, end, pattern,
    )
    return [format_schedule_date(d) for d in dates]
