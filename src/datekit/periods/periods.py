from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from datekit.calendar import MS_PER_DAY, CalendarError, DateLike
from datekit.formatting import date_to_timestamp


@dataclass(frozen=True)
class DatePeriod:
    """
    Inclusive ``[start, end]`` range of date-likes.

    Bounds are kept as given and parsed on use; ``start <= end`` is assumed,
    not checked.
    """

    start: Any
    end: Any

    @classmethod
    def coerce(cls, period: PeriodLike) -> DatePeriod:
        """Accept a DatePeriod, a ``{'start', 'end'}`` mapping or a pair."""
        if isinstance(period, DatePeriod):
            return period
        if isinstance(period, Mapping):
            try:
                return cls(period["start"], period["end"])
            except KeyError as exc:
                raise CalendarError(f"Period is missing the {exc.args[0]!r} bound.") from exc
        try:
            start, end = period
        except (TypeError, ValueError) as exc:
            raise CalendarError(f"Not a period: {period!r}") from exc
        return cls(start, end)

    @property
    def days(self) -> Union[int, float]:
        return get_count_days_on_period(self.start, self.end)

    def __contains__(self, value: DateLike) -> bool:
        return is_date_in_period(value, self)


PeriodLike = Union[DatePeriod, Mapping[str, Any], tuple]


def get_count_days_on_period(start: DateLike, end: DateLike) -> Union[int, float]:
    """
    Number of days from *start* to *end*, both included.

    Periods that are not a whole number of days come back as a float, and an
    unparseable bound gives ``nan``.  Reversed periods are not rejected.
    """
    days = (date_to_timestamp(end) - date_to_timestamp(start)) / MS_PER_DAY + 1
    return int(days) if float(days).is_integer() else days


def is_date_in_period(value: DateLike, period: PeriodLike) -> bool:
    period = DatePeriod.coerce(period)
    moment = date_to_timestamp(value)
    # NaN never compares true, so unparseable input is never in the period.
    return bool(date_to_timestamp(period.start) <= moment <= date_to_timestamp(period.end))
