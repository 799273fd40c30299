import numpy as np
from datetime import date, timedelta
from typing import Union

from ._exceptions import CalendarError
from ._parse import DateLike, to_datetime, wall_date


DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

QUARTERS: tuple[tuple[int, ...], ...] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (10, 11, 12),
)

_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_IN_MONTH_LEAP: tuple[int, ...] = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_QUARTER_OF_MONTH = np.zeros(12, dtype=np.int64)
for _q, _months in enumerate(QUARTERS, start=1):
    _QUARTER_OF_MONTH[np.asarray(_months) - 1] = _q
del _q, _months

_ONE_DAY = timedelta(days=1)


# ── weekday helpers ──────────────────────────────────────────────────────

def _sunday_index(day: date) -> int:
    # date.weekday() is Monday-indexed
    return (day.weekday() + 1) % 7


def day_index(value: DateLike) -> int:
    """UTC day of the week, 0 = Sunday … 6 = Saturday."""
    return _sunday_index(to_datetime(value).date())


def get_day_name(value: DateLike) -> str:
    return DAY_NAMES[day_index(value)]


# ── month / year facts ───────────────────────────────────────────────────

def _has_feb_29(year: int) -> bool:
    # Feb 28 + 1 day lands on Feb 29 in leap years and on Mar 1 otherwise.
    try:
        return (date(year, 2, 28) + _ONE_DAY).day == 29
    except ValueError as exc:
        raise CalendarError(f"Year out of range: {year}.") from exc


def get_count_days_in_month(month: int, year: int) -> int:
    if not 1 <= month <= 12:
        raise CalendarError(f"Month must be in 1..12; got {month}.")
    table = _DAYS_IN_MONTH_LEAP if _has_feb_29(year) else _DAYS_IN_MONTH
    return table[month - 1]


def is_leap_year(value: Union[DateLike, int]) -> bool:
    """
    True if the year of *value* has a February 29th.

    A bare ``int`` is taken as the year itself; any other value is coerced to
    a date and its UTC year is used.  The argument is never modified.
    """
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return _has_feb_29(int(value))
    return _has_feb_29(to_datetime(value).year)


def get_quarter(value):
    """
    Quarter (1-4) of the month of *value*, as written in the value itself:
    an offset string or an aware datetime is not converted to UTC first.

    Arrays of ``datetime64`` (or anything NumPy can read as such) return an
    integer array of the same shape.
    """
    if np.ndim(value) > 0:
        days = np.asarray(value)
        if days.dtype.kind != "M":
            days = days.astype("datetime64")
        months = days.astype("datetime64[M]").astype(np.int64)
        return _QUARTER_OF_MONTH[months % 12]
    return int(_QUARTER_OF_MONTH[wall_date(value).month - 1])


def get_count_weekends_in_month(month: int, year: int) -> int:
    n_days = get_count_days_in_month(month, year)
    days = np.datetime64(date(year, month, 1), "D") + np.arange(n_days)
    # Day 0 of the epoch (1970-01-01) was a Thursday.
    idx = (days.astype(np.int64) + 4) % 7
    return int(np.count_nonzero((idx == 0) | (idx == 6)))


# ── ISO-8601 weeks ───────────────────────────────────────────────────────

def week_one_monday(year: int) -> date:
    """Monday of ISO week 1: three days before the year's first Thursday."""
    jan1 = date(year, 1, 1)
    i = _sunday_index(jan1)
    if i <= 4:
        first_thursday = jan1 + timedelta(days=4 - i)
    else:
        first_thursday = jan1 + timedelta(days=7 - i + 4)
    return first_thursday - timedelta(days=3)


def get_iso_week(value: DateLike) -> tuple[int, int]:
    """
    ISO ``(year, week)`` of *value*, read from the calendar day written in the
    value (strings with an offset and aware datetimes are not converted).

    Early-January days before week 1 fall in the last week of the previous
    ISO year; late-December days on or after the next year's week-1 Monday
    are week 1 of that year.
    """
    day = wall_date(value)
    year = day.year
    monday = week_one_monday(year)
    if day < monday:
        year -= 1
        monday = week_one_monday(year)
    elif day.month == 12:
        following = week_one_monday(year + 1)
        if day >= following:
            year += 1
            monday = following
    return year, (day - monday).days // 7 + 1


def get_week_number_by_date(value: DateLike) -> int:
    return get_iso_week(value)[1]
