"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar facts and date search over UTC calendar days: weekday names, month
lengths, leap years, quarters, weekend counts, ISO-8601 week numbers and the
next (unlucky) Friday.

Basic usage::

    from datetime import date
    from datekit.calendar import get_day_name, get_week_number_by_date

    get_day_name("1970-01-01T00:00:00Z")          # → 'Thursday'
    get_week_number_by_date(date(2024, 2, 23))    # → 8

Any date-like is accepted: ``datetime``/``date`` objects (naive values are
read as UTC), ISO-8601 or free-form strings, ``numpy.datetime64`` scalars and
epoch milliseconds.

Public API
----------
get_day_name, get_count_days_in_month, is_leap_year, get_quarter,
get_count_weekends_in_month, get_week_number_by_date, get_iso_week,
week_one_monday, get_next_friday, get_next_friday_the_13th

CalendarError   Base exception for all datekit errors.
DateParseError  Raised for values that are not dates.
"""

from __future__ import annotations

from datekit.calendar._exceptions import CalendarError, DateParseError
from datekit.calendar._parse import MS_PER_DAY, DateLike, to_datetime, to_timestamp
from datekit.calendar.calendar import (
    DAY_NAMES,
    QUARTERS,
    day_index,
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_day_name,
    get_iso_week,
    get_quarter,
    get_week_number_by_date,
    is_leap_year,
    week_one_monday,
)
from datekit.calendar.search import (
    FRIDAY_13TH_SEARCH_LIMIT,
    get_next_friday,
    get_next_friday_the_13th,
)

__all__ = [
    "CalendarError",
    "DateParseError",
    "DateLike",
    "DAY_NAMES",
    "QUARTERS",
    "MS_PER_DAY",
    "FRIDAY_13TH_SEARCH_LIMIT",
    "to_datetime",
    "to_timestamp",
    "day_index",
    "get_day_name",
    "get_count_days_in_month",
    "is_leap_year",
    "get_quarter",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_iso_week",
    "week_one_monday",
    "get_next_friday",
    "get_next_friday_the_13th",
]
