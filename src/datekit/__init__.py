"""
datekit
~~~~~~~

Small, pure date/time calculations over UTC calendar days.

Every function is stateless and leaves its arguments untouched.  See the
subpackages for details:

datekit.calendar    weekday names, month lengths, leap years, quarters,
                    weekend counts, ISO weeks, next Friday (the 13th)
datekit.formatting  epoch timestamps, ``HH:MM:SS`` and 12-hour formatting
datekit.periods     inclusive date ranges
datekit.schedule    work / off-day rotas
"""

from datekit.calendar import (
    DAY_NAMES,
    CalendarError,
    DateParseError,
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_day_name,
    get_iso_week,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_week_number_by_date,
    is_leap_year,
)
from datekit.formatting import date_to_timestamp, format_date, get_time
from datekit.periods import DatePeriod, get_count_days_on_period, is_date_in_period
from datekit.schedule import WorkPattern, get_work_schedule

__all__ = [
    "DAY_NAMES",
    "CalendarError",
    "DateParseError",
    "DatePeriod",
    "WorkPattern",
    "date_to_timestamp",
    "get_time",
    "get_day_name",
    "get_next_friday",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "format_date",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_iso_week",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_work_schedule",
    "is_leap_year",
]
