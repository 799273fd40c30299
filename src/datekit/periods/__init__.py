"""
datekit.periods
~~~~~~~~~~~~~~~

Inclusive date ranges.

Basic usage::

    from datekit.periods import DatePeriod, is_date_in_period

    is_date_in_period("2024-02-02", {"start": "2024-02-02", "end": "2024-03-02"})  # → True

    feb = DatePeriod("2024-02-01", "2024-02-29")
    feb.days                # → 29
    "2024-02-10" in feb     # → True
"""

from datekit.periods.periods import (
    DatePeriod,
    get_count_days_on_period,
    is_date_in_period,
)

__all__ = [
    "DatePeriod",
    "get_count_days_on_period",
    "is_date_in_period",
]
