"""
datekit.formatting
~~~~~~~~~~~~~~~~~~

Epoch timestamps and clock-style string formatting.

Basic usage::

    from datekit.formatting import date_to_timestamp, format_date

    date_to_timestamp("04 Dec 1995 00:12:00 UTC")   # → 818035920000
    date_to_timestamp("not a date")                 # → nan
    format_date("2024-02-01T15:00:00.000Z")         # → '2/1/2024, 3:00:00 PM'
"""

from datekit.formatting.formatting import date_to_timestamp, format_date, get_time

__all__ = [
    "date_to_timestamp",
    "format_date",
    "get_time",
]
