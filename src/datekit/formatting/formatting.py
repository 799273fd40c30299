import logging
import math
from datetime import datetime, time, tzinfo
from typing import Optional, Union

from dateutil.tz import tzlocal

from datekit.calendar import DateLike, DateParseError, to_datetime, to_timestamp

logger = logging.getLogger(__name__)


def date_to_timestamp(value: DateLike, strict: bool = False) -> Union[int, float]:
    """
    Milliseconds elapsed since 1970-01-01T00:00:00Z.

    Unparseable input yields ``nan`` so that it propagates through further
    arithmetic; pass ``strict=True`` to get a DateParseError instead.
    """
    try:
        return to_timestamp(value)
    except DateParseError:
        if strict:
            raise
        logger.debug("Cannot parse %r as a date; returning NaN", value)
        return math.nan


def get_time(moment: Union[datetime, time, DateLike]) -> str:
    """Wall-clock ``HH:MM:SS`` of *moment*, in whatever zone it carries."""
    if not isinstance(moment, (datetime, time)):
        moment = to_datetime(moment)
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


def format_date(value: DateLike, tz: Optional[tzinfo] = None) -> str:
    """
    Format as ``M/D/YYYY, h:mm:ss AM|PM``.

    The date and the hour are read in UTC while minutes and seconds are read
    in local time (*tz*, the system zone by default).  The two only disagree
    in zones whose offset is not a whole number of hours.
    """
    utc = to_datetime(value)
    local = utc.astimezone(tz if tz is not None else tzlocal())

    hour = utc.hour
    if hour == 0:
        clock = 12
    elif hour > 12:
        clock = hour - 12
    else:
        clock = hour
    suffix = "PM" if hour >= 12 else "AM"

    return (
        f"{utc.month}/{utc.day}/{utc.year}, "
        f"{clock}:{local.minute:02d}:{local.second:02d} {suffix}"
    )
