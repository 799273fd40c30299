import logging
from datetime import timedelta

from ._exceptions import CalendarError
from ._parse import DateLike, like, to_datetime
from .calendar import day_index

logger = logging.getLogger(__name__)

FRIDAY = 5

# Longest gap between two Friday-the-13ths is 14 months (427 days).
FRIDAY_13TH_SEARCH_LIMIT: int = 14 * 31

_ONE_DAY = timedelta(days=1)


def get_next_friday(value: DateLike):
    """
    Date of the next Friday, keeping the time of day.

    A Friday moves a full week ahead.  A Saturday moves six days ahead, to
    the Friday that closes the following week.
    """
    moment = to_datetime(value)
    i = day_index(moment)
    if i > FRIDAY:
        step = i
    elif i == FRIDAY:
        step = 7
    else:
        step = FRIDAY - i
    return like(moment + timedelta(days=step), value)


def get_next_friday_the_13th(value: DateLike):
    """First Friday the 13th on or after *value* (UTC calendar days)."""
    cursor = to_datetime(value)
    for steps in range(FRIDAY_13TH_SEARCH_LIMIT + 1):
        if cursor.day == 13 and day_index(cursor) == FRIDAY:
            logger.debug("Friday the 13th found after %d day(s): %s", steps, cursor.date())
            return like(cursor.replace(day=13), value)
        cursor += _ONE_DAY
    raise CalendarError(
        f"No Friday the 13th within {FRIDAY_13TH_SEARCH_LIMIT} days of {value!r}."
    )
