from __future__ import annotations

import logging
import math
import warnings
from datetime import date, datetime, timedelta, timezone
from typing import Union

import numpy as np
from dateutil import parser as _dateparser
from dateutil.parser import UnknownTimezoneWarning

from ._exceptions import DateParseError

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, "np.datetime64", int, float]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_DAY: int = 24 * 60 * 60 * 1000
_ONE_MS = timedelta(milliseconds=1)

# UTC offsets (seconds) of the zone abbreviations dateutil detects but
# cannot resolve on its own.  Any other unknown name is a DateParseError.
TZ_ABBREVIATIONS: dict[str, int] = {
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
    "GMT": 0,
}

_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def to_datetime(value: DateLike) -> datetime:
    """
    Coerce *value* to an aware UTC datetime.

    Naive datetimes and plain dates are read as UTC.  Numbers are epoch
    milliseconds.  Strings are tried as ISO-8601 first and then handed to
    dateutil's free-form parser, so ``'04 Dec 1995 00:12:00 UTC'`` works too.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise DateParseError("NaT is not a date.")
        ms = int(value.astype("datetime64[ms]").astype(np.int64))
        return _from_epoch_ms(ms)
    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        if not math.isfinite(value):
            raise DateParseError(f"Not a finite timestamp: {value!r}")
        return _from_epoch_ms(float(value))
    if isinstance(value, str):
        return to_datetime(_parse_string(value))
    raise DateParseError(f"Unsupported type for date: {type(value).__name__}")


def to_timestamp(value: DateLike) -> int:
    """Whole milliseconds since 1970-01-01T00:00:00Z."""
    return (to_datetime(value) - EPOCH) // _ONE_MS


def wall_date(value: DateLike) -> date:
    """
    Calendar day as written in the value itself, with no UTC conversion.

    ``datetime(2024, 4, 1, 0, 30, tzinfo=+05:30)`` and the string
    ``'2024-04-01T00:30:00+05:30'`` both give April 1st.  Numbers and
    ``datetime64`` carry no zone and are read as UTC.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_string(value).date()
    return to_datetime(value).date()


def like(result: datetime, original: object) -> date | datetime:
    """Return the UTC *result* in the same representation as *original*."""
    if isinstance(original, datetime):
        if original.tzinfo is None:
            return result.replace(tzinfo=None)
        return result.astimezone(original.tzinfo)
    if isinstance(original, date):
        return result.date()
    return result


def _from_epoch_ms(ms: float) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=ms)
    except OverflowError as exc:
        raise DateParseError(f"Timestamp out of range: {ms!r}") from exc


def _parse_string(text: str) -> datetime:
    """Parse *text* as written; the zone (if any) is not converted."""
    text = text.strip()
    if not text:
        raise DateParseError("Empty date string.")
    try:
        return _dateparser.isoparse(text)
    except (ValueError, OverflowError):
        logger.debug("%r is not ISO-8601, trying free-form parsing", text)

    # Fields missing from the string are taken from the default, so parse
    # against two defaults that differ in year, month and day.
    first, second = (_parse_free_form(text, default) for default in _DEFAULTS)
    if first != second:
        raise DateParseError(f"Date string needs a year, month and day: {text!r}")
    return first


def _parse_free_form(text: str, default: datetime) -> datetime:
    with warnings.catch_warnings():
        warnings.simplefilter("error", UnknownTimezoneWarning)
        try:
            return _dateparser.parse(text, default=default, tzinfos=TZ_ABBREVIATIONS)
        except UnknownTimezoneWarning as exc:
            raise DateParseError(f"Unknown time zone in {text!r}") from exc
        except (ValueError, OverflowError) as exc:
            raise DateParseError(f"Unsupported date string: {text!r}") from exc
