class CalendarError(Exception):
    """Base exception for all datekit errors."""


class DateParseError(CalendarError, ValueError):
    """Raised when a value cannot be interpreted as a calendar date."""
