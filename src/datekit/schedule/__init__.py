"""
datekit.schedule
~~~~~~~~~~~~~~~~

Shift rotas: a cyclic pattern of working days and days off, anchored at the
start of a period.

Basic usage::

    from datekit.schedule import get_work_schedule

    get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
    # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

The pattern itself accepts NumPy arrays of day offsets::

    import numpy as np
    from datekit.schedule import WorkPattern

    WorkPattern(2, 1).is_work_day(np.arange(6))
    # → array([ True,  True, False,  True,  True, False])
"""

from datekit.schedule.schedule import (
    SCHEDULE_DATE_FORMAT,
    WorkPattern,
    format_schedule_date,
    get_work_schedule,
    parse_schedule_date,
)

__all__ = [
    "SCHEDULE_DATE_FORMAT",
    "WorkPattern",
    "format_schedule_date",
    "get_work_schedule",
    "parse_schedule_date",
]
