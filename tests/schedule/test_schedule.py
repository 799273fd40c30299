"""
tests/schedule/test_schedule.py

Covers:
  - Work schedules for the documented rotas
  - Month / year boundaries, empty and single-day periods
  - WorkPattern validation and vectorised offsets
  - Period date parsing
"""

from datetime import date

import numpy as np
import pytest

from datekit.calendar import CalendarError, DateParseError
from datekit.schedule import (
    WorkPattern,
    format_schedule_date,
    get_work_schedule,
    parse_schedule_date,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def first_half_of_january():
    return {"start": "01-01-2024", "end": "15-01-2024"}


# ── get_work_schedule ─────────────────────────────────────────────────────────

class TestWorkSchedule:

    def test_one_on_three_off(self, first_half_of_january):
        assert get_work_schedule(first_half_of_january, 1, 3) == [
            "01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024",
        ]

    def test_one_on_one_off(self):
        period = {"start": "01-01-2024", "end": "10-01-2024"}
        assert get_work_schedule(period, 1, 1) == [
            "01-01-2024", "03-01-2024", "05-01-2024", "07-01-2024", "09-01-2024",
        ]

    def test_end_is_inclusive(self):
        period = {"start": "01-01-2024", "end": "09-01-2024"}
        assert get_work_schedule(period, 1, 1)[-1] == "09-01-2024"

    def test_work_block_cut_by_end(self):
        period = {"start": "01-01-2024", "end": "04-01-2024"}
        assert get_work_schedule(period, 3, 2) == [
            "01-01-2024", "02-01-2024", "03-01-2024",
        ]

    def test_crosses_year_end(self):
        period = {"start": "30-12-2023", "end": "02-01-2024"}
        assert get_work_schedule(period, 2, 1) == [
            "30-12-2023", "31-12-2023", "02-01-2024",
        ]

    def test_crosses_leap_day(self):
        period = {"start": "28-02-2024", "end": "01-03-2024"}
        assert get_work_schedule(period, 1, 0) == [
            "28-02-2024", "29-02-2024", "01-03-2024",
        ]

    def test_single_day_period(self):
        assert get_work_schedule({"start": "05-05-2024", "end": "05-05-2024"}, 2, 5) == [
            "05-05-2024",
        ]

    def test_reversed_period_is_empty(self):
        assert get_work_schedule({"start": "10-01-2024", "end": "01-01-2024"}, 1, 1) == []

    def test_zero_padding(self):
        period = {"start": "09-09-2024", "end": "09-09-2024"}
        assert get_work_schedule(period, 1, 1) == ["09-09-2024"]

    def test_year_below_1000_is_padded(self):
        assert get_work_schedule((date(999, 1, 1), date(999, 1, 2)), 1, 0) == [
            "01-01-0999", "02-01-0999",
        ]

    def test_date_objects_and_pairs(self):
        assert get_work_schedule((date(2024, 1, 1), date(2024, 1, 5)), 1, 3) == [
            "01-01-2024", "05-01-2024",
        ]

    def test_day_count_matches_pattern(self, first_half_of_january):
        schedule = get_work_schedule(first_half_of_january, 2, 2)
        assert len(schedule) == 8
        assert schedule == sorted(schedule, key=lambda s: s[6:] + s[3:5] + s[:2])

    def test_invalid_pattern_raises(self, first_half_of_january):
        with pytest.raises(CalendarError):
            get_work_schedule(first_half_of_january, 0, 3)
        with pytest.raises(CalendarError):
            get_work_schedule(first_half_of_january, 1, -1)

    def test_bad_date_raises(self):
        with pytest.raises(DateParseError):
            get_work_schedule({"start": "2024-01-01", "end": "15-01-2024"}, 1, 1)


# ── WorkPattern ───────────────────────────────────────────────────────────────

class TestWorkPattern:

    def test_cycle_length(self):
        assert WorkPattern(2, 3).cycle_length == 5

    def test_scalar_offset(self):
        pattern = WorkPattern(2, 1)
        assert pattern.is_work_day(0) is True
        assert pattern.is_work_day(2) is False
        assert pattern.is_work_day(3) is True

    def test_array_offsets(self):
        result = WorkPattern(2, 1).is_work_day(np.arange(6))
        np.testing.assert_array_equal(result, [True, True, False, True, True, False])

    def test_no_off_days(self):
        assert WorkPattern(1, 0).is_work_day(np.arange(10)).all()

    def test_work_dates(self):
        dates = WorkPattern(1, 2).work_dates(date(2024, 1, 1), date(2024, 1, 7))
        assert dates == [date(2024, 1, 1), date(2024, 1, 4), date(2024, 1, 7)]

    def test_work_dates_empty(self):
        assert WorkPattern(1, 2).work_dates(date(2024, 1, 2), date(2024, 1, 1)) == []

    @pytest.mark.parametrize("work, off", [(0, 1), (-1, 1), (1, -1)])
    def test_invalid(self, work, off):
        with pytest.raises(CalendarError):
            WorkPattern(work, off)


# ── Period dates ──────────────────────────────────────────────────────────────

class TestParseScheduleDate:

    def test_day_month_year(self):
        assert parse_schedule_date("13-01-2024") == date(2024, 1, 13)

    def test_date_passthrough(self):
        assert parse_schedule_date(date(2024, 1, 13)) == date(2024, 1, 13)

    def test_month_first_rejected(self):
        with pytest.raises(DateParseError):
            parse_schedule_date("01-13-2024")

    def test_format_pads_every_field(self):
        assert format_schedule_date(date(42, 3, 7)) == "07-03-0042"
