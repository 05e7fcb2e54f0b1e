"""Tests for tenure and calendar-month arithmetic.

- years_of_service_julian: elapsed days / 365.25
- years_of_service_calendar: whole years with month/day correction
- add_months: day clamped to the target month
"""

from datetime import date

import pytest

from hradmin.engine.rules.tenure import (
    add_months,
    month_index,
    months_between,
    years_of_service_calendar,
    years_of_service_julian,
)


class TestJulianYears:
    def test_exact_four_years(self):
        # 2016-01-01 -> 2020-01-01 is 1461 days, one leap day included
        assert years_of_service_julian(date(2016, 1, 1), date(2020, 1, 1)) == 4.0

    def test_fractional(self):
        years = years_of_service_julian(date(2020, 1, 1), date(2021, 7, 1))
        assert years == pytest.approx(547 / 365.25)
        assert years < 1.5

    def test_same_day_is_zero(self):
        assert years_of_service_julian(date(2020, 5, 5), date(2020, 5, 5)) == 0.0


class TestCalendarYears:
    def test_day_before_anniversary(self):
        assert years_of_service_calendar(date(2019, 6, 15), date(2024, 6, 14)) == 4

    def test_on_anniversary(self):
        assert years_of_service_calendar(date(2019, 6, 15), date(2024, 6, 15)) == 5

    def test_no_start_date(self):
        assert years_of_service_calendar(None, date(2024, 1, 1)) == 0


class TestMonthArithmetic:
    def test_month_index_consecutive(self):
        assert month_index(date(2024, 1, 31)) - month_index(date(2023, 12, 1)) == 1

    def test_months_between_ignores_day(self):
        assert months_between(date(2024, 1, 31), date(2024, 3, 1)) == 2

    def test_add_months_clamps_day(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_add_months_backwards_across_year(self):
        assert add_months(date(2024, 3, 15), -3) == date(2023, 12, 15)
