"""Tests for annual leave entitlement (21 days, 30 from five years)."""

from datetime import date

import pytest

from hradmin.engine.rules.leave import build_leave_schedule, leave_entitlement


class TestLeaveEntitlement:
    @pytest.mark.parametrize(
        ("years", "days"),
        [(0, 21), (4, 21), (4.99, 21), (5, 30), (12, 30)],
    )
    def test_threshold_inclusive(self, leave_rule, years, days):
        assert leave_entitlement(years, leave_rule) == days


class TestLeaveSchedule:
    def test_day_before_fifth_anniversary(self, make_employee, leave_rule):
        emp = make_employee(date_of_joining=date(2019, 6, 15))
        [record] = build_leave_schedule([emp], leave_rule, as_of=date(2024, 6, 14))
        assert record.years_of_service == 4
        assert record.entitlement_days == 21

    def test_on_fifth_anniversary(self, make_employee, leave_rule):
        emp = make_employee(date_of_joining=date(2019, 6, 15))
        [record] = build_leave_schedule([emp], leave_rule, as_of=date(2024, 6, 15))
        assert record.years_of_service == 5
        assert record.entitlement_days == 30

    def test_missing_join_date_gets_base(self, make_employee, leave_rule):
        emp = make_employee(date_of_joining=None)
        [record] = build_leave_schedule([emp], leave_rule, as_of=date(2024, 1, 1))
        assert record.years_of_service == 0
        assert record.entitlement_days == 21

    def test_arabic_names(self, make_employee, leave_rule):
        emp = make_employee(employee_name_arabic="أحمد")
        [record] = build_leave_schedule(
            [emp], leave_rule, as_of=date(2024, 1, 1), arabic_names=True,
        )
        assert record.employee_name == "أحمد"
