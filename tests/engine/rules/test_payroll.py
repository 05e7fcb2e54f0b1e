"""Tests for monthly payroll assembly.

- gross = pay components + overtime + loan payout
- deductions = GOSI employee share + loan installment
- re-running a period with identical inputs yields identical records
"""

from datetime import date, datetime, timezone

import pytest

from hradmin.engine.rules.payroll import (
    build_payroll_record,
    filter_records,
    payroll_totals,
    run_payroll,
)
from hradmin.engine.rules.repository import RuleNotFoundError, RuleRepository
from hradmin.models.employee import LoanInfo

RUN_DATE = datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def saudi_employee(make_employee):
    return make_employee(
        "E001",
        employee_name_english="Ahmed Ali",
        basic_salary=10_000,
        housing_allowance=5_000,
        transportation_allowance=1_000,
        commission=500,
        other_allowances=500,
    )


@pytest.fixture
def borrower(make_employee):
    return make_employee(
        "E002",
        is_saudi=False,
        employee_name_english="Ravi Kumar",
        basic_salary=8_800,
        loan=LoanInfo(total_amount=3_000, start_date=date(2024, 3, 1), installments=3),
    )


class TestPayrollRecord:
    def test_components(self, saudi_employee, gosi_rule, overtime_rule):
        rec = build_payroll_record(
            saudi_employee, 2024, 3, gosi_rule=gosi_rule, overtime_rule=overtime_rule,
        )
        assert rec.other_allowances == 1_000
        assert rec.gross_earnings == pytest.approx(17_000)
        assert rec.gosi_deduction_employee == pytest.approx(1_462.5)
        assert rec.gosi_deduction_employer == pytest.approx(1_762.5)
        assert rec.total_deductions == pytest.approx(1_462.5)
        assert rec.net_pay == pytest.approx(15_537.5)

    def test_overtime_added_to_gross(self, borrower, gosi_rule, overtime_rule):
        rec = build_payroll_record(
            borrower, 2024, 5, gosi_rule=gosi_rule, overtime_rule=overtime_rule,
            overtime_hours=10,
        )
        assert rec.overtime_pay == pytest.approx(750.0)
        assert rec.gross_earnings == pytest.approx(8_800 + 750)

    def test_loan_payout_month(self, borrower, gosi_rule, overtime_rule):
        rec = build_payroll_record(
            borrower, 2024, 2, gosi_rule=gosi_rule, overtime_rule=overtime_rule,
        )
        assert rec.loan_payout_amount == 3_000
        assert rec.personal_loan_deduction == 0.0
        assert rec.gross_earnings == pytest.approx(11_800)

    def test_loan_deduction_month(self, borrower, gosi_rule, overtime_rule):
        rec = build_payroll_record(
            borrower, 2024, 3, gosi_rule=gosi_rule, overtime_rule=overtime_rule,
        )
        assert rec.loan_payout_amount == 0.0
        assert rec.personal_loan_deduction == 1_000
        # Non-Saudi employee share is 0, so the installment is the only deduction
        assert rec.total_deductions == pytest.approx(1_000)
        assert rec.net_pay == pytest.approx(7_800)

    def test_missing_basic_salary(self, make_employee, gosi_rule, overtime_rule):
        emp = make_employee(basic_salary=None, housing_allowance=2_000)
        rec = build_payroll_record(
            emp, 2024, 3, gosi_rule=gosi_rule, overtime_rule=overtime_rule,
            overtime_hours=5,
        )
        assert rec.basic_salary == 0.0
        assert rec.overtime_pay == 0.0
        assert rec.gosi_deduction_employee == 0.0
        assert rec.gross_earnings == 2_000


class TestRunPayroll:
    def test_run(self, saudi_employee, borrower, rules):
        run = run_payroll(
            [saudi_employee, borrower], 2024, 3, rules,
            overtime_hours={"E002": 10}, run_date=RUN_DATE,
        )
        assert run.period_label == "2024_03"
        assert [r.employee_id for r in run.records] == ["E001", "E002"]
        assert run.records[0].overtime_hours == 0.0
        assert run.records[1].overtime_hours == 10

    def test_idempotent(self, saudi_employee, borrower, rules):
        first = run_payroll([saudi_employee, borrower], 2024, 3, rules, run_date=RUN_DATE)
        second = run_payroll([saudi_employee, borrower], 2024, 3, rules, run_date=RUN_DATE)
        assert first.records == second.records

    @pytest.mark.parametrize("month", [0, 13])
    def test_bad_month(self, saudi_employee, rules, month):
        with pytest.raises(ValueError, match="1-12"):
            run_payroll([saudi_employee], 2024, month, rules)

    def test_missing_rules(self, saudi_employee):
        with pytest.raises(RuleNotFoundError):
            run_payroll([saudi_employee], 2024, 3, RuleRepository.from_rules([]))

    def test_arabic_names(self, make_employee, rules):
        emp = make_employee(employee_name_arabic="أحمد علي")
        run = run_payroll([emp], 2024, 3, rules, arabic_names=True)
        assert run.records[0].employee_name == "أحمد علي"


class TestTotalsAndSearch:
    def test_totals(self, saudi_employee, borrower, rules):
        run = run_payroll([saudi_employee, borrower], 2024, 3, rules, run_date=RUN_DATE)
        totals = payroll_totals(run.records)
        assert totals.gross == pytest.approx(17_000 + 8_800)
        assert totals.gosi == pytest.approx(1_462.5)
        assert totals.loan == pytest.approx(1_000)
        assert totals.deductions == pytest.approx(2_462.5)
        assert totals.net == pytest.approx(totals.gross - totals.deductions)

    def test_totals_empty(self):
        assert payroll_totals([]).net == 0.0

    def test_filter_by_name_and_id(self, saudi_employee, borrower, rules):
        run = run_payroll([saudi_employee, borrower], 2024, 3, rules, run_date=RUN_DATE)
        assert [r.employee_id for r in filter_records(run.records, "ravi")] == ["E002"]
        assert [r.employee_id for r in filter_records(run.records, "e001")] == ["E001"]
        assert len(filter_records(run.records, "")) == 2
