"""Payroll assembly for one calendar month.

Per employee:
    gross      = basic + housing + transport + commission + other
                 + overtime pay + loan payout (payout month only)
    deductions = GOSI employee share + loan installment (window months only)
    net        = gross - deductions

A run is recomputed in full from its inputs every time; re-running a
period with identical inputs yields identical records.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime

from hradmin.engine.rules.gosi import calculate_gosi
from hradmin.engine.rules.loans import loan_deduction, loan_payout_amount
from hradmin.engine.rules.overtime import overtime_pay
from hradmin.engine.rules.repository import RuleRepository
from hradmin.models.common import RuleType, utc_now
from hradmin.models.employee import Employee
from hradmin.models.payroll import PayrollRecord, PayrollRun, PayrollTotals
from hradmin.models.rules import RuleDefinition

logger = logging.getLogger(__name__)


def build_payroll_record(
    employee: Employee,
    year: int,
    month: int,
    *,
    gosi_rule: RuleDefinition,
    overtime_rule: RuleDefinition,
    overtime_hours: float = 0.0,
    arabic_names: bool = False,
) -> PayrollRecord:
    """Payslip figures for one employee in one period."""
    pay = employee.payroll
    basic = pay.basic_salary or 0.0
    other = pay.commission + pay.other_allowances

    ot_pay = overtime_pay(overtime_hours, basic, overtime_rule)
    payout = loan_payout_amount(pay.loan_info, year, month)
    installment = loan_deduction(pay.loan_info, year, month)

    gross = (
        basic
        + pay.housing_allowance
        + pay.transportation_allowance
        + other
        + ot_pay
        + payout
    )
    gosi = calculate_gosi(employee, gosi_rule)
    total_deductions = gosi.employee + installment

    return PayrollRecord(
        employee_id=employee.employee_id,
        employee_name=employee.display_name(arabic=arabic_names),
        basic_salary=basic,
        housing_allowance=pay.housing_allowance,
        transportation_allowance=pay.transportation_allowance,
        other_allowances=other,
        overtime_hours=overtime_hours,
        overtime_pay=ot_pay,
        loan_payout_amount=payout,
        gross_earnings=gross,
        gosi_deduction_employee=gosi.employee,
        gosi_deduction_employer=gosi.employer,
        personal_loan_deduction=installment,
        total_deductions=total_deductions,
        net_pay=gross - total_deductions,
    )


def run_payroll(
    employees: Iterable[Employee],
    year: int,
    month: int,
    rules: RuleRepository,
    *,
    overtime_hours: Mapping[str, float] | None = None,
    arabic_names: bool = False,
    run_date: datetime | None = None,
) -> PayrollRun:
    """Compute the payroll for ``month`` (1-12) of ``year``.

    Raises:
        ValueError: month outside 1-12.
        RuleNotFoundError: GOSI or OVERTIME rules are not loaded.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Payroll month must be 1-12, got {month}.")

    gosi_rule = rules.get(RuleType.GOSI)
    overtime_rule = rules.get(RuleType.OVERTIME)
    hours = overtime_hours or {}

    records = [
        build_payroll_record(
            emp,
            year,
            month,
            gosi_rule=gosi_rule,
            overtime_rule=overtime_rule,
            overtime_hours=hours.get(emp.employee_id, 0.0),
            arabic_names=arabic_names,
        )
        for emp in employees
    ]
    logger.info("Payroll %d-%02d computed for %d employees", year, month, len(records))

    return PayrollRun(
        year=year,
        month=month,
        records=records,
        run_date=run_date or utc_now(),
    )


def payroll_totals(records: Iterable[PayrollRecord]) -> PayrollTotals:
    """Column totals for the payroll summary footer."""
    gross = gosi = loan = deductions = net = 0.0
    for rec in records:
        gross += rec.gross_earnings
        gosi += rec.gosi_deduction_employee
        loan += rec.personal_loan_deduction
        deductions += rec.total_deductions
        net += rec.net_pay
    return PayrollTotals(gross=gross, gosi=gosi, loan=loan, deductions=deductions, net=net)


def filter_records(records: Sequence[PayrollRecord], search: str) -> list[PayrollRecord]:
    """Case-insensitive match on employee name or id; blank returns all."""
    if not search:
        return list(records)
    needle = search.lower()
    return [
        r for r in records
        if needle in r.employee_name.lower() or needle in r.employee_id.lower()
    ]
