"""Payroll run schemas: per-employee records, run envelope, and totals."""

from enum import StrEnum

from pydantic import Field

from hradmin.models.common import (
    SAR,
    HRBase,
    UTCTimestamp,
    UUIDv7,
    new_uuid7,
    utc_now,
)


class LoanStatus(StrEnum):
    """Where a personal loan stands relative to its repayment window."""

    PENDING = "Pending"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    NOT_APPLICABLE = "N/A"


class PayrollRecord(HRBase, frozen=True):
    """One employee's payslip figures for a payroll period.

    ``other_allowances`` folds commission and other allowances together,
    matching the payslip and CSV column layout.
    """

    employee_id: str
    employee_name: str
    basic_salary: float
    housing_allowance: float
    transportation_allowance: float
    other_allowances: float
    overtime_hours: float = 0.0
    overtime_pay: float = 0.0
    loan_payout_amount: float = 0.0
    gross_earnings: float
    gosi_deduction_employee: float
    gosi_deduction_employer: float
    personal_loan_deduction: float = 0.0
    total_deductions: float
    net_pay: float


class PayrollTotals(HRBase, frozen=True):
    gross: SAR = 0.0
    gosi: SAR = 0.0
    loan: SAR = 0.0
    deductions: SAR = 0.0
    net: SAR = 0.0


class PayrollRun(HRBase, frozen=True):
    """A computed payroll for one calendar month. Recomputed in full each run."""

    run_id: UUIDv7 = Field(default_factory=new_uuid7)
    year: int = Field(..., ge=1900, le=2100)
    month: int = Field(..., ge=1, le=12)
    records: list[PayrollRecord] = Field(default_factory=list)
    run_date: UTCTimestamp = Field(default_factory=utc_now)

    @property
    def period_label(self) -> str:
        """``YYYY_MM`` label used in export file names."""
        return f"{self.year}_{self.month:02d}"

