"""Personal loan schedule: one payout month, then equal monthly deductions.

For a loan starting in month S with N installments:

    S - 1          -> payout: full amount credited to earnings
    S .. S + N - 1 -> deduction: amount / N each month
    anything else  -> nothing

Windows are evaluated on calendar months, so the day of the start date
does not shift the schedule. Together they span exactly N + 1 months.
"""

from datetime import date

from hradmin.engine.rules.tenure import add_months, month_index, months_between
from hradmin.models.employee import LoanInfo
from hradmin.models.payroll import LoanStatus


def _period_offset(loan: LoanInfo, year: int, month: int) -> int:
    """Months from the loan's start month to the payroll period."""
    return (year * 12 + (month - 1)) - month_index(loan.start_date)


def loan_payout_amount(loan: LoanInfo | None, year: int, month: int) -> float:
    """Full loan amount in the month before repayment starts, else 0."""
    if loan is None or not loan.has_schedule:
        return 0.0
    if _period_offset(loan, year, month) == -1:
        return loan.total_amount
    return 0.0


def loan_deduction(loan: LoanInfo | None, year: int, month: int) -> float:
    """Installment due in the period; 0 outside the half-open repayment window."""
    if loan is None or not loan.has_schedule:
        return 0.0
    if 0 <= _period_offset(loan, year, month) < loan.installments:
        return loan.monthly_installment
    return 0.0


def loan_end_date(loan: LoanInfo) -> date:
    """First date after the repayment window."""
    return add_months(loan.start_date, loan.installments)


def loan_status(loan: LoanInfo | None, as_of: date | None = None) -> LoanStatus:
    """Pending before the start date, Active inside the window, then Completed."""
    if loan is None or not loan.has_schedule:
        return LoanStatus.NOT_APPLICABLE
    as_of = as_of or date.today()
    if as_of < loan.start_date:
        return LoanStatus.PENDING
    if as_of < loan_end_date(loan):
        return LoanStatus.ACTIVE
    return LoanStatus.COMPLETED


def paid_installments(loan: LoanInfo | None, as_of: date) -> int:
    """Installments recovered by a date, counted in calendar months."""
    if loan is None or not loan.has_schedule or not as_of > loan.start_date:
        return 0
    return max(0, min(months_between(loan.start_date, as_of), loan.installments))


def outstanding_loan(loan: LoanInfo | None, as_of: date) -> float:
    """Balance still owed on a date.

    Zero until the repayment window has started.
    """
    if loan is None or not loan.has_schedule or not as_of > loan.start_date:
        return 0.0
    return loan.total_amount - paid_installments(loan, as_of) * loan.monthly_installment
