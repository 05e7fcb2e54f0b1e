"""End-of-service benefit (EOSB) calculator (Labor Law Articles 84 and 85).

Deterministic, no side effects. Every arithmetic step is appended to the
result's ``calculation_breakdown`` in the order it is computed, so the
figure can be audited line by line.

Formula:
    years <= first_period.years:
        gratuity = years * salary * first_period.rate_per_year_months
    otherwise:
        gratuity = first_period.years * salary * first_period.rate
                 + (years - first_period.years) * salary * subsequent_rate

Reason adjustment:
    resignation  -> 0 / 1/3 / 2/3 / full by service band
    termination  -> full, plus optional flat compensation months
    non-renewal  -> full
"""

import logging
from datetime import date

from hradmin.engine.rules.loans import outstanding_loan, paid_installments
from hradmin.engine.rules.tenure import years_of_service_julian
from hradmin.models.common import TerminationReason
from hradmin.models.employee import Employee
from hradmin.models.results import EOSBResult
from hradmin.models.rules import (
    EOSBParameters,
    ResignationParameters,
    RuleDefinition,
    TerminationParameters,
)

logger = logging.getLogger(__name__)

# Outstanding balances at or below this are float noise, not debt.
LOAN_TOLERANCE_SAR = 0.01


def _money(amount: float) -> str:
    return f"SAR {amount:.2f}"


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def base_gratuity(
    years_of_service: float,
    monthly_salary: float,
    params: TerminationParameters,
    breakdown: list[str],
) -> float:
    """Statutory gratuity before any reason adjustment."""
    first = params.first_period
    if years_of_service <= first.years:
        gratuity = years_of_service * (monthly_salary * first.rate_per_year_months)
        breakdown.append(
            f"First {first.years:g} years: {years_of_service:.2f} years * "
            f"{first.rate_per_year_months:g} months' salary = {_money(gratuity)}"
        )
    else:
        first_gratuity = first.years * (monthly_salary * first.rate_per_year_months)
        subsequent_years = years_of_service - first.years
        subsequent_gratuity = subsequent_years * (
            monthly_salary * params.subsequent_rate_months_per_year
        )
        gratuity = first_gratuity + subsequent_gratuity
        breakdown.append(
            f"First {first.years:g} years gratuity = {_money(first_gratuity)}"
        )
        breakdown.append(
            f"Subsequent years: {subsequent_years:.2f} years * "
            f"{params.subsequent_rate_months_per_year:g} month's salary = "
            f"{_money(subsequent_gratuity)}"
        )
    breakdown.append(f"Total base gratuity: {_money(gratuity)}")
    return gratuity


def resignation_multiplier(
    years_of_service: float,
    params: ResignationParameters,
) -> tuple[float, str]:
    """Share of the base gratuity due on resignation, with its explanation."""
    if years_of_service < params.no_gratuity_years_less_than:
        return 0.0, (
            f"Resignation with < {params.no_gratuity_years_less_than:g} years "
            "of service: No gratuity is due."
        )
    if years_of_service < params.one_third_gratuity_years_less_than:
        return 1 / 3, (
            f"Resignation with {params.no_gratuity_years_less_than:g}-"
            f"{params.one_third_gratuity_years_less_than:g} years of service: "
            "1/3 of gratuity is awarded."
        )
    if years_of_service < params.two_thirds_gratuity_years_less_than:
        return 2 / 3, (
            f"Resignation with {params.one_third_gratuity_years_less_than:g}-"
            f"{params.two_thirds_gratuity_years_less_than:g} years of service: "
            "2/3 of gratuity is awarded."
        )
    return 1.0, (
        f"Resignation after {params.full_gratuity_years_equal_or_greater_than:g}+ "
        "years: Full gratuity is awarded."
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def calculate_eosb(
    employee: Employee,
    rule: RuleDefinition,
    reason: TerminationReason | str,
    monthly_salary: float,
    termination_compensation_months: float = 0,
    *,
    as_of: date | None = None,
) -> EOSBResult | None:
    """Compute the end-of-service benefit for one employee.

    Service ends on ``employee.date_of_exit`` when set, otherwise on
    ``as_of`` (today by default).

    Returns:
        EOSBResult, or None when the employee has no join date or the
        salary is not positive. None means "cannot calculate", not an error.
    """
    if employee.date_of_joining is None or monthly_salary <= 0:
        logger.debug(
            "EOSB skipped for %s: join date or salary missing", employee.employee_id,
        )
        return None

    reason = TerminationReason(reason)
    params = EOSBParameters.model_validate(rule.parameters)
    end_date = employee.date_of_exit or as_of or date.today()
    years = years_of_service_julian(employee.date_of_joining, end_date)

    breakdown: list[str] = []
    termination_compensation = 0.0
    loan_deduction = 0.0

    # Step 1: base gratuity
    gratuity = base_gratuity(years, monthly_salary, params.termination, breakdown)

    # Step 2: reason adjustment
    if reason == TerminationReason.RESIGNATION:
        multiplier, explanation = resignation_multiplier(years, params.resignation)
        breakdown.append(explanation)
        if multiplier != 1:
            gratuity *= multiplier
            breakdown.append(f"Adjusted gratuity: {_money(gratuity)}")
    elif reason == TerminationReason.TERMINATION:
        breakdown.append(
            "Reason: Contract Termination by Employer. Full gratuity is awarded."
        )
        if termination_compensation_months > 0:
            termination_compensation = termination_compensation_months * monthly_salary
            breakdown.append(
                f"+ Additional Compensation ({termination_compensation_months:g} "
                f"months) = {_money(termination_compensation)}"
            )
    else:
        breakdown.append(
            "Reason: Contract Completion / Non-Renewal. Full gratuity is awarded."
        )

    # Step 3: outstanding loan
    loan = employee.payroll.loan_info
    outstanding = outstanding_loan(loan, end_date)
    if outstanding > LOAN_TOLERANCE_SAR:
        loan_deduction = outstanding
        remaining = loan.installments - paid_installments(loan, end_date)
        breakdown.append(
            f"- Outstanding Loan Deduction: {_money(loan_deduction)} "
            f"({remaining} of {loan.installments} installments remaining)."
        )

    return EOSBResult(
        years_of_service=years,
        total_gratuity=gratuity,
        termination_compensation=termination_compensation,
        loan_deduction=loan_deduction,
        calculation_breakdown=breakdown,
    )
