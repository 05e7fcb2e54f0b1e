"""GOSI social-insurance contributions.

contributory_wage = min(basic + housing, saudi.max_contributory_wage)

Saudi:      employee = (annuities + saned) employee rates * wage
            employer = (annuities + saned + occupational hazards) employer rates * wage
Non-Saudi:  employee = occupational hazards employee rate * wage (normally 0)
            employer = occupational hazards employer rate * wage

The wage cap is read from the ``saudi`` block for every employee,
including non-Saudis. Integrators should confirm whether a single shared
cap is intended; ``non_saudi.max_contributory_wage`` is currently unused.

No rounding is applied here.
"""

from collections.abc import Iterable

from hradmin.models.employee import Employee
from hradmin.models.results import GOSIContribution, GOSIReport, GOSIReportRecord
from hradmin.models.rules import GOSIParameters, RuleDefinition


def contributory_wage(employee: Employee, params: GOSIParameters) -> float:
    """Capped wage base (basic + housing), never negative."""
    pay = employee.payroll
    wage = min(
        (pay.basic_salary or 0.0) + pay.housing_allowance,
        params.saudi.max_contributory_wage,
    )
    return max(0.0, wage)


def calculate_gosi(employee: Employee, rule: RuleDefinition) -> GOSIContribution:
    """Monthly employee/employer contribution for one employee.

    An employee without a basic salary contributes nothing; that is a
    normal result, not an error.
    """
    if not employee.payroll.basic_salary:
        return GOSIContribution(employee=0.0, employer=0.0)

    params = GOSIParameters.model_validate(rule.parameters)
    wage = contributory_wage(employee, params)
    if wage <= 0:
        return GOSIContribution(employee=0.0, employer=0.0)

    if employee.is_saudi:
        rates = params.saudi
        employee_pct = rates.annuities.employee + rates.saned.employee
        employer_pct = (
            rates.annuities.employer
            + rates.saned.employer
            + rates.occupational_hazards.employer
        )
    else:
        rates = params.non_saudi
        employee_pct = rates.occupational_hazards.employee
        employer_pct = rates.occupational_hazards.employer

    return GOSIContribution(
        employee=wage * employee_pct,
        employer=wage * employer_pct,
    )


def build_gosi_report(
    employees: Iterable[Employee],
    rule: RuleDefinition,
) -> GOSIReport:
    """Per-employee contribution summary with column totals."""
    params = GOSIParameters.model_validate(rule.parameters)
    records: list[GOSIReportRecord] = []
    for emp in employees:
        contribution = calculate_gosi(emp, rule)
        records.append(GOSIReportRecord(
            employee_id=emp.employee_id,
            employee_name=emp.employee_name_english,
            nationality=emp.nationality,
            base_salary=emp.payroll.basic_salary or 0.0,
            housing_allowance=emp.payroll.housing_allowance,
            contributory_wage=contributory_wage(emp, params),
            employee_contribution=contribution.employee,
            employer_contribution=contribution.employer,
            total_contribution=contribution.total,
        ))

    return GOSIReport(
        records=records,
        total_employee=sum(r.employee_contribution for r in records),
        total_employer=sum(r.employer_contribution for r in records),
        total=sum(r.total_contribution for r in records),
    )
