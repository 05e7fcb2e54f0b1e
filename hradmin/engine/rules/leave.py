"""Annual leave entitlement (Saudi Labor Law).

21 days a year, rising to 30 days once the employee has completed five
years. Tenure here is whole calendar years, not the Julian years used for
EOSB.
"""

from collections.abc import Iterable
from datetime import date

from hradmin.engine.rules.tenure import years_of_service_calendar
from hradmin.models.employee import Employee
from hradmin.models.results import LeaveEntitlementRecord
from hradmin.models.rules import LeaveParameters, RuleDefinition


def leave_entitlement(years_of_service: float, rule: RuleDefinition) -> int:
    """Annual leave days; the enhancement threshold is inclusive."""
    params = LeaveParameters.model_validate(rule.parameters).annual_leave
    if years_of_service >= params.enhancement_after_years:
        return params.enhanced_days
    return params.base_days


def build_leave_schedule(
    employees: Iterable[Employee],
    rule: RuleDefinition,
    *,
    as_of: date | None = None,
    arabic_names: bool = False,
) -> list[LeaveEntitlementRecord]:
    """Entitlement per employee as of a date (today by default)."""
    as_of = as_of or date.today()
    schedule: list[LeaveEntitlementRecord] = []
    for emp in employees:
        years = years_of_service_calendar(emp.date_of_joining, as_of)
        schedule.append(LeaveEntitlementRecord(
            employee_id=emp.employee_id,
            employee_name=emp.display_name(arabic=arabic_names),
            years_of_service=years,
            entitlement_days=leave_entitlement(years, rule),
        ))
    return schedule
