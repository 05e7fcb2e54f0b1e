"""FastAPI statutory benefit endpoints.

POST /v1/eosb         — end-of-service benefit for one employee
POST /v1/gosi         — monthly GOSI contribution for one employee
POST /v1/gosi/report  — GOSI contribution summary for a workforce
POST /v1/leave        — annual leave entitlement per employee

Stateless: employees arrive in the request body, results are not stored.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from hradmin.api.dependencies import get_rule_repository, require_rule
from hradmin.engine.rules.eosb import calculate_eosb
from hradmin.engine.rules.gosi import build_gosi_report, calculate_gosi
from hradmin.engine.rules.leave import build_leave_schedule
from hradmin.engine.rules.repository import RuleRepository
from hradmin.models.common import HRBase, RuleType, TerminationReason
from hradmin.models.employee import Employee
from hradmin.models.results import (
    EOSBResult,
    GOSIContribution,
    GOSIReport,
    LeaveEntitlementRecord,
)

router = APIRouter(prefix="/v1", tags=["benefits"])


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class EOSBRequest(HRBase):
    employee: Employee
    reason: TerminationReason = TerminationReason.NON_RENEWAL
    monthly_salary: float | None = None  # None = employee's basic salary
    termination_compensation_months: float = Field(default=0, ge=0)
    as_of: date | None = None


class GOSIRequest(HRBase):
    employee: Employee


class WorkforceRequest(HRBase):
    employees: list[Employee] = Field(default_factory=list)
    as_of: date | None = None
    arabic_names: bool = False


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post("/eosb", response_model=EOSBResult)
async def compute_eosb(
    body: EOSBRequest,
    rules: RuleRepository = Depends(get_rule_repository),
) -> EOSBResult:
    """Compute gratuity, termination compensation and outstanding loan."""
    rule = require_rule(rules, RuleType.EOSB)
    salary = body.monthly_salary
    if salary is None:
        salary = body.employee.payroll.basic_salary or 0.0

    result = calculate_eosb(
        body.employee,
        rule,
        body.reason,
        salary,
        body.termination_compensation_months,
        as_of=body.as_of,
    )
    if result is None:
        raise HTTPException(
            status_code=422,
            detail=(
                "Cannot calculate end-of-service benefit: the employee needs "
                "a joining date and a positive monthly salary."
            ),
        )
    return result


@router.post("/gosi", response_model=GOSIContribution)
async def compute_gosi(
    body: GOSIRequest,
    rules: RuleRepository = Depends(get_rule_repository),
) -> GOSIContribution:
    """Monthly employee/employer GOSI contribution."""
    return calculate_gosi(body.employee, require_rule(rules, RuleType.GOSI))


@router.post("/gosi/report", response_model=GOSIReport)
async def compute_gosi_report(
    body: WorkforceRequest,
    rules: RuleRepository = Depends(get_rule_repository),
) -> GOSIReport:
    """Per-employee GOSI contribution summary with totals."""
    return build_gosi_report(body.employees, require_rule(rules, RuleType.GOSI))


@router.post("/leave", response_model=list[LeaveEntitlementRecord])
async def compute_leave(
    body: WorkforceRequest,
    rules: RuleRepository = Depends(get_rule_repository),
) -> list[LeaveEntitlementRecord]:
    """Annual leave entitlement per employee."""
    return build_leave_schedule(
        body.employees,
        require_rule(rules, RuleType.LEAVE),
        as_of=body.as_of,
        arabic_names=body.arabic_names,
    )
