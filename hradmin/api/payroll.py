"""FastAPI payroll endpoints.

POST /v1/payroll/runs — compute a full payroll for one month

Every call recomputes the run from the submitted employees; nothing is
stored, so re-posting the same period and inputs gives the same records.
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from hradmin.api.dependencies import get_rule_repository
from hradmin.engine.rules.payroll import filter_records, payroll_totals, run_payroll
from hradmin.engine.rules.repository import RuleNotFoundError, RuleRepository
from hradmin.models.common import HRBase
from hradmin.models.employee import Employee
from hradmin.models.payroll import PayrollRun, PayrollTotals

router = APIRouter(prefix="/v1/payroll", tags=["payroll"])


class PayrollRunRequest(HRBase):
    year: int = Field(..., ge=1900, le=2100)
    month: int = Field(..., ge=1, le=12)
    employees: list[Employee] = Field(default_factory=list)
    overtime_hours: dict[str, float] = Field(default_factory=dict)
    arabic_names: bool = False
    search: str = ""


class PayrollRunResponse(HRBase):
    run: PayrollRun
    totals: PayrollTotals


@router.post("/runs", status_code=201, response_model=PayrollRunResponse)
async def create_payroll_run(
    body: PayrollRunRequest,
    rules: RuleRepository = Depends(get_rule_repository),
) -> PayrollRunResponse:
    """Run payroll; totals cover the records matching ``search``."""
    try:
        run = run_payroll(
            body.employees,
            body.year,
            body.month,
            rules,
            overtime_hours=body.overtime_hours,
            arabic_names=body.arabic_names,
        )
    except RuleNotFoundError as exc:
        raise HTTPException(
            status_code=404,
            detail=f"Payroll rules are not loaded: {exc}",
        ) from exc

    return PayrollRunResponse(
        run=run,
        totals=payroll_totals(filter_records(run.records, body.search)),
    )
