"""FastAPI Nitaqat endpoints.

POST /v1/nitaqat           — band classification for a workforce
POST /v1/nitaqat/simulate  — current vs what-if hire/terminate scenario

Workforce entries only need ``isSaudi``; full employee records are
accepted for simulation so terminated ids and salaries can be resolved.
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from hradmin.api.dependencies import get_rule_repository, require_rule
from hradmin.config.settings import Settings, get_settings
from hradmin.engine.rules.nitaqat import calculate_nitaqat_status, simulate_saudization
from hradmin.engine.rules.repository import RuleRepository
from hradmin.models.common import HRBase, Language, RuleType
from hradmin.models.employee import Employee, WorkforceMember
from hradmin.models.results import NitaqatInfo, SimulationResult

router = APIRouter(prefix="/v1/nitaqat", tags=["saudization"])


class NitaqatRequest(HRBase):
    workforce: list[WorkforceMember] = Field(default_factory=list)
    sector: str | None = None
    lang: Language | None = None


class SimulationRequest(HRBase):
    employees: list[Employee] = Field(default_factory=list)
    sector: str | None = None
    lang: Language | None = None
    new_saudi_hires: int = Field(default=0, ge=0)
    new_non_saudi_hires: int = Field(default=0, ge=0)
    terminated_ids: list[str] = Field(default_factory=list)


@router.post("", response_model=NitaqatInfo)
async def classify_workforce(
    body: NitaqatRequest,
    rules: RuleRepository = Depends(get_rule_repository),
    settings: Settings = Depends(get_settings),
) -> NitaqatInfo:
    """Classify a workforce snapshot into its Nitaqat band."""
    return calculate_nitaqat_status(
        body.workforce,
        require_rule(rules, RuleType.NITAQAT),
        body.sector or settings.DEFAULT_SECTOR,
        body.lang or settings.DEFAULT_LANGUAGE,
    )


@router.post("/simulate", response_model=SimulationResult)
async def simulate(
    body: SimulationRequest,
    rules: RuleRepository = Depends(get_rule_repository),
    settings: Settings = Depends(get_settings),
) -> SimulationResult:
    """Compare the current band with a hypothetical workforce."""
    known_ids = {e.employee_id for e in body.employees}
    unknown = [i for i in body.terminated_ids if i not in known_ids]
    if unknown:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown employee ids to terminate: {', '.join(unknown)}.",
        )
    return simulate_saudization(
        body.employees,
        require_rule(rules, RuleType.NITAQAT),
        body.sector or settings.DEFAULT_SECTOR,
        body.lang or settings.DEFAULT_LANGUAGE,
        new_saudi_hires=body.new_saudi_hires,
        new_non_saudi_hires=body.new_non_saudi_hires,
        terminated_ids=body.terminated_ids,
    )
