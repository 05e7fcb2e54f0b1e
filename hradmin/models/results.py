"""Frozen output models for the statutory calculators.

Field names serialize to the camelCase keys the dashboard's export and
report components read (``totalGratuity``, ``progressToNext``, ...).
Amounts are unrounded floats; rounding is a presentation concern.
"""

from pydantic import Field

from hradmin.models.common import SAR, HRBase

# ---------------------------------------------------------------------------
# EOSB
# ---------------------------------------------------------------------------


class EOSBResult(HRBase, frozen=True):
    """End-of-service benefit for one employee and one termination reason."""

    years_of_service: float
    total_gratuity: SAR
    termination_compensation: SAR = 0.0
    loan_deduction: SAR = 0.0
    calculation_breakdown: list[str] = Field(
        default_factory=list,
        description="Every arithmetic step, in the order it was computed.",
    )


# ---------------------------------------------------------------------------
# GOSI
# ---------------------------------------------------------------------------


class GOSIContribution(HRBase, frozen=True):
    """Monthly social-insurance contribution split."""

    employee: SAR = 0.0
    employer: SAR = 0.0

    @property
    def total(self) -> float:
        return self.employee + self.employer


class GOSIReportRecord(HRBase, frozen=True):
    employee_id: str
    employee_name: str
    nationality: str
    base_salary: float
    housing_allowance: float
    contributory_wage: float
    employee_contribution: float
    employer_contribution: float
    total_contribution: float


class GOSIReport(HRBase, frozen=True):
    """Monthly GOSI contribution summary across the workforce."""

    records: list[GOSIReportRecord] = Field(default_factory=list)
    total_employee: float = 0.0
    total_employer: float = 0.0
    total: float = 0.0


# ---------------------------------------------------------------------------
# Nitaqat
# ---------------------------------------------------------------------------


class NitaqatInfo(HRBase, frozen=True):
    """Saudization band classification for a (possibly hypothetical) workforce."""

    status: str
    color: str
    saudization_rate: float = Field(..., ge=0.0, le=100.0)
    current_threshold: float
    next_status: str | None = None
    next_threshold: float | None = None
    progress_to_next: float = Field(..., ge=0.0, le=100.0)
    raw_saudi_count: int = Field(..., ge=0)
    effective_saudi_count: float = Field(..., ge=0.0)
    total_count: int = Field(default=0, ge=0)

    @property
    def is_top_band(self) -> bool:
        return self.next_status is None


class WorkforceMetrics(HRBase, frozen=True):
    saudi: int
    non_saudi: int
    total: int
    total_salary: float


class SimulationResult(HRBase, frozen=True):
    """Current vs what-if Saudization position."""

    current: NitaqatInfo
    simulated: NitaqatInfo
    current_metrics: WorkforceMetrics
    simulated_metrics: WorkforceMetrics

    @property
    def rate_change(self) -> float:
        return self.simulated.saudization_rate - self.current.saudization_rate


# ---------------------------------------------------------------------------
# Leave
# ---------------------------------------------------------------------------


class LeaveEntitlementRecord(HRBase, frozen=True):
    """Annual leave entitlement for one employee."""

    employee_id: str
    employee_name: str
    years_of_service: int
    entitlement_days: int
