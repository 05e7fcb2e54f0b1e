"""Pydantic schemas for versioned statutory rule definitions.

A ``RuleDefinition`` carries an opaque ``parameters`` mapping, exactly as
stored in the rule table. Each calculator validates the block it needs
into one of the typed parameter models below, so a malformed table fails
loudly at the calculator boundary instead of producing a wrong number.
"""

from typing import Any

from pydantic import Field

from hradmin.models.common import HRBase, RuleType

# ---------------------------------------------------------------------------
# Rule definition (immutable)
# ---------------------------------------------------------------------------


class RuleDefinition(HRBase, frozen=True):
    """One versioned parameter set for a rule family."""

    rule_id: str = Field(..., alias="id", min_length=1)
    version: str = Field(..., min_length=1)
    rule_type: RuleType = Field(..., alias="type")
    description: str = ""
    parameters: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# EOSB (Labor Law Articles 84 & 85)
# ---------------------------------------------------------------------------


class FirstPeriod(HRBase):
    years: float = Field(..., gt=0)
    rate_per_year_months: float = Field(..., ge=0)


class TerminationParameters(HRBase):
    first_period: FirstPeriod
    subsequent_rate_months_per_year: float = Field(..., ge=0)
    indefinite_contract_notice_months: float = Field(default=2, ge=0)


class ResignationParameters(HRBase):
    """Service-length bands for the resignation multiplier (0, 1/3, 2/3, full)."""

    no_gratuity_years_less_than: float = Field(..., ge=0)
    one_third_gratuity_years_less_than: float = Field(..., ge=0)
    two_thirds_gratuity_years_less_than: float = Field(..., ge=0)
    full_gratuity_years_equal_or_greater_than: float = Field(..., ge=0)


class EOSBParameters(HRBase):
    termination: TerminationParameters
    resignation: ResignationParameters


# ---------------------------------------------------------------------------
# Annual leave
# ---------------------------------------------------------------------------


class AnnualLeave(HRBase):
    base_days: int = Field(..., ge=0)
    enhanced_days: int = Field(..., ge=0)
    enhancement_after_years: int = Field(..., ge=0)


class LeaveParameters(HRBase):
    annual_leave: AnnualLeave


# ---------------------------------------------------------------------------
# GOSI
# ---------------------------------------------------------------------------


class ContributionSplit(HRBase):
    """Employee / employer contribution rates as fractions (0.09 = 9%)."""

    employee: float = Field(default=0.0, ge=0.0, le=1.0)
    employer: float = Field(default=0.0, ge=0.0, le=1.0)


class SaudiContributionRates(HRBase):
    annuities: ContributionSplit
    saned: ContributionSplit  # unemployment insurance
    occupational_hazards: ContributionSplit
    max_contributory_wage: float = Field(..., gt=0)


class NonSaudiContributionRates(HRBase):
    occupational_hazards: ContributionSplit
    max_contributory_wage: float = Field(..., gt=0)


class GOSIParameters(HRBase):
    saudi: SaudiContributionRates
    non_saudi: NonSaudiContributionRates


# ---------------------------------------------------------------------------
# Overtime (Labor Law Article 107)
# ---------------------------------------------------------------------------


class OvertimeParameters(HRBase):
    multiplier: float = Field(..., gt=0)
    working_hours_per_day: float = Field(..., gt=0)
    working_days_per_month: float = Field(..., gt=0)


# ---------------------------------------------------------------------------
# Nitaqat
# ---------------------------------------------------------------------------


class NitaqatLevel(HRBase):
    """A compliance band; ``threshold`` is the minimum Saudization % to qualify."""

    name: str = Field(..., min_length=1)
    name_ar: str = ""
    threshold: float = Field(..., ge=0.0)
    color: str = ""


class NitaqatParameters(HRBase):
    levels: list[NitaqatLevel] = Field(..., min_length=1)
    # sector key -> band name -> threshold override
    sector_adjustments: dict[str, dict[str, float]] = Field(default_factory=dict)
