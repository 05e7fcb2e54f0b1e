"""Nitaqat Saudization banding.

Classifies a workforce into a colour-coded compliance band by its Saudi
share. The classifier only needs nationality, so it accepts any sequence
of ``SaudiStatus`` objects: real employees or hypothetical hires built
for a what-if simulation.

Band resolution:
1. Sector overrides (``sector_adjustments[sector]``) replace each band's
   default threshold by band name. An unknown sector falls back to the
   first declared sector.
2. Bands are sorted by adjusted threshold, highest first.
3. Current band = highest band with threshold <= rate, else the lowest.
4. Next band = one step above current, None at the top.
"""

import logging
import math
from collections.abc import Collection, Iterable, Sequence

from hradmin.models.common import Language
from hradmin.models.employee import Employee, SaudiStatus, WorkforceMember
from hradmin.models.results import NitaqatInfo, SimulationResult, WorkforceMetrics
from hradmin.models.rules import NitaqatLevel, NitaqatParameters, RuleDefinition

logger = logging.getLogger(__name__)


def _band_key(name: str) -> str:
    # "Low Green", "low green" and "LowGreen" all name the same band.
    return name.lower().replace(" ", "")


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------


def resolve_sector(params: NitaqatParameters, sector: str) -> str | None:
    """Sector key actually used: the requested one, else the first declared."""
    if sector in params.sector_adjustments:
        return sector
    fallback = next(iter(params.sector_adjustments), None)
    if fallback is not None:
        logger.info("Unknown Nitaqat sector %r; using %r thresholds", sector, fallback)
    return fallback


def sector_levels(params: NitaqatParameters, sector: str) -> list[NitaqatLevel]:
    """Bands with sector-adjusted thresholds, highest threshold first."""
    sector_key = resolve_sector(params, sector)
    overrides = {
        _band_key(name): threshold
        for name, threshold in params.sector_adjustments.get(sector_key, {}).items()
    }
    adjusted = [
        level.model_copy(
            update={"threshold": overrides.get(_band_key(level.name), level.threshold)},
        )
        for level in params.levels
    ]
    return sorted(adjusted, key=lambda lvl: lvl.threshold, reverse=True)


# ---------------------------------------------------------------------------
# Counting
# ---------------------------------------------------------------------------


def count_saudis(members: Iterable[SaudiStatus]) -> int:
    return sum(1 for m in members if m.is_saudi)


def count_effective_saudis(members: Sequence[SaudiStatus]) -> float:
    """Saudi headcount as Nitaqat weighs it.

    Every Saudi currently counts as one. Special-category weighting
    (``special_category``) would be applied here.
    """
    return float(count_saudis(members))


def saudization_rate(effective_saudis: float, total: int) -> float:
    """Saudi share in percent; an empty workforce is 0%."""
    if total <= 0:
        return 0.0
    return effective_saudis / total * 100


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def _progress(rate: float, current: NitaqatLevel, nxt: NitaqatLevel | None) -> float:
    if nxt is not None and nxt.threshold > current.threshold:
        span = nxt.threshold - current.threshold
        progress = max(0.0, min(100.0, (rate - current.threshold) / span * 100))
    else:
        progress = 100.0 if rate >= current.threshold else 0.0
    return 0.0 if math.isnan(progress) else progress


def calculate_nitaqat_status(
    employees: Sequence[SaudiStatus],
    rule: RuleDefinition,
    sector: str,
    lang: Language | str = Language.EN,
) -> NitaqatInfo:
    """Classify a workforce (real or hypothetical) into its Nitaqat band."""
    params = NitaqatParameters.model_validate(rule.parameters)
    lang = Language(lang)

    total = len(employees)
    raw_saudis = count_saudis(employees)
    effective_saudis = count_effective_saudis(employees)
    rate = saudization_rate(effective_saudis, total)

    levels = sector_levels(params, sector)
    current_index = len(levels) - 1
    for index, level in enumerate(levels):
        if rate >= level.threshold:
            current_index = index
            break
    current = levels[current_index]
    nxt = levels[current_index - 1] if current_index > 0 else None

    def label(level: NitaqatLevel) -> str:
        return level.name_ar if lang == Language.AR and level.name_ar else level.name

    return NitaqatInfo(
        status=label(current),
        color=current.color,
        saudization_rate=rate,
        current_threshold=current.threshold,
        next_status=label(nxt) if nxt is not None else None,
        next_threshold=nxt.threshold if nxt is not None else None,
        progress_to_next=_progress(rate, current, nxt),
        raw_saudi_count=raw_saudis,
        effective_saudi_count=effective_saudis,
        total_count=total,
    )


# ---------------------------------------------------------------------------
# What-if simulation
# ---------------------------------------------------------------------------


def _metrics(members: Sequence[SaudiStatus], total_salary: float) -> WorkforceMetrics:
    saudi = count_saudis(members)
    return WorkforceMetrics(
        saudi=saudi,
        non_saudi=len(members) - saudi,
        total=len(members),
        total_salary=max(0.0, total_salary),
    )


def simulate_saudization(
    employees: Sequence[Employee],
    rule: RuleDefinition,
    sector: str,
    lang: Language | str = Language.EN,
    *,
    new_saudi_hires: int = 0,
    new_non_saudi_hires: int = 0,
    terminated_ids: Collection[str] = (),
) -> SimulationResult:
    """Compare the current band with a hypothetical hire/terminate scenario.

    Hypothetical hires carry no salary, so the simulated salary total only
    drops by the terminated employees' pay.
    """
    if new_saudi_hires < 0 or new_non_saudi_hires < 0:
        raise ValueError("Hire counts cannot be negative.")

    terminated = set(terminated_ids)
    retained = [e for e in employees if e.employee_id not in terminated]
    hypothetical: list[SaudiStatus] = [
        *retained,
        *(WorkforceMember(is_saudi=True) for _ in range(new_saudi_hires)),
        *(WorkforceMember(is_saudi=False) for _ in range(new_non_saudi_hires)),
    ]

    total_salary = sum(e.payroll.total_salary for e in employees)
    terminated_salary = sum(
        e.payroll.total_salary for e in employees if e.employee_id in terminated
    )

    return SimulationResult(
        current=calculate_nitaqat_status(employees, rule, sector, lang),
        simulated=calculate_nitaqat_status(hypothetical, rule, sector, lang),
        current_metrics=_metrics(employees, total_salary),
        simulated_metrics=_metrics(hypothetical, total_salary - terminated_salary),
    )
