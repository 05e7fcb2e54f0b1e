"""Expiry tracking for iqamas, contracts, government documents and vehicles.

Deterministic date arithmetic only. ``today`` is always injectable so the
same inputs give the same alerts.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import date, timedelta

from hradmin.engine.rules.tenure import add_months
from hradmin.models.compliance import (
    AlertUrgency,
    DocumentCheck,
    DocumentStatus,
    DocumentSummary,
    ExpiryAlert,
    GovernmentDocument,
    Vehicle,
    WorkforceSummary,
)
from hradmin.models.employee import Employee

DEFAULT_ALERT_WINDOW_DAYS = 90
DEFAULT_WARNING_DAYS = 30

# Vehicle permits tracked per vehicle, in display order.
VEHICLE_PERMITS: tuple[str, ...] = ("insurance", "inspection", "registration")


def days_until(target: date | None, today: date | None = None) -> int | None:
    """Whole days from today to target (negative once past); None if no date."""
    if target is None:
        return None
    return (target - (today or date.today())).days


def urgency_for(days: int) -> AlertUrgency:
    if days <= 30:
        return AlertUrgency.CRITICAL
    if days <= 60:
        return AlertUrgency.WARNING
    return AlertUrgency.NOTICE


def _expiring(
    employees: Iterable[Employee],
    expiry_of: Callable[[Employee], date | None],
    today: date,
    window_days: int,
) -> list[ExpiryAlert]:
    alerts: list[ExpiryAlert] = []
    for emp in employees:
        expiry = expiry_of(emp)
        days = days_until(expiry, today)
        if days is None or not 0 <= days <= window_days:
            continue
        alerts.append(ExpiryAlert(
            employee_id=emp.employee_id,
            employee_name=emp.display_name(),
            expiry_date=expiry,
            days_remaining=days,
            urgency=urgency_for(days),
        ))
    return sorted(alerts, key=lambda a: a.days_remaining)


def expiring_iqamas(
    employees: Iterable[Employee],
    *,
    today: date | None = None,
    window_days: int = DEFAULT_ALERT_WINDOW_DAYS,
) -> list[ExpiryAlert]:
    """Iqamas expiring within the window, soonest first."""
    return _expiring(
        employees, lambda e: e.visa.iqama_expiry_date, today or date.today(), window_days,
    )


def expiring_contracts(
    employees: Iterable[Employee],
    *,
    today: date | None = None,
    window_days: int = DEFAULT_ALERT_WINDOW_DAYS,
) -> list[ExpiryAlert]:
    """Fixed-term contracts ending within the window, soonest first."""
    fixed_term = [e for e in employees if not e.contract.is_indefinite]
    return _expiring(
        fixed_term, lambda e: e.contract.end_date, today or date.today(), window_days,
    )


def document_status(
    expiry: date | None,
    today: date | None = None,
    warning_days: int = DEFAULT_WARNING_DAYS,
) -> DocumentStatus:
    """Expired once past, Expiring Soon within the warning window, else Valid.

    A missing expiry date never expires.
    """
    days = days_until(expiry, today)
    if days is None:
        return DocumentStatus.VALID
    if days < 0:
        return DocumentStatus.EXPIRED
    if days <= warning_days:
        return DocumentStatus.EXPIRING_SOON
    return DocumentStatus.VALID


def check_documents(
    documents: Iterable[GovernmentDocument],
    *,
    today: date | None = None,
    warning_days: int = DEFAULT_WARNING_DAYS,
) -> list[DocumentCheck]:
    today = today or date.today()
    return [
        DocumentCheck(
            reference=doc.document_id,
            label=doc.document_name,
            expiry_date=doc.expiry_date,
            days_remaining=days_until(doc.expiry_date, today),
            status=document_status(doc.expiry_date, today, warning_days),
        )
        for doc in documents
    ]


def check_vehicles(
    vehicles: Iterable[Vehicle],
    *,
    today: date | None = None,
    warning_days: int = DEFAULT_WARNING_DAYS,
) -> list[DocumentCheck]:
    """One check per vehicle permit (insurance, inspection, registration)."""
    today = today or date.today()
    checks: list[DocumentCheck] = []
    for vehicle in vehicles:
        for permit in VEHICLE_PERMITS:
            end_date = getattr(vehicle, permit).end_date
            checks.append(DocumentCheck(
                reference=vehicle.plate_number,
                label=permit,
                expiry_date=end_date,
                days_remaining=days_until(end_date, today),
                status=document_status(end_date, today, warning_days),
            ))
    return checks


def summarize_documents(
    documents: Sequence[GovernmentDocument],
    *,
    today: date | None = None,
    warning_days: int = DEFAULT_WARNING_DAYS,
) -> DocumentSummary:
    """Counts of expiring / expired documents and the near-term renewal cost."""
    today = today or date.today()
    statuses = [document_status(d.expiry_date, today, warning_days) for d in documents]
    expiring = [
        d for d, s in zip(documents, statuses) if s == DocumentStatus.EXPIRING_SOON
    ]
    return DocumentSummary(
        expiring_soon_count=len(expiring),
        expired_count=sum(1 for s in statuses if s == DocumentStatus.EXPIRED),
        expiring_soon_cost=sum(d.cost_to_renew for d in expiring),
    )


def _in_range(value: date | None, start: date, end: date) -> bool:
    return value is not None and start <= value <= end


def workforce_summary(
    employees: Sequence[Employee],
    *,
    today: date | None = None,
) -> WorkforceSummary:
    """Headcount, Saudization rate and near-term iqama / contract expiries."""
    total = len(employees)
    if total == 0:
        return WorkforceSummary()

    today = today or date.today()
    this_month_start = today.replace(day=1)
    next_month_start = add_months(this_month_start, 1)
    this_month_end = next_month_start - timedelta(days=1)
    next_month_end = add_months(this_month_start, 2) - timedelta(days=1)
    day_60 = today + timedelta(days=60)
    day_70 = today + timedelta(days=70)

    saudi = sum(1 for e in employees if e.is_saudi)
    return WorkforceSummary(
        total_employees=total,
        saudi_count=saudi,
        non_saudi_count=total - saudi,
        saudization_rate=saudi / total * 100,
        iqama_this_month=sum(
            1 for e in employees
            if _in_range(e.visa.iqama_expiry_date, this_month_start, this_month_end)
        ),
        iqama_next_month=sum(
            1 for e in employees
            if _in_range(e.visa.iqama_expiry_date, next_month_start, next_month_end)
        ),
        contracts_60_to_70_days=sum(
            1 for e in employees
            if _in_range(e.contract.end_date, day_60, day_70)
        ),
    )
