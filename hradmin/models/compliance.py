"""Schemas for expiry tracking: iqamas, contracts, government documents, vehicles."""

from datetime import date
from enum import StrEnum

from pydantic import Field

from hradmin.models.common import HRBase


class DocumentStatus(StrEnum):
    EXPIRED = "Expired"
    EXPIRING_SOON = "Expiring Soon"
    VALID = "Valid"


class AlertUrgency(StrEnum):
    """How close an expiry is: <=30 days critical, <=60 warning, else notice."""

    CRITICAL = "critical"
    WARNING = "warning"
    NOTICE = "notice"


class GovernmentDocument(HRBase):
    """Company-level licence or registration (CR, municipality licence, ...)."""

    document_id: str = Field(..., alias="id", min_length=1)
    document_name: str = ""
    document_number: str = ""
    document_type: str = ""
    issuing_authority: str = ""
    issue_date: date | None = None
    expiry_date: date | None = None
    cost_to_renew: float = Field(default=0.0, ge=0.0)
    renewal_frequency: str = ""


class ValidityPeriod(HRBase):
    start_date: date | None = None
    end_date: date | None = None


class Vehicle(HRBase):
    """Company vehicle; the plate number doubles as its identifier."""

    plate_number: str = Field(..., min_length=1)
    make: str = ""
    model: str = ""
    year: int | None = None
    driver_id: str | None = None
    insurance: ValidityPeriod = Field(default_factory=ValidityPeriod)
    inspection: ValidityPeriod = Field(default_factory=ValidityPeriod)
    registration: ValidityPeriod = Field(default_factory=ValidityPeriod)


class ExpiryAlert(HRBase, frozen=True):
    employee_id: str
    employee_name: str
    expiry_date: date
    days_remaining: int
    urgency: AlertUrgency


class DocumentCheck(HRBase, frozen=True):
    """Status of one dated document (government document or vehicle permit)."""

    reference: str
    label: str
    expiry_date: date | None
    days_remaining: int | None
    status: DocumentStatus


class DocumentSummary(HRBase, frozen=True):
    expiring_soon_count: int = 0
    expired_count: int = 0
    expiring_soon_cost: float = 0.0


class WorkforceSummary(HRBase, frozen=True):
    """Headline dashboard figures."""

    total_employees: int = 0
    saudi_count: int = 0
    non_saudi_count: int = 0
    saudization_rate: float = 0.0
    iqama_this_month: int = 0
    iqama_next_month: int = 0
    contracts_60_to_70_days: int = 0
