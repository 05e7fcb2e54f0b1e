"""FastAPI compliance endpoints.

POST /v1/compliance/alerts     — iqama / contract expiry alerts + summary
POST /v1/compliance/documents  — government document and vehicle permit status
"""

from datetime import date

from fastapi import APIRouter, Depends
from pydantic import Field

from hradmin.config.settings import Settings, get_settings
from hradmin.engine.compliance import (
    check_documents,
    check_vehicles,
    expiring_contracts,
    expiring_iqamas,
    summarize_documents,
    workforce_summary,
)
from hradmin.models.common import HRBase
from hradmin.models.compliance import (
    DocumentCheck,
    DocumentSummary,
    ExpiryAlert,
    GovernmentDocument,
    Vehicle,
    WorkforceSummary,
)
from hradmin.models.employee import Employee

router = APIRouter(prefix="/v1/compliance", tags=["compliance"])


class AlertsRequest(HRBase):
    employees: list[Employee] = Field(default_factory=list)
    today: date | None = None


class AlertsResponse(HRBase):
    summary: WorkforceSummary
    expiring_iqamas: list[ExpiryAlert]
    expiring_contracts: list[ExpiryAlert]


class DocumentsRequest(HRBase):
    documents: list[GovernmentDocument] = Field(default_factory=list)
    vehicles: list[Vehicle] = Field(default_factory=list)
    today: date | None = None


class DocumentsResponse(HRBase):
    summary: DocumentSummary
    documents: list[DocumentCheck]
    vehicles: list[DocumentCheck]


@router.post("/alerts", response_model=AlertsResponse)
async def compliance_alerts(
    body: AlertsRequest,
    settings: Settings = Depends(get_settings),
) -> AlertsResponse:
    """Upcoming iqama expiries and fixed-term contract renewals."""
    today = body.today or date.today()
    window = settings.EXPIRY_ALERT_WINDOW_DAYS
    return AlertsResponse(
        summary=workforce_summary(body.employees, today=today),
        expiring_iqamas=expiring_iqamas(body.employees, today=today, window_days=window),
        expiring_contracts=expiring_contracts(
            body.employees, today=today, window_days=window,
        ),
    )


@router.post("/documents", response_model=DocumentsResponse)
async def document_statuses(
    body: DocumentsRequest,
    settings: Settings = Depends(get_settings),
) -> DocumentsResponse:
    """Expiry status for company documents and vehicle permits."""
    today = body.today or date.today()
    warning = settings.DOCUMENT_EXPIRY_WARNING_DAYS
    return DocumentsResponse(
        summary=summarize_documents(body.documents, today=today, warning_days=warning),
        documents=check_documents(body.documents, today=today, warning_days=warning),
        vehicles=check_vehicles(body.vehicles, today=today, warning_days=warning),
    )
