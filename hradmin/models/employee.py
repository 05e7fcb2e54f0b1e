"""Employee records as read by the rules engine.

The dashboard owns these records (create/edit/delete, spreadsheet import,
local persistence). The engine only reads them per call and never caches
them across calls.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from pydantic import Field, field_validator

from hradmin.models.common import HRBase

DEFAULT_LOAN_INSTALLMENTS = 4


@runtime_checkable
class SaudiStatus(Protocol):
    """Anything the Nitaqat classifier can count: only nationality matters."""

    is_saudi: bool


class LoanInfo(HRBase):
    """Personal loan paid out once, then recovered in equal monthly installments."""

    total_amount: float | None = Field(default=None, ge=0)
    start_date: date | None = None
    installments: int = Field(default=DEFAULT_LOAN_INSTALLMENTS, ge=1)

    @field_validator("installments", mode="before")
    @classmethod
    def _default_installments(cls, value: object) -> object:
        # A blank or zero installment count falls back to the policy default.
        if not value:
            return DEFAULT_LOAN_INSTALLMENTS
        return value

    @property
    def has_schedule(self) -> bool:
        """A loan only takes part in payroll when it has an amount and a start."""
        return bool(self.total_amount) and self.start_date is not None

    @property
    def monthly_installment(self) -> float:
        return (self.total_amount or 0.0) / self.installments


class PayrollInfo(HRBase):
    """Monthly pay components in SAR.

    ``basic_salary`` stays ``None`` when the source record has no value;
    calculators treat that as "no salary" rather than an error. Allowances
    default to zero.
    """

    basic_salary: float | None = None
    housing_allowance: float = 0.0
    transportation_allowance: float = 0.0
    commission: float = 0.0
    other_allowances: float = 0.0
    loan_info: LoanInfo | None = None

    @field_validator(
        "housing_allowance",
        "transportation_allowance",
        "commission",
        "other_allowances",
        mode="before",
    )
    @classmethod
    def _none_is_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    @property
    def total_salary(self) -> float:
        """Basic salary plus every recurring allowance."""
        return (
            (self.basic_salary or 0.0)
            + self.housing_allowance
            + self.transportation_allowance
            + self.commission
            + self.other_allowances
        )


class ContractInfo(HRBase):
    contract_type: str = ""
    start_date: date | None = None
    end_date: date | None = None

    @property
    def is_indefinite(self) -> bool:
        return "indefinite" in self.contract_type.lower()


class VisaInfo(HRBase):
    iqama_number: str = ""
    iqama_issue_date: date | None = None
    iqama_expiry_date: date | None = None
    passport_number: str = ""
    passport_issue_date: date | None = None
    passport_expiry_date: date | None = None


class Employee(HRBase):
    """Full employee record (the subset the engine and reports read)."""

    employee_id: str = Field(..., min_length=1)
    employee_name_english: str = ""
    employee_name_arabic: str = ""
    nationality: str = ""
    is_saudi: bool = False
    department: str = ""
    job_title: str = ""
    status: str = ""
    date_of_joining: date | None = None
    date_of_exit: date | None = None
    special_category: str = "normal"
    contract: ContractInfo = Field(default_factory=ContractInfo)
    visa: VisaInfo = Field(default_factory=VisaInfo)
    payroll: PayrollInfo = Field(default_factory=PayrollInfo)

    def display_name(self, *, arabic: bool = False) -> str:
        """English or Arabic name, falling back to the other when blank."""
        if arabic:
            return self.employee_name_arabic or self.employee_name_english
        return self.employee_name_english or self.employee_name_arabic


class WorkforceMember(HRBase):
    """Minimal headcount entry for what-if Saudization simulations.

    Carries nationality only; salary and identity are unknown for
    hypothetical hires.
    """

    is_saudi: bool
    special_category: str = "normal"
