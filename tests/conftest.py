"""Shared pytest fixtures for the HR admin test suite.

Provides:
- rules: repository over the bundled statutory table
- eosb_rule / gosi_rule / leave_rule / overtime_rule / nitaqat_rule
- make_employee: factory for Employee records with sensible defaults
- client: AsyncClient bound to the FastAPI app (no network)
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from hradmin.engine.rules.repository import RuleRepository
from hradmin.models.common import RuleType
from hradmin.models.employee import Employee, LoanInfo, PayrollInfo


@pytest.fixture
def rules() -> RuleRepository:
    return RuleRepository.default()


@pytest.fixture
def eosb_rule(rules):
    return rules.get(RuleType.EOSB)


@pytest.fixture
def gosi_rule(rules):
    return rules.get(RuleType.GOSI)


@pytest.fixture
def leave_rule(rules):
    return rules.get(RuleType.LEAVE)


@pytest.fixture
def overtime_rule(rules):
    return rules.get(RuleType.OVERTIME)


@pytest.fixture
def nitaqat_rule(rules):
    return rules.get(RuleType.NITAQAT)


@pytest.fixture
def make_employee():
    """Build an Employee; payroll keyword arguments go to PayrollInfo."""

    def _make(
        employee_id: str = "E001",
        *,
        is_saudi: bool = True,
        date_of_joining: date | None = date(2016, 1, 1),
        date_of_exit: date | None = None,
        basic_salary: float | None = 10_000.0,
        housing_allowance: float = 0.0,
        transportation_allowance: float = 0.0,
        commission: float = 0.0,
        other_allowances: float = 0.0,
        loan: LoanInfo | None = None,
        **fields,
    ) -> Employee:
        return Employee(
            employee_id=employee_id,
            employee_name_english=fields.pop("employee_name_english", f"Employee {employee_id}"),
            is_saudi=is_saudi,
            nationality=fields.pop("nationality", "Saudi" if is_saudi else "Indian"),
            date_of_joining=date_of_joining,
            date_of_exit=date_of_exit,
            payroll=PayrollInfo(
                basic_salary=basic_salary,
                housing_allowance=housing_allowance,
                transportation_allowance=transportation_allowance,
                commission=commission,
                other_allowances=other_allowances,
                loan_info=loan,
            ),
            **fields,
        )

    return _make


@pytest.fixture
async def client():
    """AsyncClient talking to the app in-process."""
    from hradmin.api.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
