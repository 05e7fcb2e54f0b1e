"""Tests for benefit endpoints: EOSB, GOSI, GOSI report, leave."""

import pytest
from httpx import AsyncClient


def _employee(**overrides) -> dict:
    payload = {
        "employeeId": "E001",
        "employeeNameEnglish": "Ahmed Ali",
        "isSaudi": True,
        "dateOfJoining": "2016-01-01",
        "dateOfExit": "2020-01-01",
        "payroll": {"basicSalary": 10000, "housingAllowance": 5000},
    }
    payload.update(overrides)
    return payload


class TestEOSBEndpoint:
    async def test_uses_basic_salary_by_default(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/eosb", json={"employee": _employee()})
        assert resp.status_code == 200
        data = resp.json()
        assert data["yearsOfService"] == 4.0
        assert data["totalGratuity"] == pytest.approx(20000.0)
        assert data["calculationBreakdown"]

    async def test_termination_with_compensation(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/eosb", json={
            "employee": _employee(),
            "reason": "termination",
            "monthlySalary": 12000,
            "terminationCompensationMonths": 2,
        })
        assert resp.status_code == 200
        assert resp.json()["terminationCompensation"] == 24000.0

    async def test_missing_join_date_422(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/eosb", json={"employee": _employee(dateOfJoining=None)})
        assert resp.status_code == 422
        assert "Cannot calculate" in resp.json()["detail"]

    async def test_bad_reason_422(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/eosb", json={"employee": _employee(), "reason": "retired"})
        assert resp.status_code == 422


class TestGOSIEndpoints:
    async def test_single(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/gosi", json={"employee": _employee()})
        assert resp.status_code == 200
        data = resp.json()
        assert data["employee"] == pytest.approx(1462.5)
        assert data["employer"] == pytest.approx(1762.5)

    async def test_report(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/gosi/report", json={"employees": [
            _employee(),
            _employee(employeeId="E002", isSaudi=False),
        ]})
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["records"]) == 2
        assert data["totalEmployer"] == pytest.approx(1762.5 + 300.0)


class TestLeaveEndpoint:
    async def test_schedule(self, client: AsyncClient) -> None:
        resp = await client.post("/v1/leave", json={
            "employees": [_employee(dateOfJoining="2019-06-15")],
            "asOf": "2024-06-15",
        })
        assert resp.status_code == 200
        [record] = resp.json()
        assert record["yearsOfService"] == 5
        assert record["entitlementDays"] == 30
