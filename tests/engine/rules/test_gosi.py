"""Tests for GOSI contributions.

Saudi: 9.75% employee, 11.75% employer on min(basic + housing, cap).
Non-Saudi: occupational hazards only (0% employee, 2% employer).
"""

import pytest

from hradmin.engine.rules.gosi import build_gosi_report, calculate_gosi, contributory_wage
from hradmin.models.rules import GOSIParameters


class TestCalculateGOSI:
    def test_saudi_standard(self, make_employee, gosi_rule):
        emp = make_employee(basic_salary=10_000, housing_allowance=5_000)
        result = calculate_gosi(emp, gosi_rule)
        assert result.employee == pytest.approx(1_462.5)
        assert result.employer == pytest.approx(1_762.5)
        assert result.total == pytest.approx(3_225.0)

    def test_non_saudi_hazards_only(self, make_employee, gosi_rule):
        emp = make_employee(is_saudi=False, basic_salary=10_000, housing_allowance=5_000)
        result = calculate_gosi(emp, gosi_rule)
        assert result.employee == 0.0
        assert result.employer == pytest.approx(300.0)

    def test_wage_capped(self, make_employee, gosi_rule):
        emp = make_employee(basic_salary=100_000, housing_allowance=20_000)
        result = calculate_gosi(emp, gosi_rule)
        assert result.employee == pytest.approx(45_000 * 0.0975)
        assert result.employer == pytest.approx(45_000 * 0.1175)

    def test_transport_not_contributory(self, make_employee, gosi_rule):
        base = make_employee(basic_salary=10_000)
        with_transport = make_employee(basic_salary=10_000, transportation_allowance=2_000)
        assert calculate_gosi(base, gosi_rule) == calculate_gosi(with_transport, gosi_rule)

    def test_deterministic(self, make_employee, gosi_rule):
        emp = make_employee(basic_salary=12_345.67, housing_allowance=3_210.5)
        assert calculate_gosi(emp, gosi_rule) == calculate_gosi(emp, gosi_rule)

    @pytest.mark.parametrize("basic", [None, 0])
    def test_no_salary_contributes_nothing(self, make_employee, gosi_rule, basic):
        emp = make_employee(basic_salary=basic, housing_allowance=5_000)
        result = calculate_gosi(emp, gosi_rule)
        assert result.employee == 0.0
        assert result.employer == 0.0


class TestContributoryWage:
    def test_cap_read_from_saudi_block_for_everyone(self, make_employee, gosi_rule):
        raw = gosi_rule.parameters
        params = GOSIParameters.model_validate({
            **raw,
            "saudi": {**raw["saudi"], "maxContributoryWage": 10_000},
            "nonSaudi": {**raw["nonSaudi"], "maxContributoryWage": 99_999},
        })
        emp = make_employee(is_saudi=False, basic_salary=30_000)
        assert contributory_wage(emp, params) == 10_000

    def test_basic_plus_housing(self, make_employee, gosi_rule):
        params = GOSIParameters.model_validate(gosi_rule.parameters)
        emp = make_employee(basic_salary=8_000, housing_allowance=2_000)
        assert contributory_wage(emp, params) == 10_000


class TestGOSIReport:
    def test_totals(self, make_employee, gosi_rule):
        employees = [
            make_employee("E001", basic_salary=10_000, housing_allowance=5_000),
            make_employee("E002", is_saudi=False, basic_salary=10_000, housing_allowance=5_000),
            make_employee("E003", basic_salary=None),
        ]
        report = build_gosi_report(employees, gosi_rule)
        assert [r.employee_id for r in report.records] == ["E001", "E002", "E003"]
        assert report.total_employee == pytest.approx(1_462.5)
        assert report.total_employer == pytest.approx(1_762.5 + 300.0)
        assert report.total == pytest.approx(report.total_employee + report.total_employer)
        assert report.records[2].contributory_wage == 0.0

    def test_empty_workforce(self, gosi_rule):
        report = build_gosi_report([], gosi_rule)
        assert report.records == []
        assert report.total == 0.0
