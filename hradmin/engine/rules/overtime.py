"""Overtime pay (Labor Law Article 107): hourly basic wage plus 50% premium."""

from hradmin.models.rules import OvertimeParameters, RuleDefinition


def hourly_rate(basic_salary: float, params: OvertimeParameters) -> float:
    """Basic salary spread over the standard working month."""
    return (basic_salary / params.working_days_per_month) / params.working_hours_per_day


def overtime_pay(hours: float, basic_salary: float, rule: RuleDefinition) -> float:
    """hours * hourly rate * multiplier; zero hours or salary pays nothing."""
    if hours <= 0 or basic_salary <= 0:
        return 0.0
    params = OvertimeParameters.model_validate(rule.parameters)
    return hours * hourly_rate(basic_salary, params) * params.multiplier
