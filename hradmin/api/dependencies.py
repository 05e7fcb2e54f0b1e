"""FastAPI dependency injection factories.

The rule table is built once per process and shared read-only; every
endpoint receives it explicitly via Depends(get_rule_repository).
"""

from functools import lru_cache

from fastapi import HTTPException

from hradmin.engine.rules.repository import RuleNotFoundError, RuleRepository
from hradmin.models.common import RuleType
from hradmin.models.rules import RuleDefinition


@lru_cache(maxsize=1)
def _default_rule_repository() -> RuleRepository:
    return RuleRepository.default()


def get_rule_repository() -> RuleRepository:
    return _default_rule_repository()


def require_rule(rules: RuleRepository, rule_type: RuleType) -> RuleDefinition:
    """Fetch a rule or answer 404."""
    try:
        return rules.get(rule_type)
    except RuleNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
