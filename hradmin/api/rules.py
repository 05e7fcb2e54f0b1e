"""FastAPI rule table endpoints.

GET /v1/rules              — all loaded rule definitions
GET /v1/rules/{rule_type}  — active definition for one rule type
"""

from fastapi import APIRouter, Depends, HTTPException

from hradmin.api.dependencies import get_rule_repository, require_rule
from hradmin.engine.rules.repository import RuleRepository
from hradmin.models.common import RuleType
from hradmin.models.rules import RuleDefinition

router = APIRouter(prefix="/v1/rules", tags=["rules"])


@router.get("", response_model=list[RuleDefinition])
async def list_rules(
    rules: RuleRepository = Depends(get_rule_repository),
) -> list[RuleDefinition]:
    """List every rule definition in table order."""
    return rules.list_rules()


@router.get("/{rule_type}", response_model=RuleDefinition)
async def get_rule(
    rule_type: str,
    rules: RuleRepository = Depends(get_rule_repository),
) -> RuleDefinition:
    """Return the rule consulted for a type (first match)."""
    try:
        wanted = RuleType(rule_type.upper())
    except ValueError as exc:
        raise HTTPException(
            status_code=404, detail=f"Unknown rule type '{rule_type}'.",
        ) from exc
    return require_rule(rules, wanted)
