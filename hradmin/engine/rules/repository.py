"""Rule repository: the read-only rule table handed to every calculator.

Replaces a module-level rules array with an explicit value, so callers
(and tests) choose which table a calculation runs against.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from hradmin.data.rules.legal_rules import load_legal_rules
from hradmin.models.common import RuleType
from hradmin.models.rules import RuleDefinition

logger = logging.getLogger(__name__)


class RuleNotFoundError(LookupError):
    """No rule of the requested type or id exists in the repository."""


@dataclass(frozen=True)
class RuleRepository:
    """Immutable collection of rule definitions.

    Several versions of a rule may coexist; only the first definition of
    each type (in table order) is consulted by ``get``.
    """

    rules: tuple[RuleDefinition, ...]

    @classmethod
    def from_rules(cls, rules: Iterable[RuleDefinition]) -> RuleRepository:
        return cls(rules=tuple(rules))

    @classmethod
    def default(cls) -> RuleRepository:
        """Repository over the bundled Saudi statutory table."""
        rules = load_legal_rules()
        logger.debug("Loaded %d statutory rule definitions", len(rules))
        return cls(rules=tuple(rules))

    def find(self, rule_type: RuleType | str) -> RuleDefinition | None:
        """First rule of the given type, or None."""
        wanted = RuleType(rule_type)
        for rule in self.rules:
            if rule.rule_type == wanted:
                return rule
        return None

    def get(self, rule_type: RuleType | str) -> RuleDefinition:
        """First rule of the given type; raises RuleNotFoundError if absent."""
        rule = self.find(rule_type)
        if rule is None:
            raise RuleNotFoundError(f"No {RuleType(rule_type).value} rule loaded.")
        return rule

    def get_by_id(self, rule_id: str, version: str | None = None) -> RuleDefinition:
        """Rule by id; the first listed version unless one is requested."""
        for rule in self.rules:
            if rule.rule_id == rule_id and (version is None or rule.version == version):
                return rule
        suffix = f" version {version}" if version else ""
        raise RuleNotFoundError(f"Rule {rule_id}{suffix} not found.")

    def list_rules(self, rule_type: RuleType | str | None = None) -> list[RuleDefinition]:
        """All rules, optionally filtered by type."""
        if rule_type is None:
            return list(self.rules)
        wanted = RuleType(rule_type)
        return [r for r in self.rules if r.rule_type == wanted]
