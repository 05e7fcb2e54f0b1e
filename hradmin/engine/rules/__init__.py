"""Statutory rules engine.

Pure calculation functions over employee records and versioned rule
parameters: EOSB gratuity, GOSI contributions, Nitaqat banding, leave
entitlement, overtime and loan schedules, and payroll assembly.

This package is DETERMINISTIC and holds no module-level state; the rule
table reaches every calculator through an explicit ``RuleRepository``.
"""
