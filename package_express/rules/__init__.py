"""
Package Express Rules Package

Exports all rejection rules in evaluation order.

Rules are mutually exclusive: they are checked by priority (lowest first)
and only the first one that matches rejects the package. A package that
matches no rule is quoted.

Usage:
    from package_express.rules import ALL, get_rule
"""

from ..data import QuoteLimits
from .base import Rule
from .too_heavy import TooHeavy
from .too_large import TooLarge


# All rules, sorted by priority
ALL: list[type[Rule]] = sorted([TooHeavy, TooLarge], key=lambda r: r.priority)


# =============================================================================
# HELPERS
# =============================================================================

def get_rule(reason: str) -> type[Rule]:
    """Look up a rule by its rejection reason."""
    for rule in ALL:
        if rule.reason == reason:
            return rule
    raise KeyError(f"No rule with reason '{reason}'")


# =============================================================================
# VALIDATION
# =============================================================================

def validate_rules() -> None:
    """
    Validate rule configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    for attr in ("name", "reason", "priority"):
        values = [getattr(r, attr) for r in ALL]
        duplicates = sorted({str(v) for v in values if values.count(v) > 1})
        if duplicates:
            errors.append(f"duplicate {attr}: {', '.join(duplicates)}")

    for r in ALL:
        if r.limit_field not in QuoteLimits._fields:
            errors.append(f"{r.name}: limit_field '{r.limit_field}' is not a QuoteLimits field")

    if errors:
        raise ValueError("Rule configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_rules()


__all__ = [
    "ALL",
    "Rule",
    "TooHeavy",
    "TooLarge",
    "get_rule",
    "validate_rules",
]
