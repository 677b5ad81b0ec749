"""
Package Express Data

Reference configuration for rejection thresholds and the pricing formula.
"""

from .reference.limits import (
    MAX_WEIGHT,
    MAX_DIMENSIONS,
    PRICE_DIVISOR,
    QuoteLimits,
    DEFAULT_LIMITS,
    validate_limits,
)

__all__ = [
    "MAX_WEIGHT",
    "MAX_DIMENSIONS",
    "PRICE_DIVISOR",
    "QuoteLimits",
    "DEFAULT_LIMITS",
    "validate_limits",
]
