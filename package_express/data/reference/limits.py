"""
Package Express Limits and Pricing

Carrier policy for accepting and pricing a package.

REJECTION THRESHOLDS
--------------------
    MAX_WEIGHT      - weight above this is rejected ("too heavy")
    MAX_DIMENSIONS  - width + height + length above this is rejected ("too large")

Both comparisons are strict: a package exactly at the limit is accepted.

PRICING
-------
    quote = (width * height * length * weight) / PRICE_DIVISOR
"""

import math
from typing import NamedTuple


MAX_WEIGHT = 50
MAX_DIMENSIONS = 50
PRICE_DIVISOR = 100


class QuoteLimits(NamedTuple):
    """Overridable thresholds and divisor used by the evaluator."""
    max_weight: float = MAX_WEIGHT
    max_dimensions: float = MAX_DIMENSIONS
    price_divisor: float = PRICE_DIVISOR


DEFAULT_LIMITS = QuoteLimits()


def validate_limits(limits: QuoteLimits) -> None:
    """
    Check every limit is a finite number greater than zero.

    Raises ValueError listing all invalid fields.
    """
    errors = []
    for field, value in limits._asdict().items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{field}: expected a number, got {value!r}")
        elif not math.isfinite(value) or value <= 0:
            errors.append(f"{field}: must be a finite number > 0, got {value!r}")

    if errors:
        raise ValueError("Invalid quote limits:\n  " + "\n  ".join(errors))
