"""
Too Heavy

Rejects packages heavier than the maximum weight.
"""

import polars as pl

from .base import Rule


class TooHeavy(Rule):
    """Weight above max_weight."""

    # Identity
    name = "too_heavy"
    reason = "too heavy"
    message = "Package too heavy to be shipped via Package Express. Have a good day."

    # Threshold
    limit_field = "max_weight"

    # Ordering (checked before size)
    priority = 1

    @classmethod
    def measure(cls) -> pl.Expr:
        return pl.col("weight")
