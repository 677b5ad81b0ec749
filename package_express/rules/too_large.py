"""
Too Large

Rejects packages whose summed dimensions exceed the maximum.
"""

import polars as pl

from .base import Rule


class TooLarge(Rule):
    """Width + height + length above max_dimensions."""

    # Identity
    name = "too_large"
    reason = "too large"
    message = "Package too big to be shipped via Package Express."

    # Threshold
    limit_field = "max_dimensions"

    # Ordering
    priority = 2

    @classmethod
    def measure(cls) -> pl.Expr:
        return pl.col("width") + pl.col("height") + pl.col("length")
