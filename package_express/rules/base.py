"""
Rule Base Class

Shared base class for Package Express rejection rules.
"""

from abc import ABC, abstractmethod

import polars as pl

from ..data import QuoteLimits


class Rule(ABC):
    """
    Base class for all rejection rules.

    Attributes:
        IDENTITY
            name        - Short code, used in column names (e.g., "too_heavy")
            reason      - Reason carried by the Rejected outcome
            message     - Line shown to the user when the rule rejects

        THRESHOLD
            limit_field - QuoteLimits field the measure is compared against

        ORDERING
            priority    - Evaluation order (1 = checked first, wins ties)
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    reason: str
    message: str

    # -------------------------------------------------------------------------
    # THRESHOLD
    # -------------------------------------------------------------------------
    limit_field: str

    # -------------------------------------------------------------------------
    # ORDERING
    # -------------------------------------------------------------------------
    priority: int

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def measure(cls) -> pl.Expr:
        """Polars expression for the quantity checked against the limit."""

    @classmethod
    def limit(cls, limits: QuoteLimits) -> float:
        return getattr(limits, cls.limit_field)

    @classmethod
    def conditions(cls, limits: QuoteLimits) -> pl.Expr:
        """
        Polars expression for when this rule rejects a package.

        Strictly greater than the limit: a package at the limit passes.
        """
        return cls.measure() > cls.limit(limits)
