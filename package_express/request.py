"""
Shipping Request and Outcomes

A ShippingRequest is built once per quote, evaluated once, then discarded.
Evaluation produces exactly one outcome: Rejected or Quoted.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, Union


@dataclass
class ShippingRequest:
    """
    Package details collected from the user.

    All dimensions are positive numbers; upper bounds are checked by the
    evaluator, not here. `valid` is cleared by the evaluator on rejection.
    """

    weight: float
    width: float
    height: float
    length: float
    valid: bool = True

    @property
    def total_dimensions(self) -> float:
        return self.width + self.height + self.length


class Rejected(NamedTuple):
    """Package failed a business rule ("too heavy" or "too large")."""
    reason: str


class Quoted(NamedTuple):
    """Package accepted; amount is the unrounded price."""
    amount: float


Outcome = Union[Rejected, Quoted]

CENT = Decimal("0.01")


def format_amount(amount: float) -> str:
    """
    Two-decimal money string, e.g. 0.8 -> "0.80".

    Ties round away from zero (0.125 -> "0.13"). Decimal(float) is exact, so
    only true binary ties are rounded up.
    """
    return str(Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP))


__all__ = [
    "ShippingRequest",
    "Rejected",
    "Quoted",
    "Outcome",
    "format_amount",
]
