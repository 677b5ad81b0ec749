"""
Package Express Quote Calculator

DataFrame in, DataFrame out. The input can come from any source (console,
CSV, manual creation) as long as it contains the required columns. The output
is the same DataFrame with rule flags and the quote appended.

REQUIRED INPUT COLUMNS
----------------------
    weight  - Package weight
    width   - Package width
    height  - Package height
    length  - Package length

OUTPUT COLUMNS ADDED
--------------------
    - total_dimensions (width + height + length)
    - rejected_* flags (too_heavy, too_large), at most one True per row
    - rejection_reason ("too heavy", "too large", or null)
    - is_valid
    - quote_amount ((width * height * length * weight) / price_divisor, null if rejected)
    - calculator_version

USAGE
-----
    from package_express.calculate_quotes import calculate_quotes, evaluate
    result = calculate_quotes(df)
    outcome = evaluate(ShippingRequest(weight=10, width=2, height=2, length=2))
"""

import logging
from typing import Callable

import polars as pl

from .version import VERSION
from .data import DEFAULT_LIMITS, QuoteLimits, validate_limits
from .request import Outcome, Quoted, Rejected, ShippingRequest, format_amount
from .rules import ALL, get_rule

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["weight", "width", "height", "length"]

THANK_YOU = "Thank you!"


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_quotes(
    df: pl.DataFrame,
    limits: QuoteLimits = DEFAULT_LIMITS
) -> pl.DataFrame:
    """
    Evaluate rejection rules and price every package in a DataFrame.

    Args:
        df: Package DataFrame with required columns (see module docstring)
        limits: Thresholds and divisor (module defaults if not provided)

    Returns:
        DataFrame with rule flags, rejection reason and quote appended

    Raises:
        ValueError: limits are invalid, or a required column is missing or
            contains nulls
    """
    validate_limits(limits)
    _check_required_columns(df)

    df = _add_total_dimensions(df)
    df = _apply_rules(df, limits)
    df = _add_rejection_reason(df)
    df = _calculate_quote(df, limits)
    df = _stamp_version(df)

    return df


def create_request_df(request: ShippingRequest) -> pl.DataFrame:
    """Create a single-row DataFrame from a request."""
    return pl.DataFrame([{
        "weight": float(request.weight),
        "width": float(request.width),
        "height": float(request.height),
        "length": float(request.length),
    }])


# =============================================================================
# SINGLE REQUEST
# =============================================================================

def evaluate(
    request: ShippingRequest,
    limits: QuoteLimits = DEFAULT_LIMITS,
    write: Callable[[str], None] = print,
) -> Outcome:
    """
    Evaluate one request, report the outcome and return it.

    Rules are checked in priority order (weight first, then size). On
    rejection the request is marked invalid and the rule's message is
    written; otherwise the quote line and a thank-you are written.
    """
    row = calculate_quotes(create_request_df(request), limits).row(0, named=True)

    reason = row["rejection_reason"]
    if reason is not None:
        rule = get_rule(reason)
        request.valid = False
        logger.debug("Rejected %r as %s (%s > %s)", request, reason, rule.limit_field, rule.limit(limits))
        write(rule.message)
        return Rejected(reason)

    amount = row["quote_amount"]
    logger.debug("Quoted %r for %r", amount, request)
    write(format_quote(amount))
    write(THANK_YOU)
    return Quoted(amount)


def format_quote(amount: float) -> str:
    return f"Your estimated total for shipping this package is: ${format_amount(amount)}"


# =============================================================================
# PIPELINE STEPS
# =============================================================================

def _check_required_columns(df: pl.DataFrame) -> None:
    """Raise ValueError if a required column is missing or has nulls."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    with_nulls = [c for c in REQUIRED_COLUMNS if df[c].null_count() > 0]
    if with_nulls:
        raise ValueError(f"Null values in required columns: {', '.join(with_nulls)}")


def _add_total_dimensions(df: pl.DataFrame) -> pl.DataFrame:
    """Cast inputs to Float64 and add total_dimensions."""
    df = df.with_columns([pl.col(c).cast(pl.Float64) for c in REQUIRED_COLUMNS])
    return df.with_columns(
        (pl.col("width") + pl.col("height") + pl.col("length")).alias("total_dimensions")
    )


def _apply_rules(df: pl.DataFrame, limits: QuoteLimits) -> pl.DataFrame:
    """
    Apply mutually exclusive rejection rules.

    Only the highest priority rule (lowest number) that matches is flagged.
    """
    exclusion_mask = pl.lit(False)

    for rule in ALL:
        flag_col = f"rejected_{rule.name}"

        # Applies only if: conditions met AND no higher priority already matched
        applies = rule.conditions(limits) & ~exclusion_mask
        df = df.with_columns(applies.alias(flag_col))

        exclusion_mask = exclusion_mask | pl.col(flag_col)

    return df


def _add_rejection_reason(df: pl.DataFrame) -> pl.DataFrame:
    """Add rejection_reason (null when no rule matched) and is_valid."""
    reason = pl.lit(None, dtype=pl.Utf8)
    for rule in reversed(ALL):
        reason = (
            pl.when(pl.col(f"rejected_{rule.name}"))
            .then(pl.lit(rule.reason))
            .otherwise(reason)
        )

    df = df.with_columns(reason.alias("rejection_reason"))
    return df.with_columns(pl.col("rejection_reason").is_null().alias("is_valid"))


def _calculate_quote(df: pl.DataFrame, limits: QuoteLimits) -> pl.DataFrame:
    """Quote = (width * height * length * weight) / price_divisor for valid rows."""
    return df.with_columns(
        pl.when(pl.col("is_valid"))
        .then(
            (pl.col("width") * pl.col("height") * pl.col("length") * pl.col("weight"))
            / limits.price_divisor
        )
        .otherwise(pl.lit(None, dtype=pl.Float64))
        .alias("quote_amount")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_quotes",
    "create_request_df",
    "evaluate",
    "format_quote",
]
