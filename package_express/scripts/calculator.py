"""
Package Express Shipping Cost Calculator
========================================

Interactive CLI tool to quote a single package.

Prompts for weight, width, height and length (re-prompting until each is a
positive number), then prints a rejection message or the estimated total.

Usage:
    python -m package_express.scripts.calculator
    python -m package_express.scripts.calculator --max-weight 70 --verbose
"""

import argparse
import logging
import math
import sys
from typing import Callable

from package_express.calculate_quotes import evaluate
from package_express.data import DEFAULT_LIMITS, QuoteLimits
from package_express.request import ShippingRequest
from package_express.version import VERSION

logger = logging.getLogger(__name__)

WELCOME = "Welcome to Package Express. Please follow the instructions below."
INVALID_NUMBER = "Please enter a valid positive number."

# Prompt order matters: weight is asked first
FIELDS = ["weight", "width", "height", "length"]


class InputClosedError(EOFError):
    """Input ended before a valid number was entered."""


# =============================================================================
# INPUT
# =============================================================================

def parse_positive_number(text: str) -> float | None:
    """Parse text as a finite number > 0, or return None."""
    text = text.strip()
    # float() also accepts digit separators ("1_000")
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def get_positive_number(
    prompt: str,
    read: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> float:
    """
    Prompt until a positive number is entered and return it.

    There is no attempt limit. Raises InputClosedError if input ends.
    """
    while True:
        write(prompt)
        try:
            text = read()
        except EOFError:
            raise InputClosedError(
                "input ended before a valid positive number was entered"
            ) from None

        value = parse_positive_number(text)
        if value is not None:
            return value

        logger.debug("Rejected input %r for prompt %r", text, prompt)
        write(INVALID_NUMBER)


def collect_request(
    read: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> ShippingRequest:
    """Prompt for each package field in order and build the request."""
    values = {
        field: get_positive_number(f"Please enter the package {field}:", read, write)
        for field in FIELDS
    }
    return ShippingRequest(**values)


# =============================================================================
# CLI
# =============================================================================

def positive_number(text: str) -> float:
    """argparse type for limit overrides."""
    value = parse_positive_number(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"expected a positive number, got '{text}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="package-express",
        description="Estimate the cost of shipping a package via Package Express",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m package_express.scripts.calculator
  python -m package_express.scripts.calculator --max-weight 70
  python -m package_express.scripts.calculator --price-divisor 80 --verbose
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--max-weight",
        type=positive_number,
        default=DEFAULT_LIMITS.max_weight,
        help=f"Reject packages heavier than this (default: {DEFAULT_LIMITS.max_weight})",
    )
    parser.add_argument(
        "--max-dimensions",
        type=positive_number,
        default=DEFAULT_LIMITS.max_dimensions,
        help=f"Reject packages whose width + height + length exceeds this "
             f"(default: {DEFAULT_LIMITS.max_dimensions})",
    )
    parser.add_argument(
        "--price-divisor",
        type=positive_number,
        default=DEFAULT_LIMITS.price_divisor,
        help=f"Divisor in the pricing formula (default: {DEFAULT_LIMITS.price_divisor})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(
    argv: list[str] | None = None,
    read: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )
    limits = QuoteLimits(
        max_weight=args.max_weight,
        max_dimensions=args.max_dimensions,
        price_divisor=args.price_divisor,
    )

    try:
        write(WELCOME)
        request = collect_request(read, write)
        evaluate(request, limits, write)

    except KeyboardInterrupt:
        write("\nCancelled.")
        return 130
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        write(f"An error occurred: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
