"""
Package Express

Shipping quote calculator for Package Express (single carrier, flat formula).
"""

import logging

from .calculate_quotes import calculate_quotes, evaluate
from .version import VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["calculate_quotes", "evaluate", "VERSION"]
