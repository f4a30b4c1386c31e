"""
Core math modules для vote-odds

Точная рациональная арифметика без float-пути.
"""

# Exact Rational
from vote_odds.core.math.rational import (
    ONE,
    PERCENT_DENOMINATOR,
    ZERO,
    ExactRational,
    RationalDivisionByZero,
    RationalLike,
)

__all__ = [
    # Exact Rational — Constants
    "ONE",
    "PERCENT_DENOMINATOR",
    "ZERO",
    # Exact Rational — Exceptions
    "RationalDivisionByZero",
    # Exact Rational — Types
    "ExactRational",
    "RationalLike",
]
