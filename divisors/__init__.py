"""Divisors - elliptic-curve divisor functions in evaluation form."""

from divisors.curve import CurveParams, DivisorContext
from divisors.divisor import MODULUS_DEGREE, Divisor, SmallDivisor, vanishing_evals
from divisors.merge import merge

__all__ = [
    # Curve
    "CurveParams",
    "DivisorContext",
    # Divisor
    "Divisor",
    "SmallDivisor",
    "MODULUS_DEGREE",
    "vanishing_evals",
    # Merge
    "merge",
]
