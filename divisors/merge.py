"""Merge step of divisor construction."""

from typing import Tuple

from divisors.divisor import Divisor, SmallDivisor
from primitives.field import FieldLike


def merge(
    d1: Divisor,
    d2: Divisor,
    small: SmallDivisor,
    denom: Tuple[FieldLike, FieldLike],
    verify: bool = False,
) -> Divisor:
    """Combine two divisors and one linear divisor, then cancel two roots.

    If d1 vanishes on S1 and -s1 (s1 the sum of S1), d2 likewise on S2 and -s2,
    and small is the line through s1 and s2, then dividing the product by
    (x - x(s1))(x - x(s2)) leaves a divisor vanishing on S1, S2 and -(s1 + s2).

    d1's tables are reused for the result; none of the inputs should be used
    afterwards.

    Args:
        d1: Left divisor (consumed)
        d2: Right divisor, same modulus table as d1
        small: Linear divisor of the point being folded in
        denom: (x1, x2), the roots to divide out
        verify: Check the final division is exact

    Returns:
        Divisor for the combined point set
    """
    numerator = d1
    numerator *= d2
    numerator *= small
    x1, x2 = denom
    return numerator.remove_diff(x1, x2, verify=verify)
