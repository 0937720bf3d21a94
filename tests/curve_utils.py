"""Affine point arithmetic for building test divisors.

Points are (x, y) int tuples mod p. Point representation is a caller concern,
so this lives with the tests rather than in the library.
"""

from typing import List, Optional, Tuple

from divisors import SmallDivisor

Point = Tuple[int, int]

M61 = (1 << 61) - 1  # p = 3 mod 4, so square roots are one exponentiation

# y^2 = x^3 + 2x + 3
CURVE_A = 2
CURVE_B = 3


def sqrt_mod(v: int, p: int) -> Optional[int]:
    """A square root of v mod p, or None for non-residues."""
    v %= p
    if p % 4 == 3:
        r = pow(v, (p + 1) // 4, p)
        return r if r * r % p == v else None
    for r in range(p):
        if r * r % p == v:
            return r
    return None


def find_points(a: int, b: int, p: int, count: int, start: int = 0) -> List[Point]:
    """First `count` points with distinct x >= start, skipping 2-torsion."""
    points = []
    x = start
    while len(points) < count:
        y = sqrt_mod(x ** 3 + a * x + b, p)
        if y:
            points.append((x, y))
        x += 1
    return points


def neg(P: Point, p: int) -> Point:
    return P[0], (-P[1]) % p


def add(P: Point, Q: Point, a: int, p: int) -> Point:
    """P + Q, assuming P != -Q."""
    (x1, y1), (x2, y2) = P, Q
    if P == Q:
        lam = (3 * x1 * x1 + a) * pow(2 * y1, -1, p) % p
    else:
        lam = (y2 - y1) * pow(x2 - x1, -1, p) % p
    x3 = (lam * lam - x1 - x2) % p
    y3 = (lam * (x1 - x3) - y1) % p
    return x3, y3


def line_through(P: Point, Q: Point, p: int) -> SmallDivisor:
    """Linear divisor f = lambda*x + mu - y of the line through P and Q (x(P) != x(Q))."""
    (x1, y1), (x2, y2) = P, Q
    lam = (y2 - y1) * pow(x2 - x1, -1, p) % p
    mu = (y1 - lam * x1) % p
    return SmallDivisor((lam, mu), 1)
