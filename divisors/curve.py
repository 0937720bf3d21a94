"""Curve parameters and the per-curve divisor context."""

from dataclasses import dataclass, field as dc_field
from typing import Sequence

import galois

from divisors.divisor import MODULUS_DEGREE, Divisor, SmallDivisor, vanishing_evals
from primitives.evals import Evals
from primitives.field import Field, FieldLike, sample_domain, to_field


# --- Configuration ---

@dataclass(frozen=True)
class CurveParams:
    """Short Weierstrass curve y^2 = x^3 + a*x + b over a galois prime field."""
    field: Field
    a: int
    b: int

    def __post_init__(self) -> None:
        a, b = to_field(self.field, self.a), to_field(self.field, self.b)
        if int(4 * a ** 3 + 27 * b ** 2) == 0:
            raise ValueError(f"Singular curve: a={self.a}, b={self.b}")

    def rhs(self, x: galois.FieldArray) -> galois.FieldArray:
        """x^3 + a*x + b."""
        return x ** 3 + to_field(self.field, self.a) * x + to_field(self.field, self.b)

    def is_on_curve(self, x: FieldLike, y: FieldLike) -> bool:
        x, y = to_field(self.field, x), to_field(self.field, y)
        return bool(y ** 2 == self.rhs(x))


# --- Context ---

@dataclass
class DivisorContext:
    """One curve-parameter scope: the sample domain and its modulus table.

    The modulus table (x^3 + a*x + b on the domain) is built once, made
    read-only, and referenced by every divisor this context creates.
    """
    curve: CurveParams
    size: int
    domain: galois.FieldArray = dc_field(init=False, repr=False)
    modulus: Evals = dc_field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.domain = sample_domain(self.curve.field, self.size)
        values = self.curve.rhs(self.domain)
        values.flags.writeable = False
        self.modulus = Evals(values, MODULUS_DEGREE)

    @property
    def field(self) -> Field:
        return self.curve.field

    def divisor(
        self,
        a_values: galois.FieldArray,
        b_values: galois.FieldArray,
        a_degree: int,
        b_degree: int,
    ) -> Divisor:
        """Divisor from raw A/B tables sampled on this context's domain."""
        return Divisor(Evals(a_values, a_degree), Evals(b_values, b_degree), self.modulus)

    def from_polys(self, a_poly: galois.Poly, b_poly: galois.Poly) -> Divisor:
        """Divisor from A and B in coefficient form."""
        return self.divisor(a_poly(self.domain), b_poly(self.domain), a_poly.degree, b_poly.degree)

    def from_small(self, small: SmallDivisor) -> Divisor:
        """Materialize a linear divisor as a full divisor."""
        a_values = small.a_evals(self.field, self.size)
        b_values = self.field.Zeros(self.size) + to_field(self.field, small.b)
        return self.divisor(a_values, b_values, 1, 0)

    def vertical(self, x: FieldLike) -> Divisor:
        """Seed divisor of a single point P with x(P) = x: f = x - x(P), zeros {P, -P}."""
        return self.from_small(SmallDivisor((1, -int(to_field(self.field, x))), 0))

    def denominator(self, roots: Sequence[FieldLike]) -> Evals:
        """Table of prod (x - r), degree len(roots)."""
        return vanishing_evals(self.field, self.size, roots)
