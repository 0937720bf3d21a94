"""Divisor functions f(x, y) = A(x) - y*B(x) in evaluation form.

Products stay in this form because the curve equation folds y^2 back into x:

    f1 * f2 = A1A2 + (x^3 + ax + b) B1B2 - y(A1B2 + A2B1)

so A = A1A2 + m(x) B1B2 and B = A1B2 + A2B1, with m(x) = x^3 + ax + b held
as a shared table (the modulus). All arithmetic is pointwise on the sample
domain and in place on the left operand.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import galois
import numpy as np

from primitives.batch_inverse import batch_inverse
from primitives.evals import Evals
from primitives.field import Field, FieldLike, nonzero_mask, sample_domain, to_field
from primitives.polynomial import fits_degree, to_coefficients

# Degree of the modulus x^3 + ax + b
MODULUS_DEGREE = 3


# --- Linear Divisor ---

@dataclass(frozen=True)
class SmallDivisor:
    """Divisor of a single point: A(x) = slope*x + intercept, B(x) = b.

    Kept as coefficients; its A is produced on demand by an additive
    recurrence rather than stored as a table.
    """
    a: Tuple[FieldLike, FieldLike]  # (slope, intercept)
    b: FieldLike

    def a_evals(self, field: Field, size: int) -> galois.FieldArray:
        """A on the sample domain: start at the intercept (x = 0), add the slope per sample.

        One addition per sample. Materialized as a full table so the fold
        runs as whole-array galois operations.
        """
        slope = to_field(field, self.a[0])
        acc = to_field(field, self.a[1])
        values = field.Zeros(size)
        for i in range(size):
            values[i] = acc
            acc = acc + slope
        return values


# --- Divisor ---

class Divisor:
    """General divisor: tables for A and B plus the shared modulus table.

    The modulus is referenced, never copied, and never written.
    """

    def __init__(self, a: Evals, b: Evals, modulus: Evals) -> None:
        if not len(a) == len(b) == len(modulus):
            raise ValueError(
                f"Table length mismatch: A={len(a)}, B={len(b)}, modulus={len(modulus)}"
            )
        self.a = a
        self.b = b
        self.modulus = modulus

    @property
    def field(self) -> Field:
        return self.a.field

    def __len__(self) -> int:
        return len(self.a)

    def ab(self, i: int) -> Tuple[galois.FieldArray, galois.FieldArray]:
        return self.a[i], self.b[i]

    def copy(self) -> "Divisor":
        """Independent A/B tables, same modulus."""
        return Divisor(self.a.copy(), self.b.copy(), self.modulus)

    def new_degree(self, other: "Divisor") -> Tuple[int, int]:
        """Degree bounds of self * other.

        deg(A) = max(A1 + A2, 3 + B1 + B2)
        deg(B) = max(A1 + B2, A2 + B1)
        """
        a1, b1 = self.a.degree, self.b.degree
        a2, b2 = other.a.degree, other.b.degree
        a = max(a1 + a2, MODULUS_DEGREE + b1 + b2)
        b = max(a1 + b2, a2 + b1)
        return a, b

    # --- Multiplication ---

    def _fold(self, a2, b2) -> None:
        """Overwrite (A, B) with the product by (a2, b2), sample by sample.

        (A1+B1)(A2+B2) = A1A2 + A1B2 + B1A2 + B1B2 gives the cross term with
        one multiplication.
        """
        a1, b1 = self.a.values, self.b.values
        a1a2 = a1 * a2
        b1b2 = b1 * b2
        cross = (a1 + b1) * (a2 + b2)
        self.b.values[:] = cross - (a1a2 + b1b2)
        self.a.values[:] = a1a2 + b1b2 * self.modulus.values

    def _restrict(self, other_valid=None) -> None:
        """After a fold both outputs depend on both inputs at each sample."""
        valid = self.a.valid & self.b.valid
        if other_valid is not None:
            valid = valid & other_valid
        self.a.valid = valid
        self.b.valid = valid.copy()

    def _mul_divisor(self, rhs: "Divisor") -> None:
        if rhs.modulus is not self.modulus:
            raise ValueError("Cannot multiply divisors built on different modulus tables")
        if len(rhs) != len(self):
            raise ValueError(f"Table length mismatch: {len(self)} vs {len(rhs)}")
        new_a, new_b = self.new_degree(rhs)
        self.a.require_capacity(new_a)
        self.b.require_capacity(new_b)

        self._fold(rhs.a.values, rhs.b.values)
        self._restrict(rhs.a.valid & rhs.b.valid)
        self.a.degree = new_a
        self.b.degree = new_b

    def _mul_small(self, rhs: SmallDivisor) -> None:
        # A2 has degree 1, B2 degree 0
        da, db = self.a.degree, self.b.degree
        new_a = max(da + 1, db + MODULUS_DEGREE)
        new_b = max(da, db + 1)
        self.a.require_capacity(new_a)
        self.b.require_capacity(new_b)

        a2 = rhs.a_evals(self.field, len(self))
        b2 = to_field(self.field, rhs.b)
        self._fold(a2, b2)
        self._restrict()
        self.a.degree = new_a
        self.b.degree = new_b

    def _mul_evals(self, rhs: Evals) -> None:
        if len(rhs) != len(self):
            raise ValueError(f"Table length mismatch: {len(self)} vs {len(rhs)}")
        new_a = self.a.degree + rhs.degree
        new_b = self.b.degree + rhs.degree
        self.a.require_capacity(new_a)
        self.b.require_capacity(new_b)

        self.a.values[:] = self.a.values * rhs.values
        self.b.values[:] = self.b.values * rhs.values
        self.a.valid = self.a.valid & rhs.valid
        self.b.valid = self.b.valid & rhs.valid
        self.a.degree = new_a
        self.b.degree = new_b

    def __imul__(self, rhs):
        if isinstance(rhs, Divisor):
            self._mul_divisor(rhs)
        elif isinstance(rhs, SmallDivisor):
            self._mul_small(rhs)
        elif isinstance(rhs, Evals):
            self._mul_evals(rhs)
        else:
            return NotImplemented
        return self

    def __mul__(self, rhs):
        if not isinstance(rhs, (Divisor, SmallDivisor, Evals)):
            return NotImplemented
        result = self.copy()
        result *= rhs
        return result

    # --- Exact Division ---

    def divide(self, denominator: Evals, verify: bool = False) -> "Divisor":
        """Divide A and B by an x-only table known to divide them exactly.

        All denominator samples are inverted in one batch. Samples where the
        denominator vanishes come out as zero and are marked invalid, so
        interpolation skips them. Both degree bounds drop by the denominator's
        degree; a bound that was already smaller can only belong to the zero
        polynomial, so it drops to 0.

        Args:
            denominator: Table of the exact divisor
            verify: Check that the division really was exact (slow; for tests)

        Returns:
            self, divided in place

        Raises:
            ValueError: On length mismatch, or if verify finds a remainder.
                Nothing is modified when it raises.
        """
        if len(denominator) != len(self):
            raise ValueError(f"Table length mismatch: {len(self)} vs {len(denominator)}")
        nonzero = nonzero_mask(denominator.values)
        if verify:
            for name, table in (("A", self.a), ("B", self.b)):
                if np.any(nonzero_mask(table.values[table.valid & ~nonzero])):
                    raise ValueError(f"{name} does not vanish at a root of the denominator")

        inverses = batch_inverse(denominator.values)
        quotients = [
            Evals(
                table.values * inverses,
                max(table.degree - denominator.degree, 0),
                table.valid & denominator.valid & nonzero,
            )
            for table in (self.a, self.b)
        ]

        if verify:
            for name, quotient in zip(("A", "B"), quotients):
                if not fits_degree(quotient):
                    raise ValueError(
                        f"{name} is not divisible: quotient exceeds degree {quotient.degree}"
                    )

        for table, quotient in zip((self.a, self.b), quotients):
            table.values[:] = quotient.values
            table.valid = quotient.valid
            table.degree = quotient.degree
        return self

    def __itruediv__(self, rhs):
        if not isinstance(rhs, Evals):
            return NotImplemented
        return self.divide(rhs)

    def __truediv__(self, rhs):
        if not isinstance(rhs, Evals):
            return NotImplemented
        return self.copy().divide(rhs)

    def remove_diff(self, x1: FieldLike, x2: FieldLike, verify: bool = False) -> "Divisor":
        """Remove 2 roots by dividing by (x - x1) * (x - x2)."""
        return self.divide(vanishing_evals(self.field, len(self), (x1, x2)), verify=verify)

    # --- Read Access ---

    def interpolate(self) -> Tuple[galois.Poly, galois.Poly]:
        """A and B in coefficient form."""
        return to_coefficients(self.a), to_coefficients(self.b)

    def evaluate(self, x: FieldLike, y: FieldLike) -> galois.FieldArray:
        """f(x, y) = A(x) - y*B(x) at an arbitrary point."""
        poly_a, poly_b = self.interpolate()
        x, y = to_field(self.field, x), to_field(self.field, y)
        return poly_a(x) - y * poly_b(x)

    def __repr__(self) -> str:
        return f"Divisor(len={len(self)}, deg_a={self.a.degree}, deg_b={self.b.degree})"


def vanishing_evals(field: Field, size: int, roots: Sequence[FieldLike]) -> Evals:
    """Table of prod (x - r) over the given roots, degree len(roots)."""
    domain = sample_domain(field, size)
    values = field.Ones(size)
    for root in roots:
        values = values * (domain - to_field(field, root))
    return Evals(values, len(roots))
