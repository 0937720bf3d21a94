"""Evaluation-form polynomial table."""

from typing import Optional

import galois
import numpy as np

from primitives.field import Field


class Evals:
    """A polynomial stored as its values on the sample domain F(0), ..., F(n-1).

    ``degree`` is an upper bound on the true degree. It is never recomputed from
    the values: every operation that produces a table derives it from its
    operands' bounds, so it may overestimate but must never underestimate.
    The bound must stay below ``len(values)`` so the samples determine the
    polynomial; assigning a larger bound raises ``ValueError``.

    ``valid`` marks the samples that still hold the polynomial's value. A
    division by a table that vanishes at a sample loses that sample, and any
    product involving it stays lost.

    Values are mutated in place by arithmetic; a table is never resized.
    """

    def __init__(self, values: galois.FieldArray, degree: int, valid: Optional[np.ndarray] = None) -> None:
        self.values = values
        self._degree = 0
        self.degree = degree
        if valid is None:
            valid = np.ones(len(values), dtype=bool)
        elif len(valid) != len(values):
            raise ValueError(f"Mask length {len(valid)} does not match {len(values)} samples")
        self.valid = valid

    @property
    def field(self) -> Field:
        return type(self.values)

    @property
    def degree(self) -> int:
        return self._degree

    @degree.setter
    def degree(self, degree: int) -> None:
        self.require_capacity(degree)
        self._degree = degree

    def require_capacity(self, degree: int) -> None:
        """Fail unless a polynomial of the given degree fits in this table."""
        if degree < 0:
            raise ValueError(f"Degree bound must be non-negative, got {degree}")
        if degree >= len(self.values):
            raise ValueError(
                f"Degree bound {degree} needs more than {len(self.values)} samples"
            )

    def copy(self) -> "Evals":
        return Evals(self.values.copy(), self._degree, self.valid.copy())

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, i: int) -> galois.FieldArray:
        return self.values[i]

    def __setitem__(self, i: int, value: galois.FieldArray) -> None:
        self.values[i] = value

    def __repr__(self) -> str:
        n_lost = int(np.count_nonzero(~self.valid))
        return f"Evals(len={len(self.values)}, degree={self._degree}, lost={n_lost})"
