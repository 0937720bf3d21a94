"""Primitives - Low-level field and polynomial building blocks."""

from primitives.batch_inverse import batch_inverse
from primitives.evals import Evals
from primitives.field import (
    Field,
    FieldLike,
    nonzero_mask,
    prime_field,
    sample_domain,
    to_field,
)
from primitives.polynomial import fits_degree, to_coefficients

__all__ = [
    # Field
    "Field",
    "FieldLike",
    "prime_field",
    "to_field",
    "sample_domain",
    "nonzero_mask",
    # Batch inversion
    "batch_inverse",
    # Evaluation tables
    "Evals",
    "to_coefficients",
    "fits_degree",
]
