"""Prime field construction and the fixed sample domain.

Uses galois library for all field arithmetic. A field is a ``galois.FieldArray``
subclass returned by ``galois.GF(p)``; tables are 1-d arrays of that class.

Every evaluation table in a computation is sampled on the same domain:
sample ``i`` is the field element ``F(i)``. Tables, linear-divisor recurrences
and root denominators all go through ``sample_domain`` so the mapping stays
consistent.
"""

from functools import lru_cache
from typing import Type, Union

import galois
import numpy as np

# --- Type Aliases ---

Field = Type[galois.FieldArray]
FieldLike = Union[int, galois.FieldArray]


# --- Field Construction ---

@lru_cache(maxsize=None)
def prime_field(prime: int) -> Field:
    """Return GF(prime). galois field classes are expensive to build, so cache them."""
    return galois.GF(prime)


def to_field(field: Field, value: FieldLike) -> galois.FieldArray:
    """Convert an int (any sign) or an existing element into a 0-d element of ``field``."""
    return field(int(value) % field.order)


# --- Sample Domain ---

def sample_domain(field: Field, size: int) -> galois.FieldArray:
    """Return the sample points [F(0), F(1), ..., F(size - 1)].

    Raises:
        ValueError: If size is not positive or the mapping i -> F(i) would not
            be injective (size > p).
    """
    if size <= 0:
        raise ValueError(f"Domain size must be positive, got {size}")
    if size > field.order:
        raise ValueError(f"Domain size {size} exceeds field order {field.order}")
    return field(np.arange(size, dtype=np.int64))


def nonzero_mask(values: galois.FieldArray) -> np.ndarray:
    """Boolean mask of the non-zero entries of a field array."""
    return values.view(np.ndarray) != 0
