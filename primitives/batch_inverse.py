"""Montgomery batch inversion.

The Montgomery trick converts N field inversions into 3N-3 multiplications + 1 inversion.
Zero entries are skipped: they contribute nothing to the running product and
come back as zero, so one vanishing sample cannot poison the whole batch.
"""

import galois

from primitives.field import nonzero_mask


def batch_inverse(values: galois.FieldArray) -> galois.FieldArray:
    """Montgomery batch inversion for any galois array.

    Algorithm:
    1. Forward pass: prefix products of the non-zero entries
    2. Single inversion of the total product (only 1 expensive inversion)
    3. Backward pass: peel individual inverses off the prefix products

    Args:
        values: Galois FieldArray to invert

    Returns:
        Galois FieldArray where result[i] = values[i]^(-1), or 0 where values[i] == 0
    """
    field_type = type(values)
    n = len(values)
    results = field_type.Zeros(n)
    if n == 0:
        return results

    nonzero = nonzero_mask(values)
    one = field_type(1)

    # Forward pass: cumprods[i] = product of non-zero values[0..i]
    cumprods = field_type.Zeros(n)
    acc = one
    for i in range(n):
        if nonzero[i]:
            acc = acc * values[i]
        cumprods[i] = acc

    z = acc ** -1

    # Backward pass
    for i in range(n - 1, -1, -1):
        if not nonzero[i]:
            continue
        prefix = cumprods[i - 1] if i > 0 else one
        results[i] = z * prefix
        z = z * values[i]

    return results
