"""Coefficient-form views of evaluation tables.

Arithmetic never interpolates; these helpers exist for consumers of the final
tables and for checking degree bounds. Only samples marked valid are used.
"""

from typing import Optional

import galois
import numpy as np

from primitives.evals import Evals
from primitives.field import sample_domain


def to_coefficients(evals: Evals) -> galois.Poly:
    """Interpolate a table into coefficient form.

    Any ``degree + 1`` valid samples determine a polynomial of the tracked
    degree, so the first ones are used.

    Raises:
        ValueError: If fewer than ``degree + 1`` samples are valid.
    """
    indices = np.flatnonzero(evals.valid)
    n_points = evals.degree + 1
    if len(indices) < n_points:
        raise ValueError(
            f"Degree {evals.degree} needs {n_points} valid samples, only {len(indices)} left"
        )
    basis = indices[:n_points]
    domain = sample_domain(evals.field, len(evals))
    return galois.lagrange_poly(domain[basis], evals.values[basis])


def fits_degree(evals: Evals, mask: Optional[np.ndarray] = None) -> bool:
    """Check that the selected samples lie on one polynomial of degree <= evals.degree.

    Interpolates on the first ``degree + 1`` selected samples and evaluates the
    result at the others.

    Args:
        evals: Table to check
        mask: Boolean mask of samples to use, on top of ``evals.valid``
            (default: all valid samples)

    Returns:
        False if the samples contradict the bound. True otherwise, including
        the vacuous case of fewer than ``degree + 2`` selected samples.
    """
    domain = sample_domain(evals.field, len(evals))
    selected = evals.valid if mask is None else evals.valid & mask
    indices = np.flatnonzero(selected)
    n_points = evals.degree + 1
    if len(indices) <= n_points:
        return True

    basis, rest = indices[:n_points], indices[n_points:]
    poly = galois.lagrange_poly(domain[basis], evals.values[basis])
    return np.array_equal(poly(domain[rest]), evals.values[rest])
