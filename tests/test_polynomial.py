"""Tests for coefficient-form helpers."""

import galois
import numpy as np

from primitives.evals import Evals
from primitives.field import sample_domain
from primitives.polynomial import fits_degree, to_coefficients


class TestToCoefficients:
    """Tests for interpolation of tables."""

    def test_recovers_polynomial(self, gf101) -> None:
        """Interpolating the samples of a polynomial gives it back."""
        poly = galois.Poly([3, 0, 7, 1], field=gf101)
        table = Evals(poly(sample_domain(gf101, 10)), 3)
        assert to_coefficients(table) == poly

    def test_constant(self, gf101) -> None:
        """Degree 0 interpolates from a single sample."""
        table = Evals(gf101.Ones(5) * 9, 0)
        assert to_coefficients(table) == galois.Poly([9], field=gf101)


class TestFitsDegree:
    """Tests for the degree consistency check."""

    def test_polynomial_fits(self, gf101) -> None:
        """Samples of a degree-3 polynomial fit a bound of 3."""
        poly = galois.Poly([1, 2, 3, 4], field=gf101)
        assert fits_degree(Evals(poly(sample_domain(gf101, 8)), 3))

    def test_overlarge_degree_fails(self, gf101) -> None:
        """Samples of x^4 do not fit a bound of 3."""
        poly = galois.Poly([1, 0, 0, 0, 0], field=gf101)
        assert not fits_degree(Evals(poly(sample_domain(gf101, 8)), 3))

    def test_vacuous_without_spare_samples(self, gf101) -> None:
        """With exactly degree + 1 samples anything fits."""
        assert fits_degree(Evals(gf101([5, 1, 77, 3]), 3))

    def test_mask_excludes_samples(self, gf101) -> None:
        """Masked-out samples are ignored."""
        poly = galois.Poly([1, 1], field=gf101)
        values = poly(sample_domain(gf101, 6))
        values[2] = gf101(0)
        table = Evals(values, 1)
        assert not fits_degree(table)
        mask = np.ones(6, dtype=bool)
        mask[2] = False
        assert fits_degree(table, mask=mask)


class TestLostSamples:
    """Interpolation uses valid samples only."""

    def test_to_coefficients_skips_invalid(self, gf101) -> None:
        """A corrupted leading sample marked invalid does not leak into the result."""
        poly = galois.Poly([1, 1], field=gf101)
        values = poly(sample_domain(gf101, 5))
        values[0] = gf101(0)
        valid = np.array([False, True, True, True, True])
        table = Evals(values, 1, valid)
        assert to_coefficients(table) == poly
        assert fits_degree(table)
