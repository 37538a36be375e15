"""Tests for polynomial and curve evaluation."""

import pytest
import numpy as np
from fractions import Fraction

from eta3_spline.core.polynomial import Polynomial, Curve


def test_horner_evaluation():
    """3t^2 + 2 at t=2 is 14."""
    p = Polynomial([2, 0, 3])
    assert p.eval(2) == 14


def test_constant_polynomial():
    p = Polynomial([7.5])
    assert p.degree == 0
    assert p.eval(123.0) == 7.5


def test_trailing_zeros_are_kept():
    p = Polynomial([1.0, 2.0, 0.0, 0.0])
    assert p.degree == 3
    assert len(p) == 4
    assert p.coeffs == (1.0, 2.0, 0.0, 0.0)


def test_empty_coefficients_rejected():
    with pytest.raises(ValueError):
        Polynomial([])


def test_coefficients_are_copied():
    """Mutating the source list must not change the polynomial."""
    coeffs = [1.0, 2.0]
    p = Polynomial(coeffs)
    coeffs[0] = 100.0
    assert p.eval(0.0) == 1.0


def test_exact_arithmetic_with_fractions():
    p = Polynomial([Fraction(1, 2), Fraction(1, 3)])
    assert p.eval(Fraction(3, 2)) == Fraction(1)


def test_vectorized_evaluation():
    p = Polynomial([1.0, -2.0, 0.5, 4.0])
    t = np.linspace(-1.0, 2.0, 7)
    expected = np.polynomial.polynomial.polyval(t, [1.0, -2.0, 0.5, 4.0])
    assert np.allclose(p.eval(t), expected)


def test_polynomial_equality():
    assert Polynomial([1, 2]) == Polynomial([1, 2])
    assert Polynomial([1, 2]) != Polynomial([1, 2, 0])


@pytest.fixture
def line_curve():
    """x = t, y = 2t."""
    return Curve(Polynomial([0.0, 1.0]), Polynomial([0.0, 2.0]))


def test_curve_eval(line_curve):
    x, y = line_curve.eval(0.25)
    assert x == 0.25
    assert y == 0.5


def test_render_count_and_half_open_range(line_curve):
    for n in (1, 3, 10, 100, 1000):
        pts = line_curve.render(n)
        assert len(pts) == n
        # x equals the curve parameter
        assert pts[0][0] == 0.0
        assert pts[-1][0] == pytest.approx((n - 1) / n)
        assert all(x < 1.0 for x, _ in pts)


def test_render_single_point(line_curve):
    assert line_curve.render(1) == [(0.0, 0.0)]


def test_render_with_fractions():
    curve = Curve(Polynomial([Fraction(0), Fraction(1)]), Polynomial([Fraction(1)]))
    pts = curve.render(3, scalar=Fraction)
    assert [x for x, _ in pts] == [Fraction(0), Fraction(1, 3), Fraction(2, 3)]
    assert all(y == 1 for _, y in pts)


@pytest.mark.parametrize("num_pts", [0, -1])
def test_render_rejects_non_positive(line_curve, num_pts):
    with pytest.raises(ValueError):
        line_curve.render(num_pts)
    with pytest.raises(ValueError):
        line_curve.to_array(num_pts)


def test_to_array_matches_render():
    curve = Curve(Polynomial([1.0, 2.0, -3.0, 0.5]), Polynomial([-1.0, 0.0, 4.0]))
    arr = curve.to_array(50)
    assert arr.shape == (50, 2)
    assert np.allclose(arr, np.array(curve.render(50)))


def test_to_array_constant_curve():
    curve = Curve(Polynomial([2.0]), Polynomial([3.0]))
    arr = curve.to_array(4)
    assert arr.shape == (4, 2)
    assert np.all(arr[:, 0] == 2.0)
    assert np.all(arr[:, 1] == 3.0)
