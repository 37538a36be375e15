"""Single-variable polynomials and the 2D curves built from them.

The coefficients are kept generic: anything supporting ``+`` and ``*``
(float, ``Fraction``, ``Decimal``, numpy scalars) can be used, and numpy
arrays of ``t`` are evaluated element-wise.
"""

import numpy as np
from typing import Any, Callable, List, Sequence, Tuple


class Polynomial:
    """Polynomial with coefficients ordered by increasing power.

    The polynomial has the form:
    p(t) = c0 + c1*t + c2*t^2 + ... + cn*t^n

    Trailing zero coefficients are kept as given.

    Args:
        coeffs: Coefficients [c0, c1, ..., cn], at least one
    """

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs: Sequence[Any]):
        coeffs = tuple(coeffs)
        if len(coeffs) == 0:
            raise ValueError("Polynomial requires at least one coefficient")
        self._coeffs = coeffs

    @property
    def coeffs(self) -> Tuple[Any, ...]:
        """Coefficients [c0, ..., cn]."""
        return self._coeffs

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    def eval(self, t: Any) -> Any:
        """Evaluate the polynomial at t using Horner's method.

        Args:
            t: Parameter value (scalar or numpy array)

        Returns:
            p(t)
        """
        acc = self._coeffs[-1]
        for c in reversed(self._coeffs[:-1]):
            acc = acc * t + c
        return acc

    def __call__(self, t: Any) -> Any:
        return self.eval(t)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coeffs)!r})"


class Curve:
    """2D parametric curve made of one polynomial per axis.

    Properly defined for 0 <= t <= 1. Evaluating outside that range is
    plain polynomial extrapolation.

    Args:
        x: Polynomial for the x axis
        y: Polynomial for the y axis
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x: Polynomial, y: Polynomial):
        self._x = x
        self._y = y

    @property
    def x(self) -> Polynomial:
        return self._x

    @property
    def y(self) -> Polynomial:
        return self._y

    def eval(self, t: Any) -> Tuple[Any, Any]:
        """Evaluate the curve at t.

        Args:
            t: Curve parameter

        Returns:
            (x, y) point
        """
        return self._x.eval(t), self._y.eval(t)

    def render(self, num_pts: int, scalar: Callable[[int], Any] = float) -> List[Tuple[Any, Any]]:
        """Sample points at equal parameter increments.

        Samples t_i = i / num_pts for i = 0 .. num_pts - 1, so t = 1 itself is
        never part of the output.

        Args:
            num_pts: Number of samples, must be positive
            scalar: Conversion from an integer count to the numeric type of
                the coefficients

        Returns:
            List of (x, y) points
        """
        _check_num_pts(num_pts)
        n = scalar(num_pts)
        return [self.eval(scalar(i) / n) for i in range(num_pts)]

    def to_array(self, num_pts: int) -> np.ndarray:
        """Sample the curve like ``render`` into an array of shape (num_pts, 2)."""
        _check_num_pts(num_pts)
        t = np.arange(num_pts, dtype=float) / num_pts
        x, y = self.eval(t)
        # constant polynomials come back as scalars
        return np.column_stack([np.broadcast_to(x, t.shape), np.broadcast_to(y, t.shape)])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Curve(x={self._x!r}, y={self._y!r})"


def _check_num_pts(num_pts: int):
    if num_pts <= 0:
        raise ValueError(f"num_pts must be positive, got {num_pts}")
