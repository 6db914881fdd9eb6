"""
One-dimensional quintic Hermite spline.

A single degree-5 polynomial over t in [0, 1] fixed by the position, first
derivative and second derivative at both ends:

p(t) = h0(t) p0 + h1(t) v0 + h2(t) a0 + h3(t) a1 + h4(t) v1 + h5(t) p1

The polynomial and its first three derivatives are built once with
numpy.polynomial; instances are immutable so they can be shared between
2D splines.
"""

import numpy as np


class QuinticHermiteSpline1d:
    """Quintic polynomial fixed by boundary position, velocity and acceleration."""

    __slots__ = ("_p0", "_v0", "_a0", "_p1", "_v1", "_a1", "_poly", "_d1", "_d2", "_d3")

    def __init__(self, p0, v0, a0, p1, v1, a1):
        self._p0 = float(p0)
        self._v0 = float(v0)
        self._a0 = float(a0)
        self._p1 = float(p1)
        self._v1 = float(v1)
        self._a1 = float(a1)

        self._poly = np.polynomial.Polynomial(self._coefficients())
        self._d1 = self._poly.deriv(1)
        self._d2 = self._poly.deriv(2)
        self._d3 = self._poly.deriv(3)

    @classmethod
    def from_boundary(cls, p0, v0, a0, p1, v1, a1) -> "QuinticHermiteSpline1d":
        return cls(p0, v0, a0, p1, v1, a1)

    @classmethod
    def from_spline_vary_dd(cls, spline: "QuinticHermiteSpline1d", a0, a1) -> "QuinticHermiteSpline1d":
        """Copy ``spline`` with its endpoint second derivatives replaced by ``a0`` and ``a1``."""
        return cls(spline.p0, spline.v0, a0, spline.p1, spline.v1, a1)

    def _coefficients(self):
        # Ascending power-basis coefficients of the Hermite basis expansion.
        p0, v0, a0 = self._p0, self._v0, self._a0
        p1, v1, a1 = self._p1, self._v1, self._a1
        return [
            p0,
            v0,
            0.5 * a0,
            -10 * p0 - 6 * v0 - 1.5 * a0 + 0.5 * a1 - 4 * v1 + 10 * p1,
            15 * p0 + 8 * v0 + 1.5 * a0 - a1 + 7 * v1 - 15 * p1,
            -6 * p0 - 3 * v0 - 0.5 * a0 + 0.5 * a1 - 3 * v1 + 6 * p1,
        ]

    # Boundary conditions

    @property
    def p0(self) -> float:
        return self._p0

    @property
    def v0(self) -> float:
        return self._v0

    @property
    def a0(self) -> float:
        return self._a0

    @property
    def p1(self) -> float:
        return self._p1

    @property
    def v1(self) -> float:
        return self._v1

    @property
    def a1(self) -> float:
        return self._a1

    @property
    def coefficients(self) -> np.ndarray:
        """Power-basis coefficients, constant term first."""
        return self._poly.coef.copy()

    # Evaluation

    def position(self, t):
        return self._poly(t)

    def tangent(self, t):
        """First derivative with respect to t."""
        return self._d1(t)

    def second_derivative(self, t):
        return self._d2(t)

    def third_derivative(self, t):
        return self._d3(t)

    def __repr__(self) -> str:
        return (
            f"QuinticHermiteSpline1d(p0={self._p0}, v0={self._v0}, a0={self._a0}, "
            f"p1={self._p1}, v1={self._v1}, a1={self._a1})"
        )
