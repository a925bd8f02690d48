"""
Fixed-width quintic polynomial primitive.
"""

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

NUM_COEFFS = 6


class PolynomialCurve:
    """
    Single-variable polynomial of degree at most 5.

    Coefficients are held highest degree first, always six slots:
    p(t) = a·t⁵ + b·t⁴ + c·t³ + d·t² + e·t + f. Derivatives keep the same
    six-slot form with the leading slots zeroed, so every curve in a segment
    shares one representation.
    """

    __slots__ = ("_coeffs",)

    def __init__(self, coefficients: Sequence[float] | ArrayLike):
        coeffs = tuple(float(c) for c in np.asarray(coefficients, dtype=float).ravel())
        if len(coeffs) != NUM_COEFFS:
            raise ValueError(f"PolynomialCurve needs {NUM_COEFFS} coefficients, got {len(coeffs)}")
        self._coeffs = coeffs

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._coeffs

    @property
    def degree(self) -> int:
        """Highest power with a nonzero coefficient (0 for constants)."""
        for i, c in enumerate(self._coeffs):
            if c != 0.0:
                return NUM_COEFFS - 1 - i
        return 0

    def evaluate(self, t):
        """Evaluate at t using Horner's method. Accepts scalars or numpy arrays."""
        result = self._coeffs[0]
        for c in self._coeffs[1:]:
            result = result * t + c
        if isinstance(result, np.ndarray):
            return result
        return float(result)

    __call__ = evaluate

    def first_derivative(self) -> "PolynomialCurve":
        a, b, c, d, e, _ = self._coeffs
        return PolynomialCurve((0.0, 5 * a, 4 * b, 3 * c, 2 * d, e))

    def second_derivative(self) -> "PolynomialCurve":
        return self.first_derivative().first_derivative()

    def __eq__(self, other):
        if not isinstance(other, PolynomialCurve):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self):
        return hash(self._coeffs)

    def __repr__(self):
        return f"PolynomialCurve({list(self._coeffs)})"
