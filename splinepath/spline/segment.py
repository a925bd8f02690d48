"""
Quintic Hermite path segment between two knots.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np

from splinepath.config import KNOT_COINCIDENCE_TOL
from splinepath.utils.errors import DegenerateSegmentError

from .arc_length import DisplacementSolver
from .knot import Knot, Vector2, as_vector2
from .polynomial import PolynomialCurve

logger = logging.getLogger(__name__)

# Rows: p(0), p'(0), p''(0), p(1), p'(1), p''(1) for coefficients [a, b, c, d, e, f]
BOUNDARY_MATRIX = np.array(
    [
        [0, 0, 0, 0, 0, 1],
        [0, 0, 0, 0, 1, 0],
        [0, 0, 0, 2, 0, 0],
        [1, 1, 1, 1, 1, 1],
        [5, 4, 3, 2, 1, 0],
        [20, 12, 6, 2, 0, 0],
    ],
    dtype=float,
)


def _clamp_unit(t: float) -> float:
    return min(max(float(t), 0.0), 1.0)


class Segment:
    """
    Planar quintic curve r(t) = (x(t), y(t)), t ∈ [0, 1], spanning two knots.

    Provides C² boundary conditions: position, tangent and second derivative
    are reproduced at both ends, so chaining segments that share knot data
    yields a twice-differentiable path. Derivative polynomials and the total
    arc length are computed once at construction; the object is immutable
    afterwards and safe to query from several threads.
    """

    def __init__(
        self,
        start: Sequence[float],
        end: Sequence[float],
        start_tangent: Sequence[float],
        end_tangent: Sequence[float],
        start_second: Sequence[float] | None = None,
        end_second: Sequence[float] | None = None,
    ):
        """
        Solve segment coefficients from two-point boundary conditions.

        Args:
            start: Start knot (x, y)
            end: End knot (x, y)
            start_tangent: r'(0)
            end_tangent: r'(1)
            start_second: r''(0) (default zeros)
            end_second: r''(1) (default zeros)

        Raises:
            DegenerateSegmentError: coincident knots or malformed vectors
        """
        p0 = as_vector2(start, "start")
        p1 = as_vector2(end, "end")
        v0 = as_vector2(start_tangent, "start_tangent")
        v1 = as_vector2(end_tangent, "end_tangent")
        a0 = as_vector2(start_second, "start_second")
        a1 = as_vector2(end_second, "end_second")

        chord = math.hypot(p1[0] - p0[0], p1[1] - p0[1])
        if chord <= KNOT_COINCIDENCE_TOL:
            raise DegenerateSegmentError(f"knots coincide at {p0} (distance {chord:.3g})")

        if math.hypot(*v0) == 0.0 or math.hypot(*v1) == 0.0:
            logger.debug("Zero-magnitude tangent on segment %s -> %s; curve may form a cusp", p0, p1)

        self._boundary = {"p0": p0, "p1": p1, "v0": v0, "v1": v1, "a0": a0, "a1": a1}

        # Both axes share the structural matrix; solve them together
        rhs = np.array([p0, v0, a0, p1, v1, a1], dtype=float)
        coeffs = np.linalg.solve(BOUNDARY_MATRIX, rhs)

        self.x = PolynomialCurve(coeffs[:, 0])
        self.y = PolynomialCurve(coeffs[:, 1])
        self.dx = self.x.first_derivative()
        self.dy = self.y.first_derivative()
        self.ddx = self.dx.first_derivative()
        self.ddy = self.dy.first_derivative()

        self._solver = DisplacementSolver(self.speed)
        self._length = self._solver.displacement(1.0)

        logger.debug("Segment %s -> %s solved, chord=%.6g length=%.6g", p0, p1, chord, self._length)

    @classmethod
    def from_knots(cls, start: Knot, end: Knot) -> "Segment":
        return cls(
            start.point,
            end.point,
            start.tangent,
            end.tangent,
            start.second_derivative,
            end.second_derivative,
        )

    @property
    def start(self) -> Vector2:
        return self._boundary["p0"]

    @property
    def end(self) -> Vector2:
        return self._boundary["p1"]

    @property
    def boundary_conditions(self) -> dict[str, Vector2]:
        return dict(self._boundary)

    # ----- Evaluation -----

    def evaluate(self, t: float) -> Vector2:
        """Position r(t). The knots themselves are returned at t <= 0 and t >= 1."""
        if t <= 0:
            return self._boundary["p0"]
        if t >= 1:
            return self._boundary["p1"]
        return (self.x.evaluate(t), self.y.evaluate(t))

    def tangent(self, t: float) -> Vector2:
        """First derivative r'(t)."""
        if t <= 0:
            return self._boundary["v0"]
        if t >= 1:
            return self._boundary["v1"]
        return (self.dx.evaluate(t), self.dy.evaluate(t))

    def curvature_vector(self, t: float) -> Vector2:
        """Second derivative r''(t)."""
        if t <= 0:
            return self._boundary["a0"]
        if t >= 1:
            return self._boundary["a1"]
        return (self.ddx.evaluate(t), self.ddy.evaluate(t))

    def speed(self, t: float) -> float:
        """|r'(t)|, the arc-length integrand."""
        dx, dy = self.tangent(_clamp_unit(t))
        return math.hypot(dx, dy)

    def signed_curvature(self, t: float) -> float:
        """
        Signed curvature κ = (x'y'' - y'x'') / |r'|³.

        Positive when turning counter-clockwise. At a zero-speed cusp the
        curvature is unbounded and ±inf is returned (+inf if the numerator
        is also zero).
        """
        t = _clamp_unit(t)
        dx, dy = self.tangent(t)
        ddx, ddy = self.curvature_vector(t)
        cross = dx * ddy - dy * ddx
        speed = math.hypot(dx, dy)
        if speed == 0.0:
            return math.copysign(math.inf, cross)
        return cross / speed**3

    def heading(self, t: float) -> float:
        """Tangent direction atan2(y', x') in radians."""
        dx, dy = self.tangent(_clamp_unit(t))
        return math.atan2(dy, dx)

    # ----- Arc length -----

    def length(self) -> float:
        return self._length

    def displacement_at_parameter(self, t: float) -> float:
        """Distance traveled from t=0 to t (t clamped to [0, 1])."""
        if t >= 1:
            return self._length
        return self._solver.displacement(t)

    def parameter_at_displacement(self, s0: float) -> float:
        """
        Local parameter t at which the distance traveled equals s0.

        Raises:
            OutOfRangeError: s0 outside [0, length()] beyond tolerance
            InversionFailedError: arc length is not invertible here
        """
        return self._solver.parameter(s0, self._length)

    # ----- Diagnostics -----

    def validate_continuity(self, tolerance: float = 1e-9) -> dict[str, bool]:
        """
        Check the solved polynomials against the boundary conditions.

        Evaluates the polynomials directly (not the boundary shortcut used
        by evaluate/tangent/curvature_vector).
        """
        b = self._boundary

        def close(curve_x: PolynomialCurve, curve_y: PolynomialCurve, t: float, target: Vector2) -> bool:
            return (
                abs(curve_x.evaluate(t) - target[0]) < tolerance
                and abs(curve_y.evaluate(t) - target[1]) < tolerance
            )

        return {
            "p0": close(self.x, self.y, 0.0, b["p0"]),
            "p1": close(self.x, self.y, 1.0, b["p1"]),
            "v0": close(self.dx, self.dy, 0.0, b["v0"]),
            "v1": close(self.dx, self.dy, 1.0, b["v1"]),
            "a0": close(self.ddx, self.ddy, 0.0, b["a0"]),
            "a1": close(self.ddx, self.ddy, 1.0, b["a1"]),
        }

    def __repr__(self):
        return f"Segment(start={self.start}, end={self.end}, length={self._length:.6g})"
