"""
Arc-length integration and displacement inversion for a single segment.
"""

import logging
from collections.abc import Callable

from scipy.integrate import quad
from scipy.optimize import brentq

from splinepath.config import (
    DISPLACEMENT_RANGE_TOL,
    EDGE_SNAP_TOL,
    PARAMETER_VALIDATION_TOL,
    QUAD_EPSABS,
    QUAD_EPSREL,
    QUAD_LIMIT,
    ROOT_MAX_ITER,
    ROOT_XTOL,
    TRACE,
)
from splinepath.utils.errors import (
    ArcLengthIntegrationError,
    InversionFailedError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)


class DisplacementSolver:
    """
    Maps local parameter t ∈ [0, 1] to distance traveled and back.

    The forward map s(t) is the integral of the speed |r'(t)| over [0, t],
    which has no elementary antiderivative for a quintic segment, so it is
    computed with adaptive quadrature. The inverse map treats s(t) as a black
    box monotone function and finds t with a bracketed Brent root finder.
    Both loops are bounded; non-convergence is raised, never retried.
    """

    def __init__(self, speed: Callable[[float], float]):
        """
        Args:
            speed: integrand |r'(t)|, must be nonnegative on [0, 1]
        """
        self._speed = speed

    def displacement(self, t: float) -> float:
        """Arc length from t=0 to t (t clamped to [0, 1])."""
        t = min(max(float(t), 0.0), 1.0)
        if t == 0.0:
            return 0.0
        result = quad(
            self._speed,
            0.0,
            t,
            epsabs=QUAD_EPSABS,
            epsrel=QUAD_EPSREL,
            limit=QUAD_LIMIT,
            full_output=1,
        )
        # quad appends a message only when it did not converge
        if len(result) > 3:
            raise ArcLengthIntegrationError(f"quadrature over [0, {t:.6g}] failed: {result[3]}")
        return float(result[0])

    def parameter(self, s0: float, total: float) -> float:
        """
        Find t ∈ [0, 1] with displacement(t) = s0.

        Args:
            s0: target displacement, expected in [0, total]
            total: segment arc length, i.e. displacement(1)

        Raises:
            OutOfRangeError: s0 outside [0, total] by more than DISPLACEMENT_RANGE_TOL
            InversionFailedError: no sign change, root finder did not converge,
                or the root lies outside [0, 1] beyond PARAMETER_VALIDATION_TOL
        """
        s0 = float(s0)
        if not (-DISPLACEMENT_RANGE_TOL <= s0 <= total + DISPLACEMENT_RANGE_TOL):
            raise OutOfRangeError(s0, 0.0, total)

        # Snap near the ends, where the bracket collapses onto a root
        if abs(s0) <= EDGE_SNAP_TOL:
            return 0.0
        if abs(total - s0) <= EDGE_SNAP_TOL:
            return 1.0

        def residual(t: float) -> float:
            return self.displacement(t) - s0

        try:
            t, info = brentq(
                residual,
                0.0,
                1.0,
                xtol=ROOT_XTOL,
                maxiter=ROOT_MAX_ITER,
                full_output=True,
                disp=False,
            )
        except ValueError as e:
            # f(0) and f(1) have the same sign
            raise InversionFailedError(f"no sign change bracketing s={s0:.6g} on [0, 1]") from e

        if not info.converged:
            raise InversionFailedError(
                f"root finder did not converge for s={s0:.6g} after {info.iterations} iterations ({info.flag})"
            )
        if t < -PARAMETER_VALIDATION_TOL or t > 1.0 + PARAMETER_VALIDATION_TOL:
            raise InversionFailedError(f"parameter t={t:.6g} for s={s0:.6g} lies outside [0, 1]")

        logger.log(TRACE, "inverted s=%.9g -> t=%.12g (iterations=%d)", s0, t, info.iterations)
        return min(max(float(t), 0.0), 1.0)
