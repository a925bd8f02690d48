"""
Central configuration for splinepath tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("SPLINEPATH_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


# Segment construction
KNOT_COINCIDENCE_TOL: float = _env_float("SPLINEPATH_KNOT_COINCIDENCE_TOL", 1e-12)

# Displacement queries (length units)
DISPLACEMENT_RANGE_TOL: float = _env_float("SPLINEPATH_DISPLACEMENT_RANGE_TOL", 1e-3)
EDGE_SNAP_TOL: float = _env_float("SPLINEPATH_EDGE_SNAP_TOL", 1e-2)  # fixed, independent of segment length
PARAMETER_VALIDATION_TOL: float = _env_float("SPLINEPATH_PARAMETER_VALIDATION_TOL", 1e-2)

# Arc-length quadrature (scipy.integrate.quad)
QUAD_EPSABS: float = _env_float("SPLINEPATH_QUAD_EPSABS", 1e-10)
QUAD_EPSREL: float = _env_float("SPLINEPATH_QUAD_EPSREL", 1e-9)
QUAD_LIMIT: int = _env_int("SPLINEPATH_QUAD_LIMIT", 100)

# Displacement inversion (scipy.optimize.brentq)
ROOT_XTOL: float = _env_float("SPLINEPATH_ROOT_XTOL", 1e-12)
ROOT_MAX_ITER: int = _env_int("SPLINEPATH_ROOT_MAX_ITER", 100)

# Arc-length sampling for downstream consumers
DEFAULT_SAMPLE_STEP: float = _env_float("SPLINEPATH_SAMPLE_STEP", 0.05)

LOG_LEVEL_DEFAULT: str = os.getenv("SPLINEPATH_LOG_LEVEL", "INFO")
