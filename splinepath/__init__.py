"""
splinepath Python Package

Path-planning kernel for mobile-robot trajectory generation: chains quintic
segments through 2D knots into one C² curve and addresses it by distance
traveled.

Key components:
- PathBuilder: accumulates knots (Cartesian or polar tangents) and builds a Path
- Path: arc-length queries point_at / tangent_at / curvature_at / length
- Segment: one quintic piece between two knots, with arc-length inversion
- PolynomialCurve: fixed six-coefficient polynomial primitive
- sample_path: evenly spaced arc-length samples for profile generators
"""

from ._version import __version__
from .spline import DisplacementSolver, Knot, Path, PathBuilder, PolynomialCurve, Segment
from .utils.errors import (
    ArcLengthIntegrationError,
    DegenerateSegmentError,
    InsufficientKnotsError,
    InversionFailedError,
    OutOfRangeError,
    PathPlanningError,
)
from .utils.sampling import sample_path

__all__ = [
    "__version__",
    "PathBuilder",
    "Path",
    "Segment",
    "Knot",
    "PolynomialCurve",
    "DisplacementSolver",
    "sample_path",
    "PathPlanningError",
    "DegenerateSegmentError",
    "OutOfRangeError",
    "InversionFailedError",
    "InsufficientKnotsError",
    "ArcLengthIntegrationError",
]
