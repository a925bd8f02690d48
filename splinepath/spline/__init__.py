from .arc_length import DisplacementSolver
from .builder import PathBuilder
from .knot import Knot, polar_to_cartesian
from .path import Path
from .polynomial import PolynomialCurve
from .segment import Segment

__all__ = [
    "PolynomialCurve",
    "Knot",
    "Segment",
    "DisplacementSolver",
    "Path",
    "PathBuilder",
    "polar_to_cartesian",
]
