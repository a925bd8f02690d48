"""
Knot value object and 2-vector helpers.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from splinepath.utils.errors import DegenerateSegmentError

Vector2 = tuple[float, float]
ZERO: Vector2 = (0.0, 0.0)


def as_vector2(value: Sequence[float] | np.ndarray | None, name: str = "vector") -> Vector2:
    """
    Coerce a 2-element sequence to a float tuple.

    None maps to (0, 0). Wrong arity or non-finite entries raise
    DegenerateSegmentError since the value cannot serve as boundary data.
    """
    if value is None:
        return ZERO
    try:
        arr = np.asarray(value, dtype=float).ravel()
    except (TypeError, ValueError) as e:
        raise DegenerateSegmentError(f"{name} is not numeric: {value!r}") from e
    if arr.shape != (2,):
        raise DegenerateSegmentError(f"{name} must have 2 components, got {arr.size}")
    if not np.all(np.isfinite(arr)):
        raise DegenerateSegmentError(f"{name} must be finite, got {tuple(arr.tolist())}")
    return (float(arr[0]), float(arr[1]))


def polar_to_cartesian(angle: float, magnitude: float, degrees: bool = False) -> Vector2:
    """Convert (angle, magnitude) to (r·cos θ, r·sin θ)."""
    theta = math.radians(angle) if degrees else float(angle)
    return (magnitude * math.cos(theta), magnitude * math.sin(theta))


@dataclass(frozen=True)
class Knot:
    """
    A point the path must pass through, with its boundary derivatives.

    Attributes:
        point: (x, y) position
        tangent: first derivative (dx, dy) of the curve at this knot
        second_derivative: second derivative (ddx, ddy) at this knot
    """

    point: Vector2
    tangent: Vector2 = ZERO
    second_derivative: Vector2 = ZERO

    def __post_init__(self):
        object.__setattr__(self, "point", as_vector2(self.point, "point"))
        object.__setattr__(self, "tangent", as_vector2(self.tangent, "tangent"))
        object.__setattr__(
            self, "second_derivative", as_vector2(self.second_derivative, "second_derivative")
        )

    @classmethod
    def polar(
        cls,
        x: float,
        y: float,
        angle: float,
        magnitude: float,
        second_derivative: Sequence[float] | None = None,
        degrees: bool = False,
    ) -> "Knot":
        """
        Build a knot whose tangent is given as heading angle and magnitude.

        Example:
            >>> Knot.polar(0, -5, -45, 1, degrees=True).tangent
            (0.7071067811865476, -0.7071067811865475)
        """
        return cls((x, y), polar_to_cartesian(angle, magnitude, degrees), second_derivative)

    @property
    def tangent_magnitude(self) -> float:
        return math.hypot(*self.tangent)
