"""
Incremental path construction from knots.
"""

import logging
from collections.abc import Sequence

from splinepath.utils.errors import DegenerateSegmentError, InsufficientKnotsError

from .knot import Knot
from .path import Path
from .segment import Segment

logger = logging.getLogger(__name__)


class PathBuilder:
    """
    Accumulates knots with their boundary derivatives and emits a Path.

    Each adjacent knot pair becomes one Segment. The same Knot object is used
    as the end of segment i and the start of segment i+1, so the chain is
    continuous in position, tangent and second derivative by construction.

    Example:
        >>> path = (
        ...     PathBuilder()
        ...     .add_knot_polar(0, -5, -45, 1, degrees=True)
        ...     .add_knot_polar(1, 3, -45, 3, degrees=True)
        ...     .add_knot_polar(3, 0, 0, 1, degrees=True)
        ...     .build()
        ... )
        >>> path.num_segments
        2
    """

    def __init__(self, knots: Sequence[Knot] | None = None):
        self._knots: list[Knot] = list(knots) if knots else []

    @property
    def knots(self) -> tuple[Knot, ...]:
        return tuple(self._knots)

    def __len__(self) -> int:
        return len(self._knots)

    def add(self, knot: Knot) -> "PathBuilder":
        self._knots.append(knot)
        return self

    def add_knot(
        self,
        x: float,
        y: float,
        tangent: Sequence[float] | None = None,
        second_derivative: Sequence[float] | None = None,
    ) -> "PathBuilder":
        """Append a knot with a Cartesian tangent (dx, dy)."""
        return self.add(Knot((x, y), tangent, second_derivative))

    def add_knot_polar(
        self,
        x: float,
        y: float,
        angle: float,
        magnitude: float,
        second_derivative: Sequence[float] | None = None,
        degrees: bool = False,
    ) -> "PathBuilder":
        """Append a knot whose tangent is given as (angle, magnitude)."""
        return self.add(Knot.polar(x, y, angle, magnitude, second_derivative, degrees=degrees))

    def clear(self) -> None:
        self._knots.clear()

    def build(self) -> Path:
        """
        Solve one segment per adjacent knot pair and chain them.

        Raises:
            InsufficientKnotsError: fewer than 2 knots
            DegenerateSegmentError: two consecutive knots coincide
        """
        if len(self._knots) < 2:
            raise InsufficientKnotsError(f"need at least 2 knots, got {len(self._knots)}")

        segments: list[Segment] = []
        for i in range(len(self._knots) - 1):
            try:
                segments.append(Segment.from_knots(self._knots[i], self._knots[i + 1]))
            except DegenerateSegmentError as e:
                raise DegenerateSegmentError(f"segment {i}: {e.original_message}") from e

        logger.debug("Built %d segment(s) from %d knots", len(segments), len(self._knots))
        return Path(segments)
