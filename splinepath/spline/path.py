"""
Arc-length parametrized path built from chained segments.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from splinepath.config import DISPLACEMENT_RANGE_TOL, TRACE
from splinepath.utils.errors import InsufficientKnotsError, OutOfRangeError
from splinepath.utils.sampling import sample_path

from .knot import Vector2
from .segment import Segment

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class Path:
    """
    Ordered chain of segments addressed by distance traveled.

    Segment i ends on the knot segment i+1 starts on; this is guaranteed by
    whoever builds the segments (see PathBuilder) and is not re-checked here.
    Cumulative offsets are computed once, so a query costs one binary search
    plus one displacement inversion inside the owning segment.
    """

    def __init__(self, segments: Sequence[Segment]):
        """
        Args:
            segments: one or more segments sharing knots pairwise

        Raises:
            InsufficientKnotsError: no segments given
        """
        self._segments: tuple[Segment, ...] = tuple(segments)
        if not self._segments:
            raise InsufficientKnotsError("a path needs at least one segment (two knots)")

        lengths = np.array([seg.length() for seg in self._segments], dtype=float)
        self._offsets = np.concatenate(([0.0], np.cumsum(lengths[:-1])))
        self._offsets.setflags(write=False)
        self._length = float(self._offsets[-1] + lengths[-1])

        logger.debug(
            "Path assembled: %d segment(s), total length %.6g", len(self._segments), self._length
        )

    # ----- Structure -----

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def num_segments(self) -> int:
        return len(self._segments)

    @property
    def offsets(self) -> NDArray[np.float64]:
        """Cumulative start offset of each segment (read-only)."""
        return self._offsets

    def length(self) -> float:
        return self._length

    def knot_points(self) -> list[Vector2]:
        """Knot positions in traversal order (num_segments + 1 points)."""
        points = [seg.start for seg in self._segments]
        points.append(self._segments[-1].end)
        return points

    # ----- Arc-length dispatch -----

    def _check_range(self, s: float) -> float:
        s = float(s)
        if not (-DISPLACEMENT_RANGE_TOL <= s <= self._length + DISPLACEMENT_RANGE_TOL):
            raise OutOfRangeError(s, 0.0, self._length, what="arc length")
        return s

    def segment_index_at(self, s: float) -> int:
        """
        Index of the segment owning arc length s.

        An s exactly on an interior offset belongs to the segment that
        starts there.
        """
        s = self._check_range(s)
        idx = int(np.searchsorted(self._offsets, s, side="right")) - 1
        return min(max(idx, 0), len(self._segments) - 1)

    def locate(self, s: float) -> tuple[int, float]:
        """
        Resolve arc length s to (segment index, local parameter t).

        Raises:
            OutOfRangeError: s outside [0, length()] beyond tolerance
            InversionFailedError: the owning segment could not be inverted
        """
        idx = self.segment_index_at(s)
        seg = self._segments[idx]
        local = min(max(float(s) - float(self._offsets[idx]), 0.0), seg.length())
        t = seg.parameter_at_displacement(local)
        logger.log(TRACE, "locate s=%.9g -> segment=%d local=%.9g t=%.12g", s, idx, local, t)
        return idx, t

    def point_at(self, s: float) -> Vector2:
        idx, t = self.locate(s)
        return self._segments[idx].evaluate(t)

    def tangent_at(self, s: float) -> Vector2:
        idx, t = self.locate(s)
        return self._segments[idx].tangent(t)

    def curvature_at(self, s: float) -> Vector2:
        """Second-derivative vector (x'', y'') at arc length s."""
        idx, t = self.locate(s)
        return self._segments[idx].curvature_vector(t)

    def signed_curvature_at(self, s: float) -> float:
        idx, t = self.locate(s)
        return self._segments[idx].signed_curvature(t)

    def heading_at(self, s: float) -> float:
        idx, t = self.locate(s)
        return self._segments[idx].heading(t)

    def sample(self, step: float | None = None, num_samples: int | None = None) -> NDArray[np.float64]:
        """See splinepath.utils.sampling.sample_path."""
        return sample_path(self, step=step, num_samples=num_samples)

    def __repr__(self):
        return f"Path(num_segments={len(self._segments)}, length={self._length:.6g})"
