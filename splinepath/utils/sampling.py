"""
Arc-length sampling utilities for downstream profile generation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from splinepath.config import DEFAULT_SAMPLE_STEP

if TYPE_CHECKING:
    from splinepath.spline.path import Path

SAMPLE_COLUMNS = ("s", "x", "y", "dx", "dy", "ddx", "ddy", "kappa")


def _samples_for_length(length: float, step: float) -> int:
    if length <= 0:
        return 2
    n = int(np.ceil(length / step - 1e-9)) + 1
    return max(2, n)


def arc_length_stations(length: float, step: float | None = None, num_samples: int | None = None) -> np.ndarray:
    """
    Evenly spaced arc-length stations covering [0, length], endpoints included.

    Exactly one of step / num_samples is used; num_samples wins if both are given.
    """
    if num_samples is not None:
        if num_samples < 2:
            raise ValueError(f"num_samples must be >= 2, got {num_samples}")
        n = int(num_samples)
    else:
        st = DEFAULT_SAMPLE_STEP if step is None else float(step)
        if st <= 0:
            raise ValueError(f"step must be positive, got {st}")
        n = _samples_for_length(length, st)
    return np.linspace(0.0, length, n)


def sample_path(path: Path, step: float | None = None, num_samples: int | None = None) -> np.ndarray:
    """
    Evaluate a path at evenly spaced arc-length stations.

    Returns: array of shape (N, 8) with columns SAMPLE_COLUMNS:
        s, x, y, dx, dy, ddx, ddy, signed curvature
    """
    stations = arc_length_stations(path.length(), step, num_samples)
    rows = np.empty((len(stations), len(SAMPLE_COLUMNS)), dtype=float)
    segments = path.segments
    for i, s in enumerate(stations):
        idx, t = path.locate(float(s))
        seg = segments[idx]
        rows[i, 0] = s
        rows[i, 1:3] = seg.evaluate(t)
        rows[i, 3:5] = seg.tangent(t)
        rows[i, 5:7] = seg.curvature_vector(t)
        rows[i, 7] = seg.signed_curvature(t)
    return rows
