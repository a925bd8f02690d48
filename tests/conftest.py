"""
Pytest configuration and shared fixtures for splinepath tests.

Provides the reference geometries used across the unit suite: a straight
unit segment, the quarter-turn segment from (0,0) to (1,1), and the
three-knot path built from polar tangents.
"""

import logging
import os
import sys

import pytest

# Add the parent directory to Python path so the package imports without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from splinepath import PathBuilder, Segment  # noqa: E402

logger = logging.getLogger(__name__)


# ============================================================================
# SEGMENT FIXTURES
# ============================================================================

@pytest.fixture
def straight_segment() -> Segment:
    """(0,0) -> (1,0) with unit tangents; x(t) = t so arc length equals t."""
    return Segment((0.0, 0.0), (1.0, 0.0), (1.0, 0.0), (1.0, 0.0))


@pytest.fixture
def quarter_turn_segment() -> Segment:
    """(0,0) -> (1,1), leaving along +x and arriving along +y."""
    return Segment((0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0), (0.0, 0.0), (0.0, 0.0))


# ============================================================================
# PATH FIXTURES
# ============================================================================

@pytest.fixture
def three_knot_builder() -> PathBuilder:
    builder = PathBuilder()
    builder.add_knot_polar(0.0, -5.0, -45.0, 1.0, degrees=True)
    builder.add_knot_polar(1.0, 3.0, -45.0, 3.0, degrees=True)
    builder.add_knot_polar(3.0, 0.0, 0.0, 1.0, degrees=True)
    return builder


@pytest.fixture
def three_knot_path(three_knot_builder):
    path = three_knot_builder.build()
    logger.debug(f"three-knot path: {path}")
    return path


@pytest.fixture
def smooth_path():
    """Gently curving four-knot path whose tangents never vanish."""
    return (
        PathBuilder()
        .add_knot(0.0, 0.0, (1.0, 0.0))
        .add_knot(1.0, 0.5, (1.0, 0.5))
        .add_knot(2.0, 0.5, (1.0, -0.2), (0.0, -0.5))
        .add_knot(3.0, 0.0, (1.0, 0.0))
        .build()
    )
