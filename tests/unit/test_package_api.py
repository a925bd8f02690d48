import importlib
import inspect
import logging

import pytest

from splinepath import config
from splinepath.utils import errors


def test_spline_reexports_exist():
    sp = importlib.import_module("splinepath.spline")

    for name in ["PolynomialCurve", "Knot", "Segment", "DisplacementSolver", "Path", "PathBuilder"]:
        assert hasattr(sp, name), f"splinepath.spline missing {name}"
        assert inspect.isclass(getattr(sp, name)), f"{name} should be a class"


def test_top_level_exports():
    pkg = importlib.import_module("splinepath")
    for name in pkg.__all__:
        assert hasattr(pkg, name), f"splinepath missing {name}"
    assert isinstance(pkg.__version__, str)


@pytest.mark.parametrize(
    "exc_type",
    [
        errors.DegenerateSegmentError,
        errors.OutOfRangeError,
        errors.InversionFailedError,
        errors.InsufficientKnotsError,
        errors.ArcLengthIntegrationError,
    ],
)
def test_errors_share_base(exc_type):
    assert issubclass(exc_type, errors.PathPlanningError)
    assert issubclass(exc_type, RuntimeError)


def test_error_message_is_prefixed():
    err = errors.InsufficientKnotsError("need at least 2 knots, got 1")
    assert err.original_message == "need at least 2 knots, got 1"
    assert str(err) == "Insufficient Knots: need at least 2 knots, got 1"


def test_trace_level_registered():
    assert logging.getLevelName(config.TRACE) == "TRACE"
    assert hasattr(logging.Logger, "trace")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SPLINEPATH_TEST_FLOAT", "0.25")
    monkeypatch.setenv("SPLINEPATH_TEST_INT", "7")
    assert config._env_float("SPLINEPATH_TEST_FLOAT", 1.0) == 0.25
    assert config._env_int("SPLINEPATH_TEST_INT", 1) == 7


def test_env_override_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("SPLINEPATH_TEST_FLOAT", "abc")
    monkeypatch.delenv("SPLINEPATH_TEST_INT", raising=False)
    assert config._env_float("SPLINEPATH_TEST_FLOAT", 1.0) == 1.0
    assert config._env_int("SPLINEPATH_TEST_INT", 3) == 3


def test_default_tolerances():
    assert config.EDGE_SNAP_TOL == pytest.approx(0.01)
    assert config.DISPLACEMENT_RANGE_TOL == pytest.approx(0.001)
    assert config.PARAMETER_VALIDATION_TOL == pytest.approx(0.01)
