"""
Custom exception types for the splinepath planning kernel.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class PathPlanningError(RuntimeError):
    """Base class for path construction and query failures."""

    label = "Path Planning Error"

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"{self.label}: {message}")

    def __str__(self):
        return f"{self.label}: {self.original_message}"


class DegenerateSegmentError(PathPlanningError):
    """Coincident knots or malformed boundary data for a segment."""

    label = "Degenerate Segment"


class OutOfRangeError(PathPlanningError):
    """Displacement or arc-length query outside the valid domain."""

    label = "Out Of Range"

    def __init__(self, value: float, lower: float, upper: float, what: str = "displacement"):
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{what} {value:.6g} outside [{lower:.6g}, {upper:.6g}]")


class InversionFailedError(PathPlanningError):
    """Displacement-to-parameter inversion did not produce a parameter in [0, 1]."""

    label = "Inversion Failed"


class InsufficientKnotsError(PathPlanningError):
    """Fewer than two knots (or zero segments) supplied."""

    label = "Insufficient Knots"


class ArcLengthIntegrationError(PathPlanningError):
    """Arc-length quadrature did not converge."""

    label = "Arc Length Integration Error"
