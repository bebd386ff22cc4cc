from ._spline_error import SplineError


class NumericInstabilityError(SplineError):
    """Raised when a zero pivot is hit during tridiagonal elimination."""

    pass
