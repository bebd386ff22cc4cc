from ._spline_error import SplineError


class DegenerateInputError(SplineError):
    """Raised for too few key points or non-increasing x within a section."""

    pass
