from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised when a section is evaluated outside its own x-range."""

    pass
