from ._spline_error import SplineError


class ConfigurationError(SplineError):
    """Raised for an unusable extrapolation range or extrapolation method."""

    pass
