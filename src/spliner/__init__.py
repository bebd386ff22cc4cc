"""Cubic spline interpolation through key points, on PyTorch tensors.

Key points are split into sections at duplicate x values; each section is
fitted with a natural cubic spline in Hermite form and the curve can be
extrapolated linearly or by holding the end value.

Curves
------
Curve
    Piecewise cubic curve with extrapolation range and method.
curve
    Create a curve interpolator from key points (fit + callable).
curve_evaluate
    Evaluate a curve at tensors of query points.
curve_extrapolate
    Extend a curve beyond its end points.
split_at_duplicates
    Index runs between duplicate x values.

Sections
--------
Section
    One strictly increasing run of key points with fitted slopes.
section
    Create a section interpolator from data (fit + callable).
section_fit
    Fit slopes with natural end conditions.
section_evaluate
    Evaluate a section at query points.
section_derivative
    First or second derivative of a section.
section_contains
    Closed-interval membership test.
solve_tridiagonal
    Thomas algorithm for tridiagonal systems.

Options
-------
Percentage, Interval
    Extrapolation range options.
ExtrapolationMethod
    ``"linear"`` or ``"hold"``.
parse_extrapolate, resolve_range
    Normalize and resolve the extrapolation range option.

Exceptions
----------
SplineError
    Base exception.
ConfigurationError
    Unusable extrapolation option.
DegenerateInputError
    Too few key points or non-increasing x.
NumericInstabilityError
    Zero pivot in the tridiagonal solve.
ExtrapolationError
    Section evaluated outside its x-range.
ExtrapolationRangeWarning
    Explicit range does not cover the key points.
"""

# Import base exception first
from ._spline_error import SplineError

from ._configuration_error import ConfigurationError
from ._curve import (
    Curve,
    curve,
    curve_evaluate,
    curve_extrapolate,
    split_at_duplicates,
)
from ._degenerate_input_error import DegenerateInputError
from ._extrapolation import (
    ExtrapolationMethod,
    Interval,
    Percentage,
    parse_extrapolate,
    resolve_range,
)
from ._extrapolation_error import ExtrapolationError
from ._extrapolation_range_warning import ExtrapolationRangeWarning
from ._numeric_instability_error import NumericInstabilityError
from ._section import (
    Section,
    section,
    section_contains,
    section_derivative,
    section_evaluate,
    section_fit,
)
from ._solve_tridiagonal import solve_tridiagonal

__all__ = [
    "ConfigurationError",
    "Curve",
    "DegenerateInputError",
    "ExtrapolationError",
    "ExtrapolationMethod",
    "ExtrapolationRangeWarning",
    "Interval",
    "NumericInstabilityError",
    "Percentage",
    "Section",
    "SplineError",
    "curve",
    "curve_evaluate",
    "curve_extrapolate",
    "parse_extrapolate",
    "resolve_range",
    "section",
    "section_contains",
    "section_derivative",
    "section_evaluate",
    "section_fit",
    "solve_tridiagonal",
    "split_at_duplicates",
]

__version__ = "1.0.1"
