"""Cubic spline curve through ordered key points."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from .._degenerate_input_error import DegenerateInputError
from .._extrapolation import (
    ExtrapolationMethod,
    ExtrapolationOption,
    Interval,
    check_extrapolation_method,
    resolve_range,
)
from .._section import Section, section_contains, section_evaluate, section_fit
from ._curve_evaluate import curve_evaluate
from ._curve_extrapolate import curve_extrapolate
from ._split_at_duplicates import split_at_duplicates

KeyPoints = Union[Tensor, Sequence[float]]


def _as_tensor(values) -> Tensor:
    if isinstance(values, Tensor):
        return values if values.is_floating_point() else values.to(torch.float64)
    return torch.as_tensor(list(values), dtype=torch.float64)


def _key_points(x: KeyPoints, y: KeyPoints) -> Tuple[Tensor, Tensor]:
    x = _as_tensor(x)
    y = _as_tensor(y)

    if x.dim() != 1 or y.dim() != 1:
        raise ValueError(
            f"x and y must be 1-D, got shapes {tuple(x.shape)} and {tuple(y.shape)}"
        )
    if x.shape != y.shape:
        raise ValueError(
            f"x and y must have same length, got {x.shape[0]} and {y.shape[0]}"
        )
    if x.shape[0] < 2:
        raise DegenerateInputError(f"Need at least 2 points, got {x.shape[0]}")

    dtype = torch.promote_types(x.dtype, y.dtype)
    return x.to(dtype), y.to(dtype)


class Curve:
    """Piecewise cubic spline interpolation through key points.

    The key points must be in increasing x order. A duplicate x value splits
    the curve into discontinuous sections, each fitted independently with
    natural end conditions. Outside the sections the curve is extrapolated
    up to ``range``, either along the tangent at the nearest end point
    (``"linear"``) or by holding the nearest end point's y value
    (``"hold"``).

    Parameters
    ----------
    x : Tensor or sequence of float
        Key point x values, non-decreasing.
    y : Tensor or sequence of float
        Key point y values, same length as x.
    extrapolate : str, Percentage, Interval, (float, float) or None
        Range over which queries are answered. A percentage such as
        ``"10%"`` widens ``[x[0], x[-1]]`` by that share of the x-span on
        each side; an interval is used as given. Default ``"0%"``.
    emethod : {"linear", "hold"}
        Extrapolation method. Default ``"linear"``.

    Raises
    ------
    DegenerateInputError
        If there are fewer than 2 key points, a section has fewer than 2
        points, or x decreases.
    ConfigurationError
        If ``extrapolate`` or ``emethod`` is not usable.
    ValueError
        If x and y are not 1-D sequences of the same length.

    Examples
    --------
    >>> c = Curve([0.0, 1.0, 2.0], [0.0, 1.0, 0.5])
    >>> c.get(1.0)
    1.0
    >>> c[3.0] is None
    True
    """

    __slots__ = ("_sections", "_range", "_extrapolation_method")

    def __init__(
        self,
        x: KeyPoints,
        y: KeyPoints,
        *,
        extrapolate: ExtrapolationOption = "0%",
        emethod: ExtrapolationMethod = "linear",
    ):
        x, y = _key_points(x, y)

        self._extrapolation_method = check_extrapolation_method(emethod)
        self._range = resolve_range(x[0].item(), x[-1].item(), extrapolate)
        self._sections = tuple(
            section_fit(x[first : last + 1], y[first : last + 1])
            for first, last in split_at_duplicates(x)
        )

    @classmethod
    def from_points(
        cls,
        points: Mapping,
        *,
        extrapolate: ExtrapolationOption = "0%",
        emethod: ExtrapolationMethod = "linear",
    ) -> Curve:
        """Build a curve from a mapping of x to y, in iteration order."""
        if not isinstance(points, Mapping):
            raise TypeError(
                f"points must be a mapping of x to y, got {type(points).__name__}"
            )
        return cls(
            list(points.keys()),
            list(points.values()),
            extrapolate=extrapolate,
            emethod=emethod,
        )

    @classmethod
    def from_sequences(
        cls,
        x: KeyPoints,
        y: KeyPoints,
        *,
        extrapolate: ExtrapolationOption = "0%",
        emethod: ExtrapolationMethod = "linear",
    ) -> Curve:
        """Build a curve from parallel x and y sequences."""
        return cls(x, y, extrapolate=extrapolate, emethod=emethod)

    @property
    def range(self) -> Interval:
        """Closed interval over which ``get`` returns a value."""
        return self._range

    @property
    def sections(self) -> int:
        """Number of discontinuous sections."""
        return len(self._sections)

    @property
    def fitted_sections(self) -> Tuple[Section, ...]:
        """Fitted sections in x order. Read-only: they are shared with the
        curve, so modifying their tensors changes its results."""
        return self._sections

    @property
    def extrapolation_method(self) -> ExtrapolationMethod:
        return self._extrapolation_method

    def get(self, v) -> Optional[float]:
        """Interpolated value at ``v``, or ``None`` outside ``range``.

        On a boundary shared by two sections the first section wins.
        """
        for fitted in self._sections:
            if section_contains(fitted, v):
                t = torch.as_tensor(v, dtype=fitted.x.dtype)
                return section_evaluate(fitted, t).item()

        if v in self._range:
            return curve_extrapolate(self, v).item()

        return None

    __getitem__ = get

    def __call__(self, t: Tensor) -> Tensor:
        """Vectorised ``get``; points without a value are NaN."""
        return curve_evaluate(self, t)

    def __repr__(self) -> str:
        lower, upper = self._range
        return (
            f"Curve(sections={self.sections}, range=[{lower}, {upper}], "
            f"emethod={self._extrapolation_method!r})"
        )


def curve(
    x: KeyPoints,
    y: KeyPoints,
    extrapolate: ExtrapolationOption = "0%",
    emethod: ExtrapolationMethod = "linear",
) -> Callable[[Tensor], Tensor]:
    """Create a curve interpolator from key points.

    This is a convenience function that fits a curve and returns a callable
    that evaluates it at tensors of query points.

    Examples
    --------
    >>> import torch
    >>> f = curve([0.0, 1.0, 2.0], [0.0, 1.0, 0.5], extrapolate="10%")
    >>> f(torch.tensor([-0.5, 1.0]))  # -0.5 is outside the range
    tensor([nan, 1.], dtype=torch.float64)
    """
    fitted = Curve(x, y, extrapolate=extrapolate, emethod=emethod)
    return lambda t: curve_evaluate(fitted, t)
