"""Extrapolation range and method options."""

import math
import numbers
import re
import warnings
from typing import Literal, NamedTuple, Optional, Union

import torch
from torch import Tensor

from ._configuration_error import ConfigurationError
from ._extrapolation_range_warning import ExtrapolationRangeWarning

ExtrapolationMethod = Literal["linear", "hold"]

EXTRAPOLATION_METHODS = ("linear", "hold")

_PERCENTAGE = re.compile(r"(\d+(?:\.\d+)?)\s*%")


class Percentage(NamedTuple):
    """Extrapolation margin as a percentage of the key point x-span.

    Parameters
    ----------
    value : float
        Margin added on each side, in percent. ``Percentage(10.0)`` over an
        x-span of 2.0 extends the range by 0.2 at both ends.
    """

    value: float


class Interval(NamedTuple):
    """Closed interval ``[lower, upper]``, empty when ``lower > upper``."""

    lower: float
    upper: float

    def __contains__(self, v) -> bool:
        return self.lower <= v <= self.upper


ExtrapolationOption = Union[None, str, Percentage, Interval, tuple, list]


def _is_real(value) -> bool:
    if isinstance(value, Tensor):
        return (
            value.dim() == 0
            and not value.is_complex()
            and value.dtype != torch.bool
        )
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def parse_extrapolate(
    option: ExtrapolationOption,
) -> Optional[Union[Percentage, Interval]]:
    """
    Normalize the ``extrapolate`` option into a closed option type.

    Parameters
    ----------
    option : None, str, Percentage, Interval or 2-sequence of numbers
        ``None`` for no margin, a percentage string such as ``"10%"`` or
        ``"2.5 %"``, or an explicit ``(lower, upper)`` interval.

    Returns
    -------
    Percentage, Interval or None

    Raises
    ------
    ConfigurationError
        If the option has any other form, or a percentage is negative or
        not finite. A reversed interval is kept as given and is empty.
    """
    if option is None:
        return None

    if isinstance(option, Percentage):
        value = float(option.value)
        if not math.isfinite(value) or value < 0:
            raise ConfigurationError(
                f"Extrapolation percentage must be finite and non-negative, got {option.value}"
            )
        return Percentage(value)

    if isinstance(option, str):
        match = _PERCENTAGE.fullmatch(option)
        if match is None:
            raise ConfigurationError(
                f"Unable to use extrapolation parameter {option!r}"
            )
        return Percentage(float(match.group(1)))

    if isinstance(option, (Interval, tuple, list)):
        if len(option) != 2 or not all(_is_real(v) for v in option):
            raise ConfigurationError(
                f"Extrapolation interval must be two numbers, got {option!r}"
            )
        lower, upper = (float(v) for v in option)
        return Interval(lower, upper)

    raise ConfigurationError(
        f"Unable to use extrapolation parameter {option!r}"
    )


def resolve_range(
    x_first: float,
    x_last: float,
    option: ExtrapolationOption,
) -> Interval:
    """
    Resolve the interval over which a curve may be evaluated.

    Parameters
    ----------
    x_first, x_last : float
        First and last key point x values.
    option : see ``parse_extrapolate``

    Returns
    -------
    Interval
        ``[x_first, x_last]`` without a margin, widened on both sides by a
        percentage of ``x_last - x_first``, or an explicit interval as given.

    Warns
    -----
    ExtrapolationRangeWarning
        If an explicit interval does not cover ``[x_first, x_last]``.
    """
    parsed = parse_extrapolate(option)

    if parsed is None:
        return Interval(x_first, x_last)

    if isinstance(parsed, Percentage):
        extra = (x_last - x_first) * parsed.value * 0.01
        return Interval(x_first - extra, x_last + extra)

    if parsed.lower > x_first or parsed.upper < x_last:
        warnings.warn(
            f"Extrapolation interval [{parsed.lower}, {parsed.upper}] does not "
            f"cover the key points [{x_first}, {x_last}]. "
            f"Queries inside a section are still answered.",
            ExtrapolationRangeWarning,
        )
    return parsed


def check_extrapolation_method(method: str) -> ExtrapolationMethod:
    """Validate ``emethod``, raising ``ConfigurationError`` if unknown."""
    if method not in EXTRAPOLATION_METHODS:
        raise ConfigurationError(
            f"Unknown extrapolation method {method!r}, expected one of "
            f"{', '.join(EXTRAPOLATION_METHODS)}"
        )
    return method
