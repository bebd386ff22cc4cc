"""One strictly increasing run of key points."""

from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._section_evaluate import section_evaluate
from ._section_fit import section_fit


@tensorclass
class Section:
    """Cubic Hermite interpolant over a strictly increasing run of points.

    Attributes
    ----------
    x : Tensor
        Key point positions, shape (n,). Strictly increasing, n >= 2.
    y : Tensor
        Key point values, shape (n,).
    k : Tensor
        Fitted slope at each key point, shape (n,). Chosen so the curve is
        continuous in value and first derivative with zero second
        derivative at both ends.
    """

    x: Tensor
    y: Tensor
    k: Tensor


def section(
    x: torch.Tensor,
    y: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Fit a section and return a callable that evaluates it.

    Examples
    --------
    >>> import torch
    >>> f = section(torch.tensor([0.0, 1.0, 2.0]), torch.tensor([0.0, 1.0, 0.5]))
    >>> f(torch.tensor(1.0))
    tensor(1.)
    """
    fitted = section_fit(x, y)
    return lambda t: section_evaluate(fitted, t)
