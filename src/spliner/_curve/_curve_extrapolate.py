from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._curve import Curve


def curve_extrapolate(
    curve: Curve,
    t: Tensor,
) -> Tensor:
    """
    Extend a curve beyond its first or last key point.

    Points below the first key point are anchored on the first point of the
    first section; all others on the last point of the last section. The
    ``"hold"`` method returns the anchor's y value, ``"linear"`` follows the
    tangent line ``y + k * (t - x)`` through the anchor.

    Parameters
    ----------
    curve : Curve
        Fitted curve.
    t : Tensor
        Query points, any shape. Not checked against ``curve.range``.

    Returns
    -------
    Tensor
        Extrapolated values, same shape as ``t``.
    """
    first = curve.fitted_sections[0]
    last = curve.fitted_sections[-1]

    t = torch.as_tensor(t, dtype=first.y.dtype, device=first.y.device)
    below = t < first.x[0]

    y = torch.where(below, first.y[0], last.y[-1])

    if curve.extrapolation_method == "hold":
        return y

    x = torch.where(below, first.x[0], last.x[-1])
    k = torch.where(below, first.k[0], last.k[-1])

    return y + k * (t - x)
