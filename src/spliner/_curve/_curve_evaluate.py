from __future__ import annotations

import math
from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._section import section_evaluate
from ._curve_extrapolate import curve_extrapolate

if TYPE_CHECKING:
    from ._curve import Curve


def curve_evaluate(
    curve: Curve,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a curve at query points.

    Each point is answered by the first section whose closed x-range
    contains it, otherwise extrapolated if it lies inside ``curve.range``.
    Points outside the range have no value and come back as NaN.

    Parameters
    ----------
    curve : Curve
        Fitted curve.
    t : Tensor
        Query points, shape (*query_shape) or scalar.

    Returns
    -------
    Tensor
        Values, shape (*query_shape).
    """
    sections = curve.fitted_sections
    dtype = sections[0].y.dtype
    device = sections[0].y.device

    t = torch.as_tensor(t, dtype=dtype, device=device)

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten()

    result = torch.full_like(t_flat, math.nan)
    pending = torch.ones_like(t_flat, dtype=torch.bool)

    for section in sections:
        mask = pending & (t_flat >= section.x[0]) & (t_flat <= section.x[-1])
        if torch.any(mask):
            result = result.masked_scatter(
                mask, section_evaluate(section, t_flat[mask])
            )
            pending = pending & ~mask

    lower, upper = curve.range
    outside = pending & (t_flat >= lower) & (t_flat <= upper)
    if torch.any(outside):
        result = result.masked_scatter(
            outside, curve_extrapolate(curve, t_flat[outside])
        )

    result = result.view(*query_shape)

    if is_scalar:
        result = result.squeeze(0)

    return result
