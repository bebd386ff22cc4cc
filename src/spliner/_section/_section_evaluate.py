"""Section evaluation using cubic Hermite basis functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError

if TYPE_CHECKING:
    from ._section import Section


def section_contains(section: Section, v) -> bool:
    """Whether ``v`` lies in the closed interval ``[x[0], x[-1]]``."""
    return bool(section.x[0] <= v) and bool(v <= section.x[-1])


def _locate(
    section: Section,
    t: Tensor,
) -> Tuple[Tensor, Tensor, Tensor, torch.Size, bool]:
    """Flatten queries and find the segment owning each one.

    Returns the segment indices, segment widths, normalized positions
    u in [0, 1], the original query shape and whether the query was scalar.
    """
    knots = section.x

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten().to(knots.dtype)

    t_min = knots[0]
    t_max = knots[-1]

    if torch.any(t_flat < t_min) or torch.any(t_flat > t_max):
        raise ExtrapolationError(
            f"Query points outside section domain [{t_min.item()}, {t_max.item()}]"
        )

    # knots[i] <= t < knots[i+1]; the right end belongs to the last segment
    segment_idx = torch.searchsorted(knots, t_flat, right=True) - 1
    n_segments = len(knots) - 1
    segment_idx = torch.clamp(segment_idx, 0, n_segments - 1)

    x_i = knots[segment_idx]
    h = knots[segment_idx + 1] - x_i
    u = (t_flat - x_i) / h

    return segment_idx, h, u, query_shape, is_scalar


def section_evaluate(
    section: Section,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a section at query points.

    The cubic Hermite basis functions for u in [0, 1] are:
    - H_00(u) = 2u^3 - 3u^2 + 1  -- value at left endpoint
    - H_10(u) = u^3 - 2u^2 + u   -- slope at left endpoint
    - H_01(u) = -2u^3 + 3u^2     -- value at right endpoint
    - H_11(u) = u^3 - u^2        -- slope at right endpoint

    On segment [x_i, x_{i+1}] with h = x_{i+1} - x_i and u = (t - x_i) / h:
    p(t) = H_00*y_i + H_10*h*k_i + H_01*y_{i+1} + H_11*h*k_{i+1}

    Parameters
    ----------
    section : Section
        Fitted section from section_fit
    t : Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape)

    Raises
    ------
    ExtrapolationError
        If any query point is outside ``[x[0], x[-1]]``.
    """
    segment_idx, h, u, query_shape, is_scalar = _locate(section, t)

    y_i = section.y[segment_idx]
    y_ip1 = section.y[segment_idx + 1]
    k_i = section.k[segment_idx]
    k_ip1 = section.k[segment_idx + 1]

    u2 = u * u
    u3 = u2 * u

    h_00 = 2 * u3 - 3 * u2 + 1
    h_10 = u3 - 2 * u2 + u
    h_01 = -2 * u3 + 3 * u2
    h_11 = u3 - u2

    y = h_00 * y_i + h_10 * h * k_i + h_01 * y_ip1 + h_11 * h * k_ip1

    y = y.view(*query_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y
