from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._degenerate_input_error import DegenerateInputError
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._section import Section


def section_fit(
    x: Tensor,
    y: Tensor,
) -> Section:
    """
    Fit slopes for a run of key points with natural end conditions.

    Parameters
    ----------
    x : Tensor
        Key point positions, shape (n,). Must be strictly increasing.
    y : Tensor
        Key point values, shape (n,).

    Returns
    -------
    Section
        Fitted section holding ``x``, ``y`` and the slopes ``k``.

    Raises
    ------
    DegenerateInputError
        If there are fewer than 2 points or x is not strictly increasing.
    ValueError
        If x and y have different shapes.

    Notes
    -----
    With segment widths d[i] = x[i+1] - x[i] and w[i] = 1 / d[i], the slopes
    solve the tridiagonal system

        w[i-1]*k[i-1] + 2*(w[i-1] + w[i])*k[i] + w[i]*k[i+1]
            = 3*((y[i] - y[i-1])*w[i-1]^2 + (y[i+1] - y[i])*w[i]^2)

    for interior points. The first and last rows set the second derivative
    of the end segments to zero:

        2*w[0]*k[0] + w[0]*k[1] = 3*(y[1] - y[0])*w[0]^2
        w[-1]*k[-2] + 2*w[-1]*k[-1] = 3*(y[-1] - y[-2])*w[-1]^2

    References
    ----------
    https://en.wikipedia.org/wiki/Spline_interpolation
    """
    if x.dim() != 1:
        raise ValueError(f"x must be 1-D, got shape {tuple(x.shape)}")
    if y.shape != x.shape:
        raise ValueError(
            f"x and y must have same shape, got {x.shape} and {y.shape}"
        )

    n = x.shape[0]

    if n < 2:
        raise DegenerateInputError(f"Need at least 2 points, got {n}")

    d = x[1:] - x[:-1]  # (n-1,)

    if not torch.all(d > 0):
        raise DegenerateInputError("Key point x values must be strictly increasing")

    w = 1.0 / d
    r = 3.0 * (y[1:] - y[:-1]) * w * w  # (n-1,)

    zero = torch.zeros(1, dtype=w.dtype, device=w.device)

    # Each segment contributes w to both of its end points
    diag = 2.0 * (torch.cat([zero, w]) + torch.cat([w, zero]))
    upper = w
    lower = w
    rhs = torch.cat([zero, r]) + torch.cat([r, zero])

    k = solve_tridiagonal(diag, upper, lower, rhs)

    from ._section import Section

    return Section(
        x=x.clone(),
        y=y.clone(),
        k=k,
        batch_size=[],
    )
