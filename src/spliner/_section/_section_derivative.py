"""Analytic derivatives of a fitted section."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ._section_evaluate import _locate

if TYPE_CHECKING:
    from ._section import Section


def section_derivative(
    section: Section,
    t: Tensor,
    order: int = 1,
) -> Tensor:
    """
    Evaluate the first or second derivative of a section at query points.

    Parameters
    ----------
    section : Section
        Fitted section from section_fit
    t : Tensor
        Query points, shape (*query_shape) or scalar
    order : int
        Derivative order, 1 or 2. Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape (*query_shape)

    Raises
    ------
    ValueError
        If order is not 1 or 2.
    ExtrapolationError
        If any query point is outside the section.

    Notes
    -----
    Differentiating p(t) = H_00*y_i + H_10*h*k_i + H_01*y_{i+1} + H_11*h*k_{i+1}
    with respect to t divides each basis derivative by h:

        p'(t)  = (H'_00*y_i + H'_01*y_{i+1}) / h + H'_10*k_i + H'_11*k_{i+1}
        p''(t) = (H''_00*y_i + H''_01*y_{i+1}) / h^2
                 + (H''_10*k_i + H''_11*k_{i+1}) / h

    At a key point p'(x_i) = k_i, so adjacent segments agree on the slope.
    """
    if order not in (1, 2):
        raise ValueError(f"Derivative order must be 1 or 2, got {order}")

    segment_idx, h, u, query_shape, is_scalar = _locate(section, t)

    y_i = section.y[segment_idx]
    y_ip1 = section.y[segment_idx + 1]
    k_i = section.k[segment_idx]
    k_ip1 = section.k[segment_idx + 1]

    if order == 1:
        u2 = u * u
        dh_00 = 6 * u2 - 6 * u
        dh_10 = 3 * u2 - 4 * u + 1
        dh_01 = -6 * u2 + 6 * u
        dh_11 = 3 * u2 - 2 * u

        result = (dh_00 * y_i + dh_01 * y_ip1) / h + dh_10 * k_i + dh_11 * k_ip1
    else:
        d2h_00 = 12 * u - 6
        d2h_10 = 6 * u - 4
        d2h_01 = -12 * u + 6
        d2h_11 = 6 * u - 2

        result = (d2h_00 * y_i + d2h_01 * y_ip1) / (h * h) + (
            d2h_10 * k_i + d2h_11 * k_ip1
        ) / h

    result = result.view(*query_shape)

    if is_scalar:
        result = result.squeeze(0)

    return result
