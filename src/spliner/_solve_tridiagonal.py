import torch
from torch import Tensor

from ._numeric_instability_error import NumericInstabilityError


def _pivot(value: Tensor, row: int) -> Tensor:
    if value == 0:
        raise NumericInstabilityError(
            f"Zero pivot in tridiagonal elimination at row {row}"
        )
    return value


def solve_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...  0   0 ]
        [l0  d1  u1   0  ...  0   0 ]
        [ 0  l1  d2  u2  ...  0   0 ]
        [        ...                ]
        [ 0   0   0   0  ... ln-2 dn-1]

    Parameters
    ----------
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    lower : Tensor
        Lower diagonal, shape (n-1,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Raises
    ------
    ValueError
        If the diagonals have inconsistent lengths.
    NumericInstabilityError
        If a pivot becomes zero during forward elimination.

    Notes
    -----
    No pivoting is performed, so the system should be diagonally
    dominant. The spline systems built by ``section_fit`` always are.
    """
    n = diag.shape[0]

    if n < 1:
        raise ValueError("Tridiagonal system must have at least one row")
    if upper.shape[0] != n - 1 or lower.shape[0] != n - 1:
        raise ValueError(
            f"Off-diagonals must have length {n - 1}, got "
            f"{upper.shape[0]} (upper) and {lower.shape[0]} (lower)"
        )
    if rhs.shape[-1] != n:
        raise ValueError(
            f"Right-hand side must have trailing size {n}, got {rhs.shape[-1]}"
        )

    # rhs: (*batch, n) -> (n, *batch)
    rhs_t = rhs.movedim(-1, 0)

    if n == 1:
        return (rhs_t[0] / _pivot(diag[0], 0)).unsqueeze(-1)

    # Forward elimination using lists to avoid in-place operations
    c_prime_list = []
    d_prime_list = []

    denom = _pivot(diag[0], 0)
    c_prime_list.append(upper[0] / denom)
    d_prime_list.append(rhs_t[0] / denom)

    for i in range(1, n - 1):
        denom = _pivot(diag[i] - lower[i - 1] * c_prime_list[i - 1], i)
        c_prime_list.append(upper[i] / denom)
        d_prime_list.append(
            (rhs_t[i] - lower[i - 1] * d_prime_list[i - 1]) / denom
        )

    # Last row (no upper diagonal)
    denom = _pivot(diag[n - 1] - lower[n - 2] * c_prime_list[n - 2], n - 1)
    d_prime_list.append(
        (rhs_t[n - 1] - lower[n - 2] * d_prime_list[n - 2]) / denom
    )

    x_list = [None] * n
    x_list[n - 1] = d_prime_list[n - 1]

    for i in range(n - 2, -1, -1):
        x_list[i] = d_prime_list[i] - c_prime_list[i] * x_list[i + 1]

    x = torch.stack(x_list, dim=0)

    # (n, *batch) -> (*batch, n)
    return x.movedim(0, -1)
