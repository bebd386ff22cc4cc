from typing import List, Tuple

import torch
from torch import Tensor


def split_at_duplicates(x: Tensor) -> List[Tuple[int, int]]:
    """
    Split key point indices into runs at duplicate x values.

    Parameters
    ----------
    x : Tensor
        Key point positions, shape (n,).

    Returns
    -------
    list of (int, int)
        Inclusive ``(first, last)`` index pairs. An equal adjacent pair
        ``x[i] == x[i+1]`` ends one run at ``i`` and starts the next at
        ``i + 1``.

    Examples
    --------
    >>> split_at_duplicates(torch.tensor([0.0, 1.0, 1.0, 2.0]))
    [(0, 1), (2, 3)]
    """
    n = x.shape[0]
    duplicates = torch.nonzero(x[1:] == x[:-1]).flatten().tolist()
    ends = [-1] + duplicates + [n - 1]
    return [(start + 1, end) for start, end in zip(ends[:-1], ends[1:])]
