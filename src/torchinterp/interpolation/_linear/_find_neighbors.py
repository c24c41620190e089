from typing import Tuple

import torch
from torch import Tensor

from ...spacing import (
    ConstantGridSpacing,
    GridSpacing,
    VariableSpacing,
    search_last_leq,
)


def find_neighbors(spacing: GridSpacing, pos: Tensor) -> Tuple[Tensor, Tensor]:
    """
    Find the pair of adjacent positions bracketing ``pos``.

    Parameters
    ----------
    spacing : GridSpacing
        Spacing to search.
    pos : Tensor
        Query positions, any shape.

    Returns
    -------
    lower, upper : Tensor
        ``int64`` indices, same shape as ``pos``, with ``upper == lower + 1``
        (both 0 when the spacing has a single position).

    Notes
    -----
    For constant spacing the upper neighbour is ``ceil((pos - first) / step)``;
    a query exactly at ``first`` would give the pair ``[-1, 0]`` and is
    shifted to ``[0, 1]``. For variable spacing the lower neighbour is the
    last position ``<= pos``, except at or beyond the last position where the
    last two positions are used. Queries outside the range get the first or
    last pair so that they extrapolate linearly.
    """
    pos = torch.as_tensor(pos)
    if not pos.is_floating_point():
        pos = pos.to(torch.float64)
    n = len(spacing)

    if n == 1:
        zero = torch.zeros(pos.shape, dtype=torch.int64, device=pos.device)
        return zero, zero

    if isinstance(spacing, ConstantGridSpacing):
        below = torch.ceil(spacing.offset(pos.to(torch.float64)))
        below = below.clamp(-1, n).to(torch.int64)
        lower = torch.where(pos == spacing.first, below, below - 1)
    elif isinstance(spacing, VariableSpacing):
        below = search_last_leq(spacing, pos)
        lower = torch.where(below == n - 1, below - 1, below)
    else:
        raise TypeError(f"unsupported spacing type {type(spacing).__name__}")

    lower = lower.clamp(0, n - 2)
    return lower, lower + 1
