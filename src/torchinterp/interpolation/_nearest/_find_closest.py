import torch
from torch import Tensor

from ...spacing import (
    ConstantGridSpacing,
    GridSpacing,
    VariableSpacing,
    search_last_leq,
)


def find_closest(spacing: GridSpacing, pos: Tensor) -> Tensor:
    """
    Find the index of the position closest to ``pos``. Ties round up.

    Parameters
    ----------
    spacing : GridSpacing
        Spacing to search.
    pos : Tensor
        Query positions, any shape.

    Returns
    -------
    Tensor
        ``int64`` indices in ``[0, len(spacing) - 1]``, same shape as ``pos``.

    Notes
    -----
    Queries below the first position or above the last position are clamped
    to the nearest end (constant extrapolation). When two positions are
    equally close the higher index wins; for repeated variable positions
    this means the highest index carrying the value.
    """
    pos = torch.as_tensor(pos)
    if not pos.is_floating_point():
        pos = pos.to(torch.float64)
    n = len(spacing)

    # Clamping implements extrapolation
    pos = pos.clamp(spacing.first, spacing.last)

    if isinstance(spacing, ConstantGridSpacing):
        index = _round_ties_up(spacing.offset(pos.to(torch.float64)))
        return index.clamp(0, n - 1)

    if isinstance(spacing, VariableSpacing):
        below = search_last_leq(spacing, pos).clamp(0, n - 1)
        knots = spacing.knots.to(device=pos.device)
        above = (below + 1).clamp(max=n - 1)
        # last index of a run of repeated positions
        above = search_last_leq(spacing, knots[above])
        diff_below = pos - knots[below]
        diff_above = knots[above] - pos
        return torch.where(diff_below < diff_above, below, above)

    raise TypeError(f"unsupported spacing type {type(spacing).__name__}")


def _round_ties_up(x: Tensor) -> Tensor:
    return torch.floor(x + 0.5).to(torch.int64)
