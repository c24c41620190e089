import torch
from torch import Tensor

from ._spacing import ConstantGridSpacing, GridSpacing
from ._variable_spacing import VariableSpacing


def search_last_leq(spacing: GridSpacing, pos: Tensor) -> Tensor:
    """
    Find the index of the last position less than or equal to ``pos``.

    Parameters
    ----------
    spacing : GridSpacing
        Spacing to search.
    pos : Tensor
        Query positions, any shape.

    Returns
    -------
    Tensor
        ``int64`` indices, same shape as ``pos``, in ``[-1, len(spacing) - 1]``.
        ``-1`` means ``pos`` lies below every position. For repeated
        positions the highest index carrying the value is returned.
    """
    pos = torch.as_tensor(pos)
    n = len(spacing)

    if isinstance(spacing, VariableSpacing):
        dtype = torch.promote_types(spacing.dtype, pos.dtype)
        knots = spacing.knots.to(device=pos.device, dtype=dtype)
        values = pos.to(dtype).contiguous()
        return torch.searchsorted(knots, values, right=True) - 1

    if isinstance(spacing, ConstantGridSpacing):
        offset = spacing.offset(pos.to(torch.float64))
        index = torch.floor(offset).clamp(-1, n - 1).to(torch.int64)
        # Correct round-off in the offset against the exact position law
        index = index + (spacing.positions(index + 1) <= pos).to(torch.int64)
        index = index - (spacing.positions(index) > pos).to(torch.int64)
        return index.clamp(-1, n - 1)

    raise TypeError(f"unsupported spacing type {type(spacing).__name__}")
