from typing import Sequence

import torch
from torch import Tensor

from ...spacing import ConstantGridSpacing, GridSpacing, VariableSpacing
from .._linear._find_neighbors import find_neighbors
from .._separable import collapse_window, gather_window
from ._b_spline_coefficients import BSplineCoefficients
from ._b_spline_kernel import b_spline_kernel
from ._boundary_condition import extend_indices


def b_spline_evaluate(
    coefficients: BSplineCoefficients,
    spacing: Sequence[GridSpacing],
    *coordinates: Tensor,
) -> Tensor:
    """
    Evaluate a tensor-product B-spline at query coordinates.

    Parameters
    ----------
    coefficients : BSplineCoefficients
        Prefiltered coefficients.
    spacing : sequence of GridSpacing
        Positions of the samples, one per dimension.
    *coordinates : Tensor
        One coordinate tensor per dimension, all of the same shape.

    Returns
    -------
    Tensor
        Spline values, same shape as the coordinates.

    Notes
    -----
    Each coordinate is mapped to a fractional sample index ``u``. The
    ``order + 1`` coefficients from ``floor(u - (order - 1) / 2)`` onwards
    carry the nonzero basis weights; indices past either end are folded
    back according to the boundary condition.
    """
    c = coefficients.coefficients
    order = coefficients.order
    boundary_condition = coefficients.boundary_condition

    indices = []
    weights = []
    for d, (s, x) in enumerate(zip(spacing, coordinates)):
        n = c.shape[d]
        u = fractional_index(s, x)

        first = torch.floor(u - (order - 1) / 2).to(torch.int64)
        window = first.unsqueeze(-1) + torch.arange(order + 1, device=u.device)
        weight = b_spline_kernel(u.unsqueeze(-1) - window.to(u.dtype), order)

        window, inside = extend_indices(window, n, boundary_condition)
        if inside is not None:
            weight = weight * inside.to(weight.dtype)

        indices.append(window)
        weights.append(weight)

    return collapse_window(gather_window(c, indices), weights)


def fractional_index(spacing: GridSpacing, x: Tensor) -> Tensor:
    """
    Map positions to fractional sample indices.

    Exact for unit and constant spacing. For variable spacing the map is
    piecewise linear between knots and continues the first and last
    intervals beyond the ends.
    """
    x = x.to(torch.promote_types(x.dtype, spacing.dtype))

    if isinstance(spacing, ConstantGridSpacing):
        return spacing.offset(x)

    if isinstance(spacing, VariableSpacing):
        if len(spacing) == 1:
            return torch.zeros_like(x)
        lower, upper = find_neighbors(spacing, x)
        x0 = spacing.positions(lower).to(x.dtype)
        x1 = spacing.positions(upper).to(x.dtype)
        width = x1 - x0
        degenerate = width == 0
        t = (x - x0) / torch.where(degenerate, torch.ones_like(width), width)
        t = torch.where(degenerate, torch.zeros_like(t), t)
        return lower.to(x.dtype) + t

    raise TypeError(f"unsupported spacing type {type(spacing).__name__}")
