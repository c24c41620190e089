"""Multilinear interpolation."""

import torch
from torch import Tensor

from .._interpolator import Interpolator
from .._separable import collapse_window, gather_window
from ._find_neighbors import find_neighbors


class LinearInterpolator(Interpolator):
    """
    Linear (multilinear for N-D data) interpolator.

    Parameters
    ----------
    data : Tensor
        Samples, shape (n_0, ..., n_{N-1}).
    spacing : GridSpacing or sequence of GridSpacing, optional
        Positions of the samples, one spacing per dimension. Defaults to
        unit spacing starting at 0, i.e. positions equal indices.

    Notes
    -----
    Along each dimension the two bracketing samples are blended with the line

    .. math::
        y = \\frac{y_1 - y_0}{x_1 - x_0} (x - x_0) + y_0

    written as ``(1 - t) y_0 + t y_1`` with ``t = (x - x_0) / (x_1 - x_0)`` so
    that samples are reproduced exactly at their own positions. Dimension 0
    is collapsed first, then dimension 1 on the reduced values, and so on.

    Outside the data range the first or last interval is extended linearly.
    A zero-width interval (a dimension of length one, or repeated end
    positions) evaluates to its lower sample.

    Fully differentiable with respect to ``data`` and the query coordinates.

    Examples
    --------
    >>> import torch
    >>> from torchinterp.spacing import UnitSpacing
    >>> f = LinearInterpolator(torch.tensor([0.0, 10.0, 20.0]), UnitSpacing(1, 3))
    >>> f(1.5)
    tensor(5.)
    """

    def __call__(self, *position) -> Tensor:
        """
        Linearly interpolate the data at the given position.

        Parameters
        ----------
        *position : float or Tensor
            One coordinate per dimension, broadcast together.

        Returns
        -------
        Tensor
            Interpolated values with the broadcast shape of the coordinates.
        """
        coordinates = self._coordinates(position)

        indices = []
        weights = []
        for spacing, x in zip(self.spacing, coordinates):
            lower, upper = find_neighbors(spacing, x)
            x0 = spacing.positions(lower).to(x.dtype)
            x1 = spacing.positions(upper).to(x.dtype)

            width = x1 - x0
            degenerate = width == 0
            t = (x - x0) / torch.where(degenerate, torch.ones_like(width), width)
            t = torch.where(degenerate, torch.zeros_like(t), t)

            indices.append(torch.stack([lower, upper], dim=-1))
            weights.append(torch.stack([1 - t, t], dim=-1))

        values = gather_window(self.data, indices)
        return collapse_window(values, weights)
