"""Nearest-neighbor interpolation."""

from torch import Tensor

from .._interpolator import Interpolator
from ._find_closest import find_closest


class NearestInterpolator(Interpolator):
    """
    Nearest-neighbor interpolator.

    Parameters
    ----------
    data : Tensor
        Samples, shape (n_0, ..., n_{N-1}).
    spacing : GridSpacing or sequence of GridSpacing, optional
        Positions of the samples, one spacing per dimension. Defaults to
        unit spacing starting at 0, i.e. positions equal indices.

    Examples
    --------
    >>> import torch
    >>> from torchinterp.spacing import UnitSpacing
    >>> f = NearestInterpolator(torch.tensor([10, 20, 30]), UnitSpacing(1, 3))
    >>> f(1.5)
    tensor(20)
    >>> f(100.0)
    tensor(30)
    """

    def __call__(self, *position) -> Tensor:
        """
        Return the sample closest to the given position.

        Parameters
        ----------
        *position : float or Tensor
            One coordinate per dimension. Tensor coordinates are broadcast
            together and evaluated element-wise.

        Returns
        -------
        Tensor
            Values with the broadcast shape of the coordinates and the dtype
            of the data.
        """
        coordinates = self._coordinates(position)
        index = tuple(
            find_closest(s, p) for s, p in zip(self.spacing, coordinates)
        )
        return self.data[index]
