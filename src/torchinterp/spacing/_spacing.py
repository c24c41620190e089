"""Abstract spacing types.

A spacing describes the positions associated with the samples of an array.
Grid spacings describe a single dimension of a separable grid; non-grid
spacings describe every point of an array at once.
"""

from __future__ import annotations

import abc
import operator
from collections.abc import Sequence
from typing import Tuple, Union

import torch
from torch import Tensor


class Spacing(Sequence):
    """Read-only, indexable sequence of sample positions."""

    @abc.abstractmethod
    def to_tensor(self) -> Tensor:
        """Return every position as a tensor."""


class GridSpacing(Spacing):
    """Positions of the samples along one dimension of a grid.

    Subclasses provide ``first``, ``last``, ``dtype``, ``__len__``,
    :meth:`positions` and :meth:`_position`. Indexing is 0-based and negative
    indices count from the end, as for any Python sequence.
    """

    @property
    @abc.abstractmethod
    def dtype(self) -> torch.dtype:
        """Data type of the positions."""

    @abc.abstractmethod
    def positions(self, indices: Union[Tensor, Sequence[int]]) -> Tensor:
        """Look up the positions at a tensor of indices."""

    @abc.abstractmethod
    def _position(self, i: int) -> Union[int, float]:
        """Position at a validated, non-negative index."""

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [self._position(j) for j in range(*i.indices(len(self)))]
        if isinstance(i, Tensor) and i.dim() > 0:
            return self.positions(i)

        i = operator.index(i)
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(
                f"index {i} out of range for {type(self).__name__} "
                f"of length {n}"
            )
        return self._position(i)

    def to_tensor(self) -> Tensor:
        return self.positions(torch.arange(len(self)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class ConstantGridSpacing(GridSpacing):
    """Equally spaced positions ``first + i * step``."""

    @property
    @abc.abstractmethod
    def step(self) -> Union[int, float]:
        """Distance between adjacent positions."""

    def offset(self, pos: Tensor) -> Tensor:
        """Fractional index of ``pos``, i.e. ``(pos - first) / step``."""
        return (pos - self.first) / self.step


class NonGridSpacing(Spacing):
    """Positions of data points that do not lie on a separable grid."""

    @property
    @abc.abstractmethod
    def shape(self) -> Tuple[int, ...]:
        """Shape of the data the positions belong to."""

    @property
    def ndim(self) -> int:
        """Number of spatial dimensions."""
        return len(self.shape)
