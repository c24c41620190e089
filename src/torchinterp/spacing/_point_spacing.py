from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import torch
from torch import Tensor

from .._construction_error import ConstructionError
from ._spacing import NonGridSpacing


@dataclass(frozen=True, eq=False)
class PointSpacing(NonGridSpacing):
    """Explicit coordinates for every point of an array.

    Parameters
    ----------
    points : Tensor
        Coordinates, shape (*data_shape, ndim) with ``ndim == len(data_shape)``.
        ``points[i, j, ...]`` is the position of ``data[i, j, ...]``.

    Notes
    -----
    Only the interface is provided: interpolators validate their data
    against it but do not evaluate scattered data.
    """

    points: Tensor

    def __post_init__(self):
        points = torch.as_tensor(self.points)
        if points.dim() < 2 or points.shape[-1] != points.dim() - 1:
            raise ConstructionError(
                "points must have shape (*data_shape, len(data_shape)), "
                f"got {tuple(points.shape)}"
            )
        object.__setattr__(self, "points", points)

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(self.points.shape[:-1])

    def __len__(self) -> int:
        return math.prod(self.shape)

    def __getitem__(self, i):
        return self.points.reshape(-1, self.ndim)[i]

    def to_tensor(self) -> Tensor:
        return self.points
