from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import torch
from torch import Tensor

from .._construction_error import ConstructionError
from ._spacing import GridSpacing
from ._unsorted_input_error import UnsortedInputError


@dataclass(frozen=True, eq=False, repr=False)
class VariableSpacing(GridSpacing):
    """Spacing between data points is not constant.

    Parameters
    ----------
    knots : Tensor
        Positions of the data points, shape (n,). Must be non-decreasing.
        Repeated positions are allowed; searches resolve them to the highest
        index carrying the repeated value.

    Raises
    ------
    UnsortedInputError
        If ``knots`` is not non-decreasing (this includes NaN entries).
    ConstructionError
        If ``knots`` is not a non-empty 1-D tensor.
    """

    knots: Tensor

    def __post_init__(self):
        knots = torch.as_tensor(self.knots)
        if knots.dim() != 1 or knots.numel() == 0:
            raise ConstructionError(
                "positions must be a non-empty 1-D tensor, "
                f"got shape {tuple(knots.shape)}"
            )
        if torch.isnan(knots).any() or not torch.all(knots[1:] >= knots[:-1]):
            raise UnsortedInputError("position vector must be sorted")
        object.__setattr__(self, "knots", knots)

    @property
    def first(self) -> Union[int, float]:
        return self.knots[0].item()

    @property
    def last(self) -> Union[int, float]:
        return self.knots[-1].item()

    @property
    def dtype(self) -> torch.dtype:
        return self.knots.dtype

    def __len__(self) -> int:
        return self.knots.shape[0]

    def __str__(self) -> str:
        return str(self.knots.tolist())

    def _position(self, i: int) -> Union[int, float]:
        return self.knots[i].item()

    def positions(self, indices: Union[Tensor, Sequence[int]]) -> Tensor:
        indices = torch.as_tensor(indices, device=self.knots.device)
        return self.knots[indices]

    def to_tensor(self) -> Tensor:
        return self.knots
