from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Union

import torch
from torch import Tensor

from ._constant_spacing import _ULP_TOLERANCE
from ._invalid_range_error import InvalidRangeError
from ._spacing import ConstantGridSpacing


@dataclass(frozen=True, repr=False)
class UnitSpacing(ConstantGridSpacing):
    """Spacing between data points is constant and equal to one.

    Parameters
    ----------
    first : int or float
        Position of the first data point.
    last : int or float
        Position of the last data point. ``last - first`` must be a
        non-negative integer, up to a few ulps of the endpoints
        for floating point values.

    Raises
    ------
    InvalidRangeError
        If ``first > last`` or ``last - first`` is not an integer.

    Examples
    --------
    >>> spacing = UnitSpacing(1, 5)
    >>> len(spacing)
    5
    >>> spacing[0], spacing[-1]
    (1, 5)
    """

    first: Union[int, float]
    last: Union[int, float]
    _nsteps: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self):
        first, last = _as_number(self.first), _as_number(self.last)
        if isinstance(first, float) or isinstance(last, float):
            first, last = float(first), float(last)

        if not first <= last:
            raise InvalidRangeError(
                f"must have first <= last, got first={first}, last={last}"
            )

        span = last - first
        if not math.isfinite(span):
            raise InvalidRangeError(f"first and last must be finite, got {span}")
        nsteps = round(span)
        if isinstance(span, float):
            tolerance = (
                _ULP_TOLERANCE * math.ulp(1.0) * max(abs(first), abs(last), span)
            )
        else:
            tolerance = 0
        if abs(span - nsteps) > tolerance:
            raise InvalidRangeError(
                f"difference between last and first must be an integer, "
                f"got {span}"
            )

        object.__setattr__(self, "first", first)
        object.__setattr__(self, "last", last)
        object.__setattr__(self, "_nsteps", nsteps)

    @classmethod
    def from_length(cls, n: int, first: Union[int, float] = 0) -> UnitSpacing:
        """Unit spacing with ``n`` positions starting at ``first``."""
        if n < 1:
            raise InvalidRangeError(f"need at least one position, got {n}")
        return cls(first, first + n - 1)

    @property
    def step(self) -> int:
        return 1

    @property
    def dtype(self) -> torch.dtype:
        if isinstance(self.first, int):
            return torch.int64
        return torch.float64

    def __len__(self) -> int:
        return self._nsteps + 1

    def __str__(self) -> str:
        return f"{self.first}:{self.last}"

    def _position(self, i: int) -> Union[int, float]:
        return self.first + i

    def positions(self, indices: Union[Tensor, Sequence[int]]) -> Tensor:
        indices = torch.as_tensor(indices)
        return indices.to(self.dtype) + self.first


def _as_number(value):
    if isinstance(value, Tensor):
        return value.item()
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    return float(value)
