import math
import operator
from dataclasses import InitVar, dataclass, field
from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from ._invalid_range_error import InvalidRangeError
from ._spacing import ConstantGridSpacing
from ._twice_precision import fused_position, two_product, two_sum

# Allowed mismatch, in units of float64 epsilon relative to the magnitude of
# the endpoints, between ``last - first`` and a whole number of steps.
_ULP_TOLERANCE = 4


@dataclass(frozen=True, repr=False)
class ConstantSpacing(ConstantGridSpacing):
    """Spacing between data points is constant.

    Give either ``step`` or ``nsteps``.

    Parameters
    ----------
    first : float
        Position of the first data point.
    last : float
        Position of the last data point.
    step : float, optional
        Distance between adjacent data points. ``last - first`` must be a
        multiple of ``step`` (up to a few ulps of round-off).
    nsteps : int, optional
        Number of intervals between ``first`` and ``last``; the step is then
        ``(last - first) / nsteps``.

    Raises
    ------
    InvalidRangeError
        If ``first > last``, the step is not positive, or the span is not a
        multiple of the step.

    Notes
    -----
    Positions are computed as ``first + i * step`` in double-double
    arithmetic. The rounding error of ``step`` is kept in a low-order word so
    that the last computed position equals ``last`` exactly:

    >>> spacing = ConstantSpacing(0.0, 0.3, 0.1)
    >>> spacing[-1] == 0.3
    True
    >>> 0.0 + 3 * 0.1 == 0.3
    False
    """

    first: float
    last: float
    step: Optional[float] = None
    nsteps: InitVar[Optional[int]] = None
    _step_lo: float = field(default=0.0, init=False, repr=False, compare=False)
    _nsteps: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self, nsteps):
        first, last = float(self.first), float(self.last)
        if not first <= last:
            raise InvalidRangeError(
                f"must have first <= last, got first={first}, last={last}"
            )

        if nsteps is not None:
            if self.step is not None:
                raise TypeError("give either step or nsteps, not both")
            nsteps = operator.index(nsteps)
            if nsteps < 1:
                raise InvalidRangeError(
                    f"nsteps must be positive, got {nsteps}"
                )
            step = (last - first) / nsteps
        elif self.step is None:
            raise TypeError("either step or nsteps must be given")
        else:
            step = float(self.step)

        if not step > 0:
            raise InvalidRangeError(f"step must be positive, got {step}")

        span, span_err = two_sum(last, -first)
        if nsteps is None:
            nsteps = round(span / step)
            tolerance = (
                _ULP_TOLERANCE
                * math.ulp(1.0)
                * max(abs(first), abs(last), span)
            )
            if abs(nsteps * step - span) > tolerance:
                raise InvalidRangeError(
                    f"difference between last and first ({span}) must be a "
                    f"multiple of step ({step})"
                )

        step_lo = 0.0
        if nsteps > 0:
            prod, prod_err = two_product(float(nsteps), step)
            step_lo = ((span - prod) + (span_err - prod_err)) / nsteps

        object.__setattr__(self, "first", first)
        object.__setattr__(self, "last", last)
        object.__setattr__(self, "step", step)
        object.__setattr__(self, "_step_lo", step_lo)
        object.__setattr__(self, "_nsteps", nsteps)

    @classmethod
    def from_tensor(cls, positions: Tensor) -> "ConstantSpacing":
        """Build from a 1-D tensor of evenly spaced positions."""
        positions = torch.as_tensor(positions, dtype=torch.float64)
        if positions.dim() != 1 or positions.numel() == 0:
            raise InvalidRangeError(
                "positions must be a non-empty 1-D tensor, "
                f"got shape {tuple(positions.shape)}"
            )
        if positions.numel() == 1:
            value = positions.item()
            return cls(value, value, 1.0)

        spacing = cls(
            positions[0].item(),
            positions[-1].item(),
            nsteps=positions.numel() - 1,
        )
        if not torch.allclose(positions, spacing.to_tensor()):
            raise InvalidRangeError("positions are not evenly spaced")
        return spacing

    @property
    def dtype(self) -> torch.dtype:
        return torch.float64

    def __len__(self) -> int:
        return self._nsteps + 1

    def __str__(self) -> str:
        return f"{self.first}:{self.step}:{self.last}"

    def _position(self, i: int) -> float:
        return fused_position(self.first, self.step, self._step_lo, float(i))

    def positions(self, indices: Union[Tensor, Sequence[int]]) -> Tensor:
        indices = torch.as_tensor(indices).to(torch.float64)
        return fused_position(self.first, self.step, self._step_lo, indices)
