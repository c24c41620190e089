"""Shared construction and query handling for interpolators."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import torch
from torch import Tensor

from .._evaluation_error import EvaluationError
from ..spacing import GridSpacing, NonGridSpacing, Spacing, UnitSpacing
from ._size_mismatch_error import SizeMismatchError

SpacingLike = Union[Spacing, Sequence[GridSpacing], None]


class Interpolator:
    """
    Base class for interpolators over gridded data.

    Parameters
    ----------
    data : Tensor
        Samples, shape (n_0, ..., n_{N-1}). Tensors are used as-is (not
        copied), so gradients flow from ``data`` to interpolated values.
    spacing : Spacing or sequence of GridSpacing, optional
        Positions of the samples. One ``GridSpacing`` per dimension, a single
        ``GridSpacing`` for 1-D data, or a ``NonGridSpacing`` matching the
        data shape. Defaults to ``UnitSpacing(0, n_d - 1)`` per dimension.

    Raises
    ------
    SizeMismatchError
        If the spacing does not match the shape of ``data``.
    """

    def __init__(self, data: Tensor, spacing: SpacingLike = None):
        data = torch.as_tensor(data)
        if data.dim() == 0:
            raise SizeMismatchError("data must have at least one dimension")
        if data.numel() == 0:
            raise SizeMismatchError("data must not be empty")

        self._data = data
        self._spacing = _validate_spacing(data, spacing)

    @property
    def data(self) -> Tensor:
        return self._data

    @property
    def spacing(self) -> Union[Tuple[GridSpacing, ...], NonGridSpacing]:
        return self._spacing

    @property
    def ndim(self) -> int:
        return self._data.dim()

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(self._data.shape)

    @property
    def is_grid(self) -> bool:
        return not isinstance(self._spacing, NonGridSpacing)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self.shape}, "
            f"dtype={self._data.dtype}, spacing={self._spacing})"
        )

    def _coordinates(self, position) -> Tuple[Tensor, ...]:
        """Validate and broadcast one query coordinate per dimension."""
        if not self.is_grid:
            raise NotImplementedError(
                f"{type(self).__name__} does not interpolate non-grid data"
            )
        if len(position) != self.ndim:
            raise EvaluationError(
                f"expected {self.ndim} coordinate(s), got {len(position)}"
            )

        coordinates = []
        for p, spacing in zip(position, self._spacing):
            if isinstance(p, Tensor):
                p = p.to(device=self._data.device)
            else:
                p = torch.as_tensor(
                    p, dtype=self._query_dtype(), device=self._data.device
                )
            if not p.is_floating_point():
                p = p.to(torch.float64)
            # offsets and brackets are computed in this dtype
            coordinates.append(p.to(torch.promote_types(p.dtype, spacing.dtype)))

        return tuple(torch.broadcast_tensors(*coordinates))

    def _query_dtype(self) -> torch.dtype:
        """Floating dtype for coordinates given as Python numbers or lists."""
        dtype = torch.get_default_dtype()
        if self._data.is_complex():
            return torch.promote_types(dtype, self._data.real.dtype)
        if self._data.is_floating_point():
            return torch.promote_types(dtype, self._data.dtype)
        return dtype


def _validate_spacing(data: Tensor, spacing: SpacingLike):
    shape = tuple(data.shape)

    if spacing is None:
        return tuple(UnitSpacing.from_length(n) for n in shape)

    if isinstance(spacing, NonGridSpacing):
        if spacing.shape != shape:
            raise SizeMismatchError(
                f"size mismatch: spacing describes shape {spacing.shape}, "
                f"data has shape {shape}"
            )
        return spacing

    if isinstance(spacing, GridSpacing):
        spacing = (spacing,)
    spacing = tuple(spacing)

    if len(spacing) != len(shape):
        raise SizeMismatchError(
            f"size mismatch: got {len(spacing)} spacing(s) for "
            f"{len(shape)}-dimensional data"
        )
    for dim, (s, n) in enumerate(zip(spacing, shape)):
        if not isinstance(s, GridSpacing):
            raise TypeError(
                f"spacing for dimension {dim} must be a GridSpacing, "
                f"got {type(s).__name__}"
            )
        if len(s) != n:
            raise SizeMismatchError(
                f"size mismatch: spacing for dimension {dim} has {len(s)} "
                f"positions, data has {n} samples"
            )

    return spacing
