"""Separable evaluation over a window of samples around each query."""

from typing import Sequence

import torch
from torch import Tensor


def gather_window(data: Tensor, indices: Sequence[Tensor]) -> Tensor:
    """
    Gather the samples at the outer product of per-dimension index windows.

    Parameters
    ----------
    data : Tensor
        Samples, shape (n_0, ..., n_{N-1}).
    indices : sequence of Tensor
        One tensor per dimension, shape (*query_shape, k_d), holding valid
        indices into that dimension.

    Returns
    -------
    Tensor
        Window values, shape (*query_shape, k_0, ..., k_{N-1}).
    """
    ndim = len(indices)
    expanded = []
    for d, index in enumerate(indices):
        window_shape = [1] * ndim
        window_shape[d] = index.shape[-1]
        expanded.append(index.reshape(*index.shape[:-1], *window_shape))
    return data[tuple(expanded)]


def collapse_window(values: Tensor, weights: Sequence[Tensor]) -> Tensor:
    """
    Reduce a window of samples to one value per query, one dimension at a time.

    Dimension 0 is blended first for every combination of the remaining
    dimensions, leaving an (N-1)-dimensional problem, until one value
    remains.

    Parameters
    ----------
    values : Tensor
        Window values, shape (*query_shape, k_0, ..., k_{N-1}).
    weights : sequence of Tensor
        Per-dimension weights, shape (*query_shape, k_d).

    Returns
    -------
    Tensor
        Weighted sums, shape (*query_shape).
    """
    ndim = len(weights)
    query_dims = values.dim() - ndim
    value_dtype, weight_dtype = _result_dtypes(values.dtype, weights[0].dtype)
    values = values.to(value_dtype)

    for d, weight in enumerate(weights):
        remaining = ndim - d - 1
        weight = weight.to(weight_dtype)
        weight = weight.reshape(*weight.shape, *([1] * remaining))
        values = (values * weight).sum(dim=query_dims)

    return values


def _result_dtypes(data_dtype: torch.dtype, weight_dtype: torch.dtype):
    if data_dtype.is_floating_point:
        return data_dtype, data_dtype
    if data_dtype.is_complex:
        return data_dtype, torch.empty((), dtype=data_dtype).real.dtype
    return weight_dtype, weight_dtype
