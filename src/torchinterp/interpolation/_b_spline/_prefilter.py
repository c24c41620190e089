"""Recursive B-spline prefilter."""

import operator
from typing import List, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from .._constants import IDENTITY_ORDERS, PREFILTER_CONSTANTS
from .._order_error import OrderError
from ._boundary_condition import (
    resolve_terms,
    validate_boundary_condition,
    validate_terms,
)


def prefilter(
    data: Tensor,
    order: int,
    boundary_condition: str = "zero",
    terms: Optional[int] = None,
    dim: Union[int, Sequence[int], None] = None,
) -> Tensor:
    """
    Convert samples to B-spline coefficients.

    Interpolating with a B-spline of order 2 or 3 requires coefficients
    ``c`` whose convolution with the sampled basis reproduces the samples.
    They are obtained by inverting that convolution with one causal and one
    anti-causal first-order recursive filter per dimension.

    Parameters
    ----------
    data : Tensor
        Samples. Integer data is promoted to ``float64``.
    order : int
        Spline order, 0 to 3. Orders 0 and 1 need no prefiltering and return
        a copy of the data.
    boundary_condition : str
        ``"zero"``, ``"constant"``, ``"periodic"`` or ``"mirror"``; fixes the
        initial values of the two recursions.
    terms : int, optional
        Number of terms kept in the periodic and mirror initial-value sums.
        Defaults to the smallest count reaching full precision for the dtype.
    dim : int or sequence of int, optional
        Dimensions to filter. Defaults to all dimensions.

    Returns
    -------
    Tensor
        Coefficients, same shape as ``data``.

    Raises
    ------
    OrderError
        If ``order`` has no prefilter, ``boundary_condition`` is unknown or
        ``terms`` is negative.

    Notes
    -----
    With inverse gain ``a`` and pole ``p`` the recursions are

    .. math::
        y_n = a\\,d_n + p\\,y_{n-1}, \\qquad c_n = p\\,(c_{n+1} - y_n)

    run over ``n = 1, ..., N-1`` and ``n = N-2, ..., 0``. Every line along a
    dimension is filtered at once, and the result is built without in-place
    writes so that it stays differentiable with respect to ``data``.

    For the ``"constant"`` boundary the anti-causal recursion starts from
    its steady state ``c_{N-1} = -p\\,y_{N-1} / (1 - p)`` rather than
    ``-y_{N-1} / (1 - p)``. Only the former turns constant samples into
    constant coefficients, so that the spline reproduces constant data.
    """
    order = validate_order(order)
    validate_boundary_condition(boundary_condition)

    data = torch.as_tensor(data)
    if not (data.is_floating_point() or data.is_complex()):
        data = data.to(torch.float64)

    if order in IDENTITY_ORDERS:
        if terms is not None:
            validate_terms(terms)
        return data.clone()

    ainv, p = PREFILTER_CONSTANTS[order]
    terms = resolve_terms(boundary_condition, p, terms, data.dtype)

    if dim is None:
        dims = range(data.dim())
    elif isinstance(dim, int):
        dims = (dim,)
    else:
        dims = dim

    coefficients = data
    for d in dims:
        lines = torch.movedim(coefficients, d, 0)
        lines = _filter_lines(lines, ainv, p, boundary_condition, terms)
        coefficients = torch.movedim(lines, 0, d)

    return coefficients


def validate_order(order: int) -> int:
    """Return ``order`` as an int, raising OrderError if it has no prefilter."""
    if isinstance(order, bool):
        raise OrderError(f"order must be an integer, got {order!r}")
    try:
        order = operator.index(order)
    except TypeError:
        raise OrderError(f"order must be an integer, got {order!r}") from None

    if order not in IDENTITY_ORDERS and order not in PREFILTER_CONSTANTS:
        supported = sorted(IDENTITY_ORDERS | set(PREFILTER_CONSTANTS))
        raise OrderError(
            f"no B-spline prefilter for order {order}; "
            f"supported orders are {supported}"
        )
    return order


def _filter_lines(
    data: Tensor,
    ainv: float,
    p: float,
    boundary_condition: str,
    terms: int,
) -> Tensor:
    """Run both recursions along dimension 0 of ``data``."""
    n = data.shape[0]

    causal: List[Tensor] = [
        _initial_causal(data, ainv, p, boundary_condition, terms)
    ]
    for i in range(1, n):
        causal.append(ainv * data[i] + p * causal[i - 1])

    # anti-causal pass collected last-to-first
    reversed_coefficients = [
        _initial_anticausal(causal, p, boundary_condition, terms)
    ]
    for i in range(n - 2, -1, -1):
        reversed_coefficients.append(p * (reversed_coefficients[-1] - causal[i]))

    return torch.stack(reversed_coefficients[::-1], dim=0)


def _initial_causal(
    data: Tensor,
    ainv: float,
    p: float,
    boundary_condition: str,
    terms: int,
) -> Tensor:
    n = data.shape[0]

    if boundary_condition == "zero":
        return ainv * data[0]

    if boundary_condition == "constant":
        return ainv * data[0] / (1 - p)

    if boundary_condition == "periodic":
        # d[-k] wraps to d[n - k]
        m = min(terms, n)
        return ainv * (data[0] + _power_sum(p, data, n - _steps(m, data)))

    # mirror: d[-k] reflects to d[k]
    m = min(terms, n - 1)
    return ainv * (data[0] + _power_sum(p, data, _steps(m, data)))


def _initial_anticausal(
    causal: List[Tensor],
    p: float,
    boundary_condition: str,
    terms: int,
) -> Tensor:
    """
    Starting value ``c_{N-1}`` of the anti-causal recursion.

    The ``"constant"`` value is the steady state ``-p * y_{N-1} / (1 - p)``,
    not ``-y_{N-1} / (1 - p)``: the extra factor of ``p`` is what makes
    constant samples give constant coefficients.
    """
    n = len(causal)
    last = causal[n - 1]

    if boundary_condition == "zero":
        return -p * last

    if boundary_condition == "constant":
        return -p * last / (1 - p)

    if boundary_condition == "periodic":
        # y[n - 1 + k] wraps to y[k - 1]
        m = min(terms, n)
        if m == 0:
            return -p * last
        head = torch.stack(causal[:m], dim=0)
        return -p * (last + _power_sum(p, head, _steps(m, last) - 1))

    # mirror: sum over the last min(terms + 1, n) causal values
    m = min(terms + 1, n)
    tail = torch.stack(causal[n - m :], dim=0)
    return -_power_sum(p, tail, m - _steps(m, last))


def _steps(m: int, like: Tensor) -> Tensor:
    """The integers ``1, ..., m`` on the device of ``like``."""
    return torch.arange(1, m + 1, device=like.device)


def _power_sum(p: float, values: Tensor, index: Tensor) -> Tensor:
    """``sum_k p**k * values[index[k - 1]]`` over ``k = 1, ..., len(index)``."""
    if index.numel() == 0:
        return torch.zeros_like(values[0])
    k = torch.arange(1, index.numel() + 1, device=values.device)
    powers = torch.pow(
        torch.tensor(p, dtype=torch.float64, device=values.device),
        k.to(torch.float64),
    )
    powers = powers.to(_real(values).dtype)
    powers = powers.reshape(-1, *([1] * (values.dim() - 1)))
    return (powers * values[index]).sum(dim=0)


def _real(values: Tensor) -> Tensor:
    return values.real if values.is_complex() else values


def prefilter_constants(order: int) -> Tuple[float, float]:
    """Inverse gain and pole ``(ainv, p)`` of the prefilter for ``order``."""
    order = validate_order(order)
    if order in IDENTITY_ORDERS:
        raise OrderError(f"order {order} is interpolating and has no prefilter")
    return PREFILTER_CONSTANTS[order]
