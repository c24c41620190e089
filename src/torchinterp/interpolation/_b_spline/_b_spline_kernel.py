import torch
from torch import Tensor

from .._order_error import OrderError


def b_spline_kernel(t: Tensor, order: int) -> Tensor:
    """
    Centred B-spline basis function of the given order.

    Parameters
    ----------
    t : Tensor
        Offsets from the centre of the basis function, in samples.
    order : int
        Spline order, 0 to 3.

    Returns
    -------
    Tensor
        Basis values, same shape as ``t``.

    Notes
    -----
    The order-0 box is taken half-open on ``[-1/2, 1/2)`` so that a query
    halfway between two samples takes the upper one.

    .. math::
        \\beta^1(t) = \\max(1 - |t|, 0)

    .. math::
        \\beta^2(t) = \\begin{cases}
            3/4 - t^2 & |t| < 1/2 \\\\
            (3/2 - |t|)^2 / 2 & 1/2 \\le |t| < 3/2
        \\end{cases}

    .. math::
        \\beta^3(t) = \\begin{cases}
            2/3 - t^2 + |t|^3 / 2 & |t| < 1 \\\\
            (2 - |t|)^3 / 6 & 1 \\le |t| < 2
        \\end{cases}
    """
    zero = torch.zeros_like(t)

    if order == 0:
        return torch.where((t >= -0.5) & (t < 0.5), torch.ones_like(t), zero)

    a = t.abs()

    if order == 1:
        return torch.clamp(1 - a, min=0)

    if order == 2:
        outer = torch.where(a < 1.5, 0.5 * (1.5 - a) ** 2, zero)
        return torch.where(a < 0.5, 0.75 - a**2, outer)

    if order == 3:
        outer = torch.where(a < 2, (2 - a) ** 3 / 6, zero)
        return torch.where(a < 1, 2 / 3 - a**2 + a**3 / 2, outer)

    raise OrderError(f"no B-spline kernel for order {order}")
