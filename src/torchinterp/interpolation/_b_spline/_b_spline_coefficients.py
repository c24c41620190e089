from typing import Optional

from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._constants import IDENTITY_ORDERS, PREFILTER_CONSTANTS
from ._boundary_condition import resolve_terms, validate_terms
from ._prefilter import prefilter, validate_order


@tensorclass
class BSplineCoefficients:
    """Prefiltered B-spline coefficients of gridded samples.

    Attributes
    ----------
    coefficients : Tensor
        Coefficients, same shape as the samples they were computed from.
    order : int
        Spline order, 0 to 3 (stored as metadata, not tensor)
    boundary_condition : str
        How the samples continue beyond their ends: "zero", "constant",
        "periodic" or "mirror"
    terms : int
        Terms kept in the periodic and mirror boundary sums (0 for orders
        that need no prefilter)
    """

    coefficients: Tensor
    order: int
    boundary_condition: str
    terms: int


def b_spline_coefficients(
    data: Tensor,
    order: int,
    boundary_condition: str = "zero",
    terms: Optional[int] = None,
) -> BSplineCoefficients:
    """Prefilter samples into B-spline coefficients along every dimension.

    Parameters
    ----------
    data : Tensor
        Samples, shape (n_0, ..., n_{N-1}).
    order : int
        Spline order, 0 to 3.
    boundary_condition : str
        "zero" (default), "constant", "periodic" or "mirror".
    terms : int, optional
        Terms kept in the periodic and mirror boundary sums. Defaults to
        full precision for the dtype of ``data``.

    Returns
    -------
    BSplineCoefficients
    """
    order = validate_order(order)
    coefficients = prefilter(data, order, boundary_condition, terms)

    if order in IDENTITY_ORDERS:
        resolved_terms = 0
    elif terms is None:
        _, p = PREFILTER_CONSTANTS[order]
        resolved_terms = resolve_terms(
            boundary_condition, p, None, coefficients.dtype
        )
    else:
        resolved_terms = validate_terms(terms)

    return BSplineCoefficients(
        coefficients=coefficients,
        order=order,
        boundary_condition=boundary_condition,
        terms=resolved_terms,
        batch_size=[],
    )
