"""Boundary conditions for B-spline prefiltering and evaluation.

The boundary condition fixes how the signal continues beyond its samples:

- ``"zero"``: zero outside the samples.
- ``"constant"``: the edge samples repeat forever.
- ``"periodic"``: the samples repeat with period ``n``.
- ``"mirror"``: whole-sample symmetric reflection about the edge samples.
"""

import math
import operator
import warnings
from typing import Literal, Optional, Tuple

import torch
from torch import Tensor

from .._boundary_truncation_warning import BoundaryTruncationWarning
from .._constants import BOUNDARY_CONDITIONS, TRUNCATION_WARNING_THRESHOLD
from .._order_error import OrderError

BoundaryCondition = Literal["zero", "constant", "periodic", "mirror"]

# Boundary conditions whose initial values are truncated infinite sums
TRUNCATED_CONDITIONS = frozenset({"periodic", "mirror"})


def validate_boundary_condition(boundary_condition: str) -> None:
    """
    Validate a boundary condition name.

    Raises
    ------
    OrderError
        If ``boundary_condition`` is not one of ``"zero"``, ``"constant"``,
        ``"periodic"`` or ``"mirror"``.
    """
    if boundary_condition not in BOUNDARY_CONDITIONS:
        raise OrderError(
            f"Invalid boundary condition {boundary_condition!r}. "
            f"Valid: {list(BOUNDARY_CONDITIONS)}"
        )


def validate_terms(terms) -> int:
    """Return ``terms`` as an int, raising OrderError unless it is a count."""
    try:
        terms = operator.index(terms)
    except TypeError:
        raise OrderError(f"terms must be an integer, got {terms!r}") from None
    if terms < 0:
        raise OrderError(f"terms must be non-negative, got {terms}")
    return terms


def resolve_terms(
    boundary_condition: str,
    pole: float,
    terms: Optional[int],
    dtype: torch.dtype,
) -> int:
    """
    Number of terms ``K`` kept in the periodic and mirror boundary sums.

    ``None`` selects the smallest ``K`` with ``|pole|**K`` below the machine
    epsilon of ``dtype``. An explicit ``K`` whose residual ``|pole|**K``
    exceeds ``TRUNCATION_WARNING_THRESHOLD`` is honoured with a
    :class:`BoundaryTruncationWarning`.
    """
    if terms is None:
        eps = torch.finfo(_real_dtype(dtype)).eps
        return max(1, math.ceil(math.log(eps) / math.log(abs(pole))))

    terms = validate_terms(terms)
    residual = abs(pole) ** terms
    if (
        boundary_condition in TRUNCATED_CONDITIONS
        and residual > TRUNCATION_WARNING_THRESHOLD
    ):
        warnings.warn(
            f"{boundary_condition} boundary sum truncated after {terms} terms "
            f"leaves a residual of {residual:.2e}; increase terms or pass "
            f"terms=None for full precision",
            BoundaryTruncationWarning,
            stacklevel=3,
        )
    return terms


def extend_indices(
    index: Tensor,
    n: int,
    boundary_condition: str,
) -> Tuple[Tensor, Optional[Tensor]]:
    """
    Map sample indices outside ``[0, n - 1]`` back into range.

    Parameters
    ----------
    index : Tensor
        ``int64`` indices, any values.
    n : int
        Number of samples.
    boundary_condition : str
        How the samples continue beyond the ends.

    Returns
    -------
    index : Tensor
        Valid indices into ``[0, n - 1]``.
    inside : Tensor or None
        For ``"zero"``, a boolean mask that is False where the original index
        fell outside the samples (those samples are zero). None otherwise.
    """
    if boundary_condition == "zero":
        inside = (index >= 0) & (index < n)
        return index.clamp(0, n - 1), inside

    if boundary_condition == "constant":
        return index.clamp(0, n - 1), None

    if boundary_condition == "periodic":
        return torch.remainder(index, n), None

    if boundary_condition == "mirror":
        if n == 1:
            return torch.zeros_like(index), None
        period = 2 * (n - 1)
        index = torch.remainder(index, period)
        return torch.where(index >= n, period - index, index), None

    raise OrderError(
        f"Invalid boundary condition {boundary_condition!r}. "
        f"Valid: {list(BOUNDARY_CONDITIONS)}"
    )


def _real_dtype(dtype: torch.dtype) -> torch.dtype:
    if dtype.is_complex:
        return torch.empty((), dtype=dtype).real.dtype
    return dtype
