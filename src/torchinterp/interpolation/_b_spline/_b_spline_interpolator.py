"""B-spline interpolation of orders 0 to 3."""

from typing import Optional

from torch import Tensor

from .._interpolator import Interpolator, SpacingLike
from ._b_spline_coefficients import BSplineCoefficients, b_spline_coefficients
from ._b_spline_evaluate import b_spline_evaluate
from ._boundary_condition import BoundaryCondition
from ._prefilter import validate_order


class BSplineInterpolator(Interpolator):
    """
    Interpolator using prefiltered B-splines.

    The samples are converted to B-spline coefficients once, at construction;
    every evaluation then reads ``order + 1`` coefficients per dimension.
    The resulting spline passes through the samples (up to the truncation of
    the boundary sums) and is ``order - 1`` times continuously
    differentiable.

    Parameters
    ----------
    order : int
        Spline order: 0 (nearest), 1 (linear), 2 (quadratic) or 3 (cubic).
    data : Tensor
        Samples, shape (n_0, ..., n_{N-1}).
    spacing : GridSpacing or sequence of GridSpacing, optional
        Positions of the samples. Defaults to unit spacing starting at 0.
    boundary_condition : str
        How the signal continues beyond the samples, during both prefiltering
        and evaluation:

        - ``"zero"``: zero outside (default).
        - ``"constant"``: edge samples repeat.
        - ``"periodic"``: samples repeat with period ``n``.
        - ``"mirror"``: whole-sample reflection about the edge samples.
    terms : int, optional
        Number of terms kept in the periodic and mirror boundary sums.
        Defaults to full precision for the dtype of ``data``.

    Raises
    ------
    OrderError
        If ``order`` is not supported or ``boundary_condition`` is unknown.
    SizeMismatchError
        If the spacing does not match the shape of ``data``.

    Warns
    -----
    BoundaryTruncationWarning
        If an explicit ``terms`` leaves a truncation residual above ``1e-4``.

    Examples
    --------
    >>> import torch
    >>> f = BSplineInterpolator(3, torch.ones(5, dtype=torch.float64),
    ...                         boundary_condition="constant")
    >>> torch.round(f(2.3), decimals=8)
    tensor(1., dtype=torch.float64)
    """

    def __init__(
        self,
        order: int,
        data: Tensor,
        spacing: SpacingLike = None,
        boundary_condition: BoundaryCondition = "zero",
        terms: Optional[int] = None,
    ):
        order = validate_order(order)
        super().__init__(data, spacing)
        self._coefficients = b_spline_coefficients(
            self.data, order, boundary_condition, terms
        )

    @property
    def order(self) -> int:
        return self._coefficients.order

    @property
    def boundary_condition(self) -> str:
        return self._coefficients.boundary_condition

    @property
    def terms(self) -> int:
        return self._coefficients.terms

    @property
    def coefficients(self) -> BSplineCoefficients:
        return self._coefficients

    @property
    def prefiltdata(self) -> Tensor:
        """Prefiltered coefficients, same shape as ``data``."""
        return self._coefficients.coefficients

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(order={self.order}, shape={self.shape}, "
            f"boundary_condition={self.boundary_condition!r}, "
            f"spacing={self.spacing})"
        )

    def __call__(self, *position) -> Tensor:
        """
        Evaluate the spline at the given position.

        Parameters
        ----------
        *position : float or Tensor
            One coordinate per dimension, broadcast together.

        Returns
        -------
        Tensor
            Spline values with the broadcast shape of the coordinates.
        """
        coordinates = self._coordinates(position)
        return b_spline_evaluate(self._coefficients, self.spacing, *coordinates)


def QuadraticBSplineInterpolator(
    data: Tensor,
    spacing: SpacingLike = None,
    boundary_condition: BoundaryCondition = "zero",
    terms: Optional[int] = None,
) -> BSplineInterpolator:
    """Order-2 :class:`BSplineInterpolator`."""
    return BSplineInterpolator(2, data, spacing, boundary_condition, terms)


def CubicBSplineInterpolator(
    data: Tensor,
    spacing: SpacingLike = None,
    boundary_condition: BoundaryCondition = "zero",
    terms: Optional[int] = None,
) -> BSplineInterpolator:
    """Order-3 :class:`BSplineInterpolator`."""
    return BSplineInterpolator(3, data, spacing, boundary_condition, terms)
