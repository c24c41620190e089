from ._b_spline_coefficients import BSplineCoefficients, b_spline_coefficients
from ._b_spline_evaluate import b_spline_evaluate, fractional_index
from ._b_spline_interpolator import (
    BSplineInterpolator,
    CubicBSplineInterpolator,
    QuadraticBSplineInterpolator,
)
from ._b_spline_kernel import b_spline_kernel
from ._boundary_condition import BoundaryCondition, extend_indices
from ._prefilter import prefilter, prefilter_constants

__all__ = [
    "BSplineCoefficients",
    "BSplineInterpolator",
    "BoundaryCondition",
    "CubicBSplineInterpolator",
    "QuadraticBSplineInterpolator",
    "b_spline_coefficients",
    "b_spline_evaluate",
    "b_spline_kernel",
    "extend_indices",
    "fractional_index",
    "prefilter",
    "prefilter_constants",
]
