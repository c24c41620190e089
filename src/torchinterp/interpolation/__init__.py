"""Interpolation of gridded data.

Interpolators
-------------
NearestInterpolator
    Value of the closest sample.
LinearInterpolator
    Multilinear blend of the bracketing samples.
BSplineInterpolator
    Prefiltered B-spline of order 0 to 3.
QuadraticBSplineInterpolator, CubicBSplineInterpolator
    Order 2 and order 3 B-spline interpolators.

Functions
---------
find_closest
    Index of the position closest to a query.
find_neighbors
    Indices of the two positions bracketing a query.
prefilter
    Convert samples to B-spline coefficients.

Exceptions
----------
SizeMismatchError
    Spacing does not match the data shape.
OrderError
    Unsupported spline order or boundary condition.

Warnings
--------
BoundaryTruncationWarning
    Truncated boundary sum of the prefilter is inaccurate.
"""

from ._b_spline import (
    BoundaryCondition,
    BSplineCoefficients,
    BSplineInterpolator,
    CubicBSplineInterpolator,
    QuadraticBSplineInterpolator,
    b_spline_coefficients,
    b_spline_evaluate,
    b_spline_kernel,
    prefilter,
    prefilter_constants,
)
from ._boundary_truncation_warning import BoundaryTruncationWarning
from ._constants import (
    BOUNDARY_CONDITIONS,
    KERNEL_COEFFICIENTS,
    PREFILTER_CONSTANTS,
    TRUNCATION_WARNING_THRESHOLD,
    pole,
)
from ._interpolator import Interpolator
from ._linear import LinearInterpolator, find_neighbors
from ._nearest import NearestInterpolator, find_closest
from ._order_error import OrderError
from ._size_mismatch_error import SizeMismatchError

__all__ = [
    "BOUNDARY_CONDITIONS",
    "BSplineCoefficients",
    "BSplineInterpolator",
    "BoundaryCondition",
    "BoundaryTruncationWarning",
    "CubicBSplineInterpolator",
    "Interpolator",
    "KERNEL_COEFFICIENTS",
    "LinearInterpolator",
    "NearestInterpolator",
    "OrderError",
    "PREFILTER_CONSTANTS",
    "QuadraticBSplineInterpolator",
    "SizeMismatchError",
    "TRUNCATION_WARNING_THRESHOLD",
    "b_spline_coefficients",
    "b_spline_evaluate",
    "b_spline_kernel",
    "find_closest",
    "find_neighbors",
    "pole",
    "prefilter",
    "prefilter_constants",
]
