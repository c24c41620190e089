"""torchinterp: interpolation of gridded data in PyTorch."""

from . import interpolation, spacing
from ._construction_error import ConstructionError
from ._evaluation_error import EvaluationError
from ._interpolation_error import InterpolationError
from .interpolation import (
    BSplineInterpolator,
    CubicBSplineInterpolator,
    LinearInterpolator,
    NearestInterpolator,
    QuadraticBSplineInterpolator,
)
from .spacing import ConstantSpacing, PointSpacing, UnitSpacing, VariableSpacing

__all__ = [
    "BSplineInterpolator",
    "ConstantSpacing",
    "ConstructionError",
    "CubicBSplineInterpolator",
    "EvaluationError",
    "InterpolationError",
    "LinearInterpolator",
    "NearestInterpolator",
    "PointSpacing",
    "QuadraticBSplineInterpolator",
    "UnitSpacing",
    "VariableSpacing",
    "interpolation",
    "spacing",
]

__version__ = "0.1.0"
