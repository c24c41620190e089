from ._find_closest import find_closest
from ._nearest_interpolator import NearestInterpolator

__all__ = [
    "NearestInterpolator",
    "find_closest",
]
