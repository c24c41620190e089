from ._find_neighbors import find_neighbors
from ._linear_interpolator import LinearInterpolator

__all__ = [
    "LinearInterpolator",
    "find_neighbors",
]
