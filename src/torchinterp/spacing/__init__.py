"""Sample positions for gridded and non-gridded data.

Grid Spacing
------------
UnitSpacing
    Positions ``first, first + 1, ..., last``.
ConstantSpacing
    Positions ``first, first + step, ..., last``, exact at both ends.
VariableSpacing
    Arbitrary non-decreasing positions.

Non-Grid Spacing
----------------
PointSpacing
    Explicit coordinates for every point of an array.

Functions
---------
search_last_leq
    Index of the last position less than or equal to a query.

Abstract Types
--------------
Spacing, GridSpacing, ConstantGridSpacing, NonGridSpacing

Exceptions
----------
InvalidRangeError
    Bad endpoints or step.
UnsortedInputError
    Variable positions are not sorted.
"""

from ._constant_spacing import ConstantSpacing
from ._invalid_range_error import InvalidRangeError
from ._point_spacing import PointSpacing
from ._search_last_leq import search_last_leq
from ._spacing import (
    ConstantGridSpacing,
    GridSpacing,
    NonGridSpacing,
    Spacing,
)
from ._unit_spacing import UnitSpacing
from ._unsorted_input_error import UnsortedInputError
from ._variable_spacing import VariableSpacing

__all__ = [
    "ConstantGridSpacing",
    "ConstantSpacing",
    "GridSpacing",
    "InvalidRangeError",
    "NonGridSpacing",
    "PointSpacing",
    "Spacing",
    "UnitSpacing",
    "UnsortedInputError",
    "VariableSpacing",
    "search_last_leq",
]
