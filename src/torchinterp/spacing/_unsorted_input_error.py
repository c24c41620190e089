from .._construction_error import ConstructionError


class UnsortedInputError(ConstructionError):
    """Raised when variable positions are not non-decreasing."""

    pass
