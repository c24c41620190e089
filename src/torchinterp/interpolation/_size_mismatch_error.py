from .._construction_error import ConstructionError


class SizeMismatchError(ConstructionError):
    """Raised when the spacing does not match the shape of the data."""

    pass
