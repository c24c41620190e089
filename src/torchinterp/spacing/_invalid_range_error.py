from .._construction_error import ConstructionError


class InvalidRangeError(ConstructionError):
    """Raised when first > last or the span is not a multiple of the step."""

    pass
