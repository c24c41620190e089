from ._interpolation_error import InterpolationError


class EvaluationError(InterpolationError, ValueError):
    """Raised when an interpolator is called with malformed coordinates."""

    pass
