from ._interpolation_error import InterpolationError


class ConstructionError(InterpolationError, ValueError):
    """Raised when a spacing or interpolator is built from invalid inputs."""

    pass
