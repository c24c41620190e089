class InterpolationError(Exception):
    """Base exception for all spacing and interpolation errors."""

    pass
