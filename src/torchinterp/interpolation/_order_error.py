from .._construction_error import ConstructionError


class OrderError(ConstructionError):
    """Raised for unsupported spline orders or boundary conditions."""

    pass
