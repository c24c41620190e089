"""Constants for B-spline prefiltering."""

import math

# Kernel coefficients (b0, b1): sampled centred B-spline at offsets 0 and +-1
KERNEL_COEFFICIENTS: dict = {
    2: (6 / 8, 1 / 8),
    3: (4 / 6, 1 / 6),
}

# (ainv, p): inverse gain and pole of the recursive prefilter per spline order
PREFILTER_CONSTANTS: dict = {
    2: (8, -0.1715728752538097),  # 2 * sqrt(2) - 3
    3: (6, -0.2679491924311228),  # sqrt(3) - 2
}

# Orders whose B-splines interpolate their samples without prefiltering
IDENTITY_ORDERS = frozenset({0, 1})

BOUNDARY_CONDITIONS = ("zero", "constant", "periodic", "mirror")

# Residual |p|**terms above which an explicit truncation triggers a warning
TRUNCATION_WARNING_THRESHOLD: float = 1e-4


def pole(b0: float, b1: float) -> float:
    """Pole of the B-spline prefilter with kernel ``b1 z^-1 + b0 + b1 z``."""
    r = b0 / (2 * b1)
    return -r + math.sqrt(r * r - 1)
