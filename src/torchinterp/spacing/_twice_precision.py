"""Error-free transformations for double-double ("twice precision") arithmetic.

The functions only use ``+``, ``-`` and ``*`` so they work unchanged on Python
floats and on float64 tensors.
"""

# 2**27 + 1, splits a float64 significand into two 26-bit halves
_SPLITTER = 134217729.0


def two_sum(a, b):
    """Return ``(s, e)`` with ``s = fl(a + b)`` and ``s + e == a + b`` exactly."""
    s = a + b
    bb = s - a
    e = (a - (s - bb)) + (b - bb)
    return s, e


def split(a):
    """Split ``a`` into non-overlapping high and low halves."""
    c = _SPLITTER * a
    hi = c - (c - a)
    lo = a - hi
    return hi, lo


def two_product(a, b):
    """Return ``(p, e)`` with ``p = fl(a * b)`` and ``p + e == a * b`` exactly."""
    p = a * b
    a_hi, a_lo = split(a)
    b_hi, b_lo = split(b)
    e = ((a_hi * b_hi - p) + a_hi * b_lo + a_lo * b_hi) + a_lo * b_lo
    return p, e


def fused_position(first, step_hi, step_lo, i):
    """Evaluate ``first + i * (step_hi + step_lo)`` in double-double arithmetic."""
    p, p_err = two_product(i, step_hi)
    p_err = p_err + i * step_lo
    s, s_err = two_sum(first, p)
    return s + (s_err + p_err)
