class BoundaryTruncationWarning(UserWarning):
    """Issued when the truncated boundary sum of the prefilter is inaccurate."""

    pass
