"""Exceptions raised by the spline construction and evaluation routines."""


class InvalidInputError(ValueError):
    """Sample arrays or a coefficient table cannot define a spline.

    Raised for empty or mismatched-length inputs, non-finite values and x
    coordinates that are not strictly increasing.
    """


class UnsupportedOperationError(ValueError):
    """The requested evaluation is not available on this entry point."""
