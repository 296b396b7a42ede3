"""Gradient imputation for Schumaker splines.

When no derivative information is supplied, gradients at the sample points
are estimated with the finite-difference scheme of Judd (1998), pp. 233-234.
Interior points take a length-weighted average of the neighbouring secant
slopes when the data is locally monotonic and a zero gradient at local
extrema, which is what lets the spline inherit the data's shape.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import InvalidInputError


def impute_gradients(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Estimate the gradient at every sample point.

    Args:
        x: Strictly increasing x coordinates, shape (n,), n >= 3.
        y: Values at x, shape (n,).

    Returns:
        Gradient estimates, shape (n,).
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    n = len(x)
    if n < 3 or len(y) != n:
        raise InvalidInputError(
            f"Gradient imputation needs at least 3 matching points, "
            f"got x={len(x)}, y={len(y)}"
        )

    dx = np.diff(x)
    dy = np.diff(y)

    # Segment lengths and secant slopes
    lengths = np.sqrt(dx**2 + dy**2)
    slopes = dy / dx

    left_len, right_len = lengths[:-1], lengths[1:]
    left_slope, right_slope = slopes[:-1], slopes[1:]

    monotonic = left_slope * right_slope > 0
    weighted = (left_len * left_slope + right_len * right_slope) / (left_len + right_len)
    interior = np.where(monotonic, weighted, 0.0)

    gradients = np.empty(n)
    gradients[1:-1] = interior
    gradients[0] = (3 * slopes[0] - interior[0]) / 2
    gradients[-1] = (3 * slopes[-1] - interior[-1]) / 2

    return gradients
