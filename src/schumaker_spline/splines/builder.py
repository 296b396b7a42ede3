"""Assembly of the full Schumaker coefficient table.

The builder validates the samples, imputes gradients when needed, runs the
interval splitter over every consecutive pair of points and finally adds the
boundary rows that implement the requested extrapolation scheme.
"""

from __future__ import annotations

import warnings
from enum import Enum, auto

import numpy as np

from ..exceptions import InvalidInputError
from ..utils.conversion import to_ordinal
from .gradients import impute_gradients
from .interval import split_interval


class ExtrapolationScheme(Enum):
    """Behaviour of the spline outside the sampled x range."""
    CURVE = auto()     # Extend the first and last quadratics
    LINEAR = auto()    # Extend a line with the boundary pieces' linear slope
    CONSTANT = auto()  # Hold the first and last y values

    @classmethod
    def coerce(cls, value: ExtrapolationScheme | str) -> ExtrapolationScheme:
        """Accept a member or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise InvalidInputError(
            f"Unknown extrapolation scheme: {value!r}. "
            f"Expected one of {[m.name.lower() for m in cls]}"
        )


def _as_samples(values, name: str) -> np.ndarray:
    arr = to_ordinal(values)
    if np.ndim(arr) != 1:
        raise InvalidInputError(f"{name} must be one-dimensional, got shape {np.shape(arr)}")
    arr = np.array(arr, dtype=float)
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} contains non-finite values")
    return arr


def _validate_samples(
    x, y, gradients
) -> tuple[np.ndarray, np.ndarray, np.ndarray | None]:
    x = _as_samples(x, "x")
    if len(x) == 0:
        raise InvalidInputError("Zero length x is insufficient to create a Schumaker spline")

    y = _as_samples(y, "y")
    if len(y) != len(x):
        raise InvalidInputError(
            f"Length mismatch: x has {len(x)} points, y has {len(y)} points"
        )

    if gradients is not None:
        gradients = _as_samples(gradients, "gradients")
        if len(gradients) != len(x):
            raise InvalidInputError(
                f"Length mismatch: x has {len(x)} points, "
                f"gradients has {len(gradients)} points"
            )

    if np.any(np.diff(x) <= 0):
        raise InvalidInputError("x must be strictly increasing")

    return x, y, gradients


def extrapolate(
    table: np.ndarray,
    scheme: ExtrapolationScheme,
    x: np.ndarray,
    y: np.ndarray,
) -> np.ndarray:
    """Add unit-width boundary rows for out of sample evaluation.

    Args:
        table: Coefficient table with rows (start, end, a, b, c).
        scheme: Extrapolation scheme.
        x: Sample x coordinates.
        y: Sample values.

    Returns:
        The table with one row prepended and one appended, or the table
        itself for ``CURVE``.
    """
    if scheme is ExtrapolationScheme.CURVE:
        return table

    bottom_x = table[0, 0]
    top_x = table[-1, 1]

    if scheme is ExtrapolationScheme.LINEAR:
        bottom_b = table[0, 3]
        top_b = table[-1, 3]
    else:
        bottom_b = 0.0
        top_b = 0.0

    # The bottom row reaches y[0] at its end, one unit from its start
    bottom = [bottom_x - 1, bottom_x, 0.0, bottom_b, y[0] - bottom_b]
    top = [top_x, top_x + 1, 0.0, top_b, y[-1]]

    return np.vstack([bottom, table, top])


def build_coefficient_table(
    x,
    y,
    gradients=None,
    extrapolation: ExtrapolationScheme | str = ExtrapolationScheme.CURVE,
    left_gradient: float | None = None,
    right_gradient: float | None = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Build the interval starts, ends and quadratic coefficients.

    Args:
        x: Strictly increasing sample coordinates (numbers or dates).
        y: Sample values.
        gradients: Gradients at each sample point. Imputed if None.
        extrapolation: Out of sample behaviour.
        left_gradient: Overrides the gradient at the first point.
        right_gradient: Overrides the gradient at the last point.

    Returns:
        Tuple of (interval_starts, interval_ends, coefficients) where
        coefficients has shape (n_pieces, 3).
    """
    scheme = ExtrapolationScheme.coerce(extrapolation)
    x, y, gradients = _validate_samples(x, y, gradients)
    n = len(x)

    if n <= 2 and (
        gradients is not None or left_gradient is not None or right_gradient is not None
    ):
        warnings.warn(
            f"Gradients are ignored for splines with fewer than 3 points (got {n})."
        )

    if n == 1:
        if scheme is ExtrapolationScheme.LINEAR:
            warnings.warn(
                "A single point carries no slope information. "
                "Using constant extrapolation."
            )
        # Constant extrapolation is the only option with one point
        return x.copy(), x.copy(), np.array([[0.0, 0.0, y[0]]])

    if n == 2:
        slope = (y[1] - y[0]) / (x[1] - x[0])
        table = np.array([[x[0], x[1], 0.0, slope, y[0]]])
        # Curve and linear extrapolation coincide on a straight line
        if scheme is ExtrapolationScheme.CONSTANT:
            table = extrapolate(table, scheme, x, y)
        return table[:, 0].copy(), table[:, 1].copy(), table[:, 2:].copy()

    if gradients is None:
        gradients = impute_gradients(x, y)
    if left_gradient is not None:
        gradients[0] = left_gradient
    if right_gradient is not None:
        gradients[-1] = right_gradient

    rows = [
        split_interval(gradients[i:i + 2], y[i:i + 2], x[i:i + 2])
        for i in range(n - 1)
    ]
    table = extrapolate(np.vstack(rows), scheme, x, y)

    return table[:, 0].copy(), table[:, 1].copy(), table[:, 2:].copy()
