"""Point evaluation, derivatives and integrals of Schumaker splines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..exceptions import UnsupportedOperationError
from ..utils.conversion import to_ordinal

if TYPE_CHECKING:
    from .schumaker import Spline


def locate_pieces(interval_starts: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Index of the last interval start <= each point.

    Points before every start resolve to the first piece.
    """
    idx = np.searchsorted(interval_starts, points, side='right') - 1
    return np.maximum(idx, 0)


def _primitive(coefficients: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Antiderivative of each quadratic at local offset t, zero at t = 0."""
    a, b, c = coefficients[..., 0], coefficients[..., 1], coefficients[..., 2]
    return ((a / 3 * t + b / 2) * t + c) * t


def cumulative_integrals(
    interval_starts: np.ndarray, coefficients: np.ndarray
) -> np.ndarray:
    """Integral from the first interval start to each interval start.

    Each piece is integrated over [start_i, start_{i+1}] with its own start
    as the offset origin.

    Returns:
        Array of shape (n_pieces,), starting at 0.
    """
    widths = np.diff(interval_starts)
    full = _primitive(coefficients[:-1], widths)
    return np.concatenate([[0.0], np.cumsum(full)])


def evaluate(
    spline: Spline,
    point,
    derivative_order: int = 0,
) -> float | np.ndarray:
    """Evaluate a spline or one of its derivatives.

    Args:
        spline: The spline.
        point: Point(s) at which to evaluate. Numbers or dates.
        derivative_order: 0 for the value, 1 and 2 for the first and second
            derivatives. Higher orders are zero for a quadratic spline.

    Returns:
        A float for scalar input, otherwise an array of the input's shape.

    Raises:
        UnsupportedOperationError: If derivative_order is negative.
    """
    if derivative_order < 0:
        raise UnsupportedOperationError(
            "evaluate cannot compute integrals. Use evaluate_integral instead."
        )

    points = to_ordinal(point)
    scalar_input = np.ndim(points) == 0
    points = np.atleast_1d(points)

    idx = locate_pieces(spline.interval_starts, points)
    t = points - spline.interval_starts[idx]
    coefs = spline.coefficients[idx]
    a, b, c = coefs[..., 0], coefs[..., 1], coefs[..., 2]

    if derivative_order == 0:
        result = (a * t + b) * t + c
    elif derivative_order == 1:
        result = 2 * a * t + b
    elif derivative_order == 2:
        result = 2 * a + 0 * t
    else:
        result = np.zeros_like(t)

    if scalar_input:
        return float(result[0])
    return result


def antiderivative(spline: Spline, point) -> float | np.ndarray:
    """Integral of the spline from its first interval start to point.

    Args:
        spline: The spline.
        point: Upper limit(s). Numbers or dates.

    Returns:
        A float for scalar input, otherwise an array of the input's shape.
    """
    points = to_ordinal(point)
    scalar_input = np.ndim(points) == 0
    points = np.atleast_1d(points)

    idx = locate_pieces(spline.interval_starts, points)
    t = points - spline.interval_starts[idx]
    result = spline.cumulative_integrals[idx] + _primitive(spline.coefficients[idx], t)

    if scalar_input:
        return float(result[0])
    return result


def evaluate_integral(spline: Spline, lhs, rhs) -> float | np.ndarray:
    """Definite integral of the spline between lhs and rhs.

    The partial integral of the piece containing lhs up to its end, the full
    integrals of all pieces in between and the partial integral of the piece
    containing rhs are summed. Both partials and the full pieces are held in
    the running antiderivative, so ``rhs < lhs`` yields the negated integral.

    Args:
        spline: The spline.
        lhs: Lower limit. Number or date.
        rhs: Upper limit. Number or date.

    Returns:
        The integral as a float, or an array if the limits are arrays.
    """
    return antiderivative(spline, rhs) - antiderivative(spline, lhs)
