"""Knot insertion and quadratic coefficients for a single interval.

Implements Judd (1998), Lemma 6.11.1 and Algorithm 6.3. Each input interval
[t1, t2] is covered by at most two quadratics joined at an internal knot,
C1 continuous at the knot and matching the given values and gradients at
both ends.

Rows produced here have the layout ``(start, end, a, b, c)`` where the
quadratic on a row is ``a*t**2 + b*t + c`` with ``t = x - start``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

# Knots closer than this to an interval edge collapse onto it
KNOT_TOLERANCE = 4 * np.finfo(float).eps


def _knot_position(
    s1: float, s2: float, z1: float, z2: float, t1: float, t2: float
) -> float:
    """Internal knot location for one interval."""
    if (s1 + s2) * (t2 - t1) == 2 * (z2 - z1):
        # A single quadratic already matches both end gradients
        return t2

    delta = (z2 - z1) / (t2 - t1)

    if (s1 - delta) * (s2 - delta) >= 0:
        return (t1 + t2) / 2
    elif abs(s2 - delta) < abs(s1 - delta):
        return t1 + (t2 - t1) * (s2 - delta) / (s2 - s1)
    else:
        return t2 + (t2 - t1) * (s1 - delta) / (s2 - s1)


def split_interval(
    gradients: Sequence[float],
    values: Sequence[float],
    positions: Sequence[float],
) -> np.ndarray:
    """Split one interval into (up to) two quadratic pieces.

    Args:
        gradients: Gradients (s1, s2) at the interval ends.
        values: Values (z1, z2) at the interval ends.
        positions: Interval ends (t1, t2), t1 < t2.

    Returns:
        Array of shape (1, 5) or (2, 5) with rows (start, end, a, b, c).
    """
    s1, s2 = float(gradients[0]), float(gradients[1])
    z1, z2 = float(values[0]), float(values[1])
    t1, t2 = float(positions[0]), float(positions[1])

    tsi = _knot_position(s1, s2, z1, z2, t1, t2)

    alpha = tsi - t1
    beta = t2 - tsi
    sbar = (2 * (z2 - z1) - (alpha * s1 + beta * s2)) / (t2 - t1)

    a1 = (sbar - s1) / (2 * alpha) if alpha != 0 else 0.0
    first = (a1, s1, z1)

    if beta == 0:
        second = first
    else:
        c2 = a1 * alpha**2 + s1 * alpha + z1
        second = ((s2 - sbar) / (2 * beta), sbar, c2)

    if tsi < t1 + KNOT_TOLERANCE:
        return np.array([[t1, t2, *second]])
    elif tsi + KNOT_TOLERANCE > t2:
        return np.array([[t1, t2, *first]])
    return np.array([
        [t1, tsi, *first],
        [tsi, t2, *second],
    ])
