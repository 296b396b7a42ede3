"""Derivative splines, roots and optima.

Schumaker splines are often monotonic and globally convex or concave, so
roots can be read off the coefficient table: a sign change between the
constant terms of consecutive pieces means the earlier piece crosses zero
somewhere in [start_i, start_{i+1}]. Optima are the roots of the derivative
spline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from .schumaker import Spline


@dataclass(frozen=True)
class RootTolerances:
    """Numerical tolerances for root finding.

    Attributes:
        quadratic: Pieces with |a| at or below this are solved as linear.
            Also the slack allowed when checking a root lies in its piece.
        duplicate: Roots this close to the previous root are dropped.
        classification: Curvature within this of zero marks a saddle point.
    """
    quadratic: float = 1e-13
    duplicate: float = 1e-5
    classification: float = 1e-15


DEFAULT_TOLERANCES = RootTolerances()


@dataclass(frozen=True)
class Root:
    """A root of a spline.

    Attributes:
        location: x coordinate of the root.
        first_derivative: Slope of the spline at the root.
        second_derivative: Curvature of the spline at the root.
    """
    location: float
    first_derivative: float
    second_derivative: float

    def __iter__(self):
        return iter((self.location, self.first_derivative, self.second_derivative))


class OptimumKind(Enum):
    """Classification of a stationary point."""
    MINIMUM = auto()
    MAXIMUM = auto()
    SADDLE_POINT = auto()


@dataclass(frozen=True)
class Optimum:
    """A stationary point of a spline."""
    location: float
    kind: OptimumKind

    def __iter__(self):
        return iter((self.location, self.kind))


def find_derivative_spline(spline: Spline) -> Spline:
    """Spline of the first derivative on the same interval partition.

    Each piece a*t**2 + b*t + c becomes 2*a*t + b.
    """
    coefficients = np.zeros_like(spline.coefficients)
    coefficients[:, 1] = 2 * spline.coefficients[:, 0]
    coefficients[:, 2] = spline.coefficients[:, 1]
    return Spline.from_table(
        spline.interval_starts, spline.interval_ends, coefficients,
        extrapolation=spline.extrapolation,
    )


def _quadratic_root(
    a: float, b: float, c: float, width: float, tol: float
) -> float | None:
    """Local offset of the root of a*t**2 + b*t + c inside [0, width]."""
    # Rounding can push a tangent crossing slightly negative
    det = np.sqrt(max(b * b - 4 * a * c, 0.0))
    plus_root = (-b + det) / (2 * a)
    minus_root = (-b - det) / (2 * a)

    if -tol <= plus_root <= width + tol:
        return float(plus_root)
    elif -tol <= minus_root <= width + tol:
        return float(minus_root)
    return None


def find_roots(
    spline: Spline,
    tolerances: RootTolerances = DEFAULT_TOLERANCES,
) -> list[Root]:
    """Find the roots of a spline.

    Only pieces whose constant term changes sign relative to the next piece
    are solved, so a root inside or at the end of the final piece (or a
    double root that touches zero without crossing) is not reported. A zero
    at a piece start is reported once.

    Args:
        spline: The spline.
        tolerances: Numerical tolerances.

    Returns:
        Roots in increasing order of location.
    """
    starts = spline.interval_starts
    coefs = spline.coefficients
    signs = np.sign(coefs[:, 2])

    roots: list[Root] = []

    for i in range(spline.n_pieces - 1):
        if abs(signs[i] - signs[i + 1]) <= 0.5:
            continue

        a, b, c = (float(v) for v in coefs[i])

        if abs(a) > tolerances.quadratic:
            width = float(starts[i + 1] - starts[i])
            t = _quadratic_root(a, b, c, width, tolerances.quadratic)
            if t is None:
                continue
            root = Root(float(starts[i]) + t, float(2 * a * t + b), float(2 * a))
        elif b != 0:
            root = Root(float(starts[i]) - c / b, b, 0.0)
        else:
            # A constant piece cannot cross zero
            continue

        # A zero on a shared knot is found from both neighbouring pieces
        if roots and abs(root.location - roots[-1].location) < tolerances.duplicate:
            continue
        roots.append(root)

    return roots


def find_optima(
    spline: Spline,
    tolerances: RootTolerances = DEFAULT_TOLERANCES,
) -> list[Optimum]:
    """Find and classify the optima of a spline.

    Each stationary point is classified from the spline's own second
    derivative there: positive is a minimum, negative a maximum and
    anything within tolerance of zero a saddle point.

    Args:
        spline: The spline.
        tolerances: Numerical tolerances.

    Returns:
        Optima in increasing order of location.
    """
    stationary = find_roots(find_derivative_spline(spline), tolerances)

    optima = []
    for root in stationary:
        curvature = root.first_derivative
        if curvature > tolerances.classification:
            kind = OptimumKind.MINIMUM
        elif curvature < -tolerances.classification:
            kind = OptimumKind.MAXIMUM
        else:
            kind = OptimumKind.SADDLE_POINT
        optima.append(Optimum(root.location, kind))

    return optima
