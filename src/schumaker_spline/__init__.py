"""Shape-preserving Schumaker quadratic splines.

Builds piecewise-quadratic interpolants that are monotonic and convex or
concave wherever the data is, without numerical optimisation, and evaluates
their values, derivatives, integrals, roots and optima.
"""

from .exceptions import InvalidInputError, UnsupportedOperationError
from .splines import (
    Spline,
    ExtrapolationScheme,
    impute_gradients,
    split_interval,
    build_coefficient_table,
    extrapolate,
    evaluate,
    evaluate_integral,
    antiderivative,
    find_derivative_spline,
    find_roots,
    find_optima,
    Root,
    Optimum,
    OptimumKind,
    RootTolerances,
    DEFAULT_TOLERANCES,
)
from .utils import to_ordinal

__version__ = "0.1.0"

__all__ = [
    "Spline",
    "ExtrapolationScheme",
    "impute_gradients",
    "split_interval",
    "build_coefficient_table",
    "extrapolate",
    "evaluate",
    "evaluate_integral",
    "antiderivative",
    "find_derivative_spline",
    "find_roots",
    "find_optima",
    "Root",
    "Optimum",
    "OptimumKind",
    "RootTolerances",
    "DEFAULT_TOLERANCES",
    "to_ordinal",
    "InvalidInputError",
    "UnsupportedOperationError",
]
