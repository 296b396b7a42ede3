"""Splines module: construction, evaluation, roots and optima."""

from .gradients import impute_gradients
from .interval import split_interval
from .builder import ExtrapolationScheme, build_coefficient_table, extrapolate
from .schumaker import Spline
from .evaluation import evaluate, evaluate_integral, antiderivative
from .roots import (
    find_derivative_spline,
    find_roots,
    find_optima,
    Root,
    Optimum,
    OptimumKind,
    RootTolerances,
    DEFAULT_TOLERANCES,
)

__all__ = [
    # Construction
    "Spline",
    "ExtrapolationScheme",
    "impute_gradients",
    "split_interval",
    "build_coefficient_table",
    "extrapolate",
    # Evaluation
    "evaluate",
    "evaluate_integral",
    "antiderivative",
    # Roots and optima
    "find_derivative_spline",
    "find_roots",
    "find_optima",
    "Root",
    "Optimum",
    "OptimumKind",
    "RootTolerances",
    "DEFAULT_TOLERANCES",
]
