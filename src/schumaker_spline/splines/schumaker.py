"""Shape-preserving Schumaker quadratic spline.

The spline is stored as an ordered table of quadratic pieces. Piece i covers
[interval_starts[i], interval_ends[i]] and has value
``a*t**2 + b*t + c`` with ``t = x - interval_starts[i]``. A query resolves to
the last piece whose start is <= the query, or to the first piece for
queries left of every start, so the boundary pieces also carry the
extrapolation behaviour.

Example:
    >>> spline = Spline([1, 2, 3, 4], [1, 4, 9, 16], extrapolation="linear")
    >>> spline(4.0)
    16.0
    >>> spline(2.5, derivative_order=1)   # doctest: +SKIP
    >>> (spline - 10).roots()             # doctest: +SKIP
"""

from __future__ import annotations

import numbers

import numpy as np
from scipy.interpolate import PPoly

from ..exceptions import InvalidInputError
from .builder import ExtrapolationScheme, build_coefficient_table
from .evaluation import antiderivative, cumulative_integrals, evaluate, evaluate_integral


def _read_only(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, dtype=float)
    arr.setflags(write=False)
    return arr


class Spline:
    """Immutable Schumaker spline.

    Args:
        x: Strictly increasing sample coordinates. Floats, ints or dates.
        y: Sample values, same length as x.
        gradients: Gradients at each sample point. Imputed from x and y if
            not supplied.
        extrapolation: ``CURVE`` extends the first and last quadratics,
            ``LINEAR`` extends a line from the boundary points and
            ``CONSTANT`` holds the boundary y values. Member names are
            accepted as strings.
        left_gradient: Gradient at the first point. Overrides the imputed
            or supplied value.
        right_gradient: Gradient at the last point. Overrides the imputed
            or supplied value.

    Raises:
        InvalidInputError: If x is empty, lengths differ, values are not
            finite or x is not strictly increasing.
    """

    def __init__(
        self,
        x,
        y,
        gradients=None,
        extrapolation: ExtrapolationScheme | str = ExtrapolationScheme.CURVE,
        left_gradient: float | None = None,
        right_gradient: float | None = None,
    ):
        scheme = ExtrapolationScheme.coerce(extrapolation)
        starts, ends, coefficients = build_coefficient_table(
            x, y,
            gradients=gradients,
            extrapolation=scheme,
            left_gradient=left_gradient,
            right_gradient=right_gradient,
        )
        self._set_table(starts, ends, coefficients, scheme)

    @classmethod
    def from_table(
        cls,
        interval_starts,
        interval_ends,
        coefficients,
        extrapolation: ExtrapolationScheme | None = None,
    ) -> Spline:
        """Create a spline directly from a coefficient table.

        Args:
            interval_starts: Piece starts, shape (n_pieces,), non-decreasing.
            interval_ends: Piece ends, shape (n_pieces,).
            coefficients: Quadratic coefficients (a, b, c), shape (n_pieces, 3).
            extrapolation: Scheme the table was built with, if known.

        Returns:
            New Spline owning copies of the arrays.
        """
        starts = np.asarray(interval_starts, dtype=float)
        ends = np.asarray(interval_ends, dtype=float)
        coefficients = np.asarray(coefficients, dtype=float)

        if starts.ndim != 1 or len(starts) == 0:
            raise InvalidInputError(
                f"interval_starts must be a non-empty 1D array, got shape {starts.shape}"
            )
        if ends.shape != starts.shape:
            raise InvalidInputError(
                f"interval_ends has shape {ends.shape}, expected {starts.shape}"
            )
        if coefficients.shape != (len(starts), 3):
            raise InvalidInputError(
                f"coefficients has shape {coefficients.shape}, "
                f"expected ({len(starts)}, 3)"
            )
        if np.any(np.diff(starts) < 0) or np.any(ends < starts):
            raise InvalidInputError("Intervals must be sorted with ends >= starts")

        spline = cls.__new__(cls)
        spline._set_table(starts, ends, coefficients, extrapolation)
        return spline

    def _set_table(self, starts, ends, coefficients, extrapolation) -> None:
        self._interval_starts = _read_only(starts)
        self._interval_ends = _read_only(ends)
        self._coefficients = _read_only(coefficients)
        self._cumulative = _read_only(
            cumulative_integrals(self._interval_starts, self._coefficients)
        )
        self._extrapolation = extrapolation

    @property
    def interval_starts(self) -> np.ndarray:
        """Start of each quadratic piece (read-only)."""
        return self._interval_starts

    @property
    def interval_ends(self) -> np.ndarray:
        """End of each quadratic piece (read-only)."""
        return self._interval_ends

    @property
    def coefficients(self) -> np.ndarray:
        """Quadratic coefficients (a, b, c) per piece, shape (n_pieces, 3)."""
        return self._coefficients

    @property
    def cumulative_integrals(self) -> np.ndarray:
        """Integral from the first interval start to each interval start."""
        return self._cumulative

    @property
    def extrapolation(self) -> ExtrapolationScheme | None:
        """Extrapolation scheme used at construction, None for raw tables."""
        return self._extrapolation

    @property
    def n_pieces(self) -> int:
        """Number of quadratic pieces, including extrapolation rows."""
        return len(self._interval_starts)

    def evaluate(self, point, derivative_order: int = 0) -> float | np.ndarray:
        """Evaluate the spline or a derivative. See :func:`evaluate`."""
        return evaluate(self, point, derivative_order)

    def integral(self, lhs, rhs) -> float | np.ndarray:
        """Definite integral between lhs and rhs. See :func:`evaluate_integral`."""
        return evaluate_integral(self, lhs, rhs)

    def antiderivative(self, point) -> float | np.ndarray:
        return antiderivative(self, point)

    def derivative(self) -> Spline:
        """Spline of the first derivative."""
        from .roots import find_derivative_spline
        return find_derivative_spline(self)

    def roots(self, tolerances=None):
        """Roots with first and second derivatives. See :func:`find_roots`."""
        from .roots import DEFAULT_TOLERANCES, find_roots
        return find_roots(self, tolerances or DEFAULT_TOLERANCES)

    def optima(self, tolerances=None):
        """Classified optima. See :func:`find_optima`."""
        from .roots import DEFAULT_TOLERANCES, find_optima
        return find_optima(self, tolerances or DEFAULT_TOLERANCES)

    def to_ppoly(self) -> PPoly:
        """Equivalent scipy piecewise polynomial.

        Breakpoints are the interval starts followed by the last interval
        end. The boundary pieces extrapolate, as they do here.
        """
        breakpoints = np.append(self._interval_starts, self._interval_ends[-1])
        return PPoly(self._coefficients.T.copy(), breakpoints, extrapolate=True)

    def _with_coefficients(self, coefficients: np.ndarray) -> Spline:
        return Spline.from_table(
            self._interval_starts, self._interval_ends, coefficients,
            extrapolation=self._extrapolation,
        )

    def __call__(self, point, derivative_order: int = 0) -> float | np.ndarray:
        return evaluate(self, point, derivative_order)

    def __add__(self, other) -> Spline:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        coefficients = self._coefficients.copy()
        coefficients[:, 2] += other
        return self._with_coefficients(coefficients)

    __radd__ = __add__

    def __sub__(self, other) -> Spline:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other) -> Spline:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return (-self) + other

    def __mul__(self, other) -> Spline:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self._with_coefficients(self._coefficients * other)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Spline:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self._with_coefficients(self._coefficients / other)

    def __neg__(self) -> Spline:
        return self._with_coefficients(-self._coefficients)

    def __len__(self) -> int:
        return self.n_pieces

    def __repr__(self) -> str:
        scheme = self._extrapolation.name if self._extrapolation else "unknown"
        return (
            f"Spline(n_pieces={self.n_pieces}, "
            f"x=[{self._interval_starts[0]:.4f}, {self._interval_ends[-1]:.4f}], "
            f"extrapolation={scheme})"
        )
