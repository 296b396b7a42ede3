"""Extrapolation schemes on a concave, increasing sample.

Samples y = log(x) + sqrt(x) on [1, 6] and evaluates the spline, its first
and second derivatives inside and outside the sampled range for each
extrapolation scheme. Supplying the analytical gradients tightens the fit.

Usage:
    python extrapolation.py
    python extrapolation.py --points 25
"""

import argparse

import numpy as np

from schumaker_spline import ExtrapolationScheme, Spline


def analytical_first_derivative(x):
    return 1 / x + 0.5 * x ** -0.5


def compare_schemes(x, y):
    """Print values left of, inside and right of the sample range."""
    print("=" * 60)
    print("Extrapolation schemes")
    print("=" * 60)

    queries = np.array([-2.0, 0.0, 1.0, 3.25, 6.0, 8.0, 10.0])
    for scheme in ExtrapolationScheme:
        spline = Spline(x, y, extrapolation=scheme)
        values = spline(queries)
        slopes = spline(queries, derivative_order=1)
        print(f"\n{scheme.name}: {spline!r}")
        for q, v, s in zip(queries, values, slopes):
            print(f"  x={q:6.2f}  value={v:9.4f}  slope={s:8.4f}")


def compare_gradients(x, y):
    """Imputed versus analytical gradients."""
    print("\n" + "=" * 60)
    print("Imputed versus analytical gradients")
    print("=" * 60)

    imputed = Spline(x, y)
    exact = Spline(x, y, gradients=analytical_first_derivative(x))

    grid = np.linspace(x[0], x[-1], 201)
    truth = np.log(grid) + np.sqrt(grid)

    print(f"Max error, imputed gradients:    {np.max(np.abs(imputed(grid) - truth)):.2e}")
    print(f"Max error, analytical gradients: {np.max(np.abs(exact(grid) - truth)):.2e}")

    lhs, rhs = x[0], x[-1]
    true_integral = (rhs * np.log(rhs) - rhs + 2 / 3 * rhs ** 1.5) - (
        lhs * np.log(lhs) - lhs + 2 / 3 * lhs ** 1.5
    )
    print(f"Integral over [{lhs}, {rhs}]: {exact.integral(lhs, rhs):.6f} "
          f"(analytical {true_integral:.6f})")


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--points', type=int, default=11,
                        help='Number of sample points on [1, 6]')
    args = parser.parse_args()

    x = np.linspace(1.0, 6.0, args.points)
    y = np.log(x) + np.sqrt(x)

    compare_schemes(x, y)
    compare_gradients(x, y)


if __name__ == '__main__':
    main()
