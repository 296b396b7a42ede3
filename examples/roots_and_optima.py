"""Roots and optima of a Schumaker spline.

Builds a spline through a wave-like sample, shifts it to find where it
crosses a level, and locates its maxima and minima from the derivative
spline.

Usage:
    python roots_and_optima.py
    python roots_and_optima.py --level 0.5
"""

import argparse

import numpy as np

from schumaker_spline import Spline


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--level', type=float, default=0.0,
                        help='Level whose crossings are reported')
    args = parser.parse_args()

    x = np.linspace(0, 2 * np.pi, 13)
    y = np.sin(x)
    spline = Spline(x, y)

    print("=" * 60)
    print(f"Crossings of y = {args.level}")
    print("=" * 60)
    for location, slope, curvature in (spline - args.level).roots():
        print(f"  x={location:8.4f}  slope={slope:8.4f}  curvature={curvature:8.4f}")

    print("\n" + "=" * 60)
    print("Optima")
    print("=" * 60)
    for location, kind in spline.optima():
        print(f"  x={location:8.4f}  {kind.name:<12} value={spline(location):8.4f}")


if __name__ == '__main__':
    main()
