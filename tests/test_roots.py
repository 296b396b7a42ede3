"""Tests for derivative splines, roots and optima."""

import numpy as np
import pytest

from schumaker_spline import (
    OptimumKind,
    Root,
    RootTolerances,
    Spline,
    find_optima,
    find_roots,
)


class TestFindRoots:
    """Tests for root finding on the coefficient table."""

    def test_shifted_quadratic(self):
        """Test the crossing of y = x^2 with 10."""
        spline = Spline([1, 2, 3, 4], [1, 4, 9, 16])

        roots = find_roots(spline - 10)

        assert len(roots) == 1
        root = roots[0]
        assert 3 < root.location < 4
        assert abs(root.location - np.sqrt(10)) < 0.01
        assert root.first_derivative > 0
        assert root.second_derivative > 0
        assert abs(spline(root.location) - 10) < 1e-10

    def test_shifted_data_matches_shifted_spline(self):
        """Test that shifting the data or the spline finds the same root."""
        x = np.array([1.0, 2.0, 3.0, 4.0])
        y = x**2

        from_data = find_roots(Spline(x, y - 10))
        from_spline = find_roots(Spline(x, y) - 10)

        assert len(from_data) == len(from_spline) == 1
        assert abs(from_data[0].location - from_spline[0].location) < 1e-12

    def test_unpacks_like_tuple(self):
        """Test that roots unpack into (location, d1, d2)."""
        spline = Spline([1, 2, 3, 4], [1, 4, 9, 16]) - 10

        (location, d1, d2), = spline.roots()

        assert isinstance(spline.roots()[0], Root)
        assert abs(spline(location)) < 1e-10
        assert abs(spline(location, derivative_order=1) - d1) < 1e-10
        assert d2 == spline(location, derivative_order=2)

    def test_linear_root_deduplicated(self):
        """Test that a root on a shared knot is reported once."""
        spline = Spline([0, 1, 2], [-1, 0, 1], extrapolation="linear")

        roots = find_roots(spline)

        assert len(roots) == 1
        assert abs(roots[0].location - 1.0) < 1e-12
        assert abs(roots[0].first_derivative - 1.0) < 1e-12
        assert roots[0].second_derivative == 0.0

    def test_decreasing_concave(self):
        """Test a downward crossing of a concave piece."""
        x = np.linspace(0, 2, 9)
        spline = Spline(x, 3 - x**2)

        roots = find_roots(spline)

        assert len(roots) == 1
        assert abs(roots[0].location - np.sqrt(3)) < 0.01
        assert roots[0].first_derivative < 0
        assert abs(spline(roots[0].location)) < 1e-10

    def test_several_roots(self):
        """Test that every crossing of a wave is found in order."""
        x = np.linspace(0, 2 * np.pi, 25)
        spline = Spline(x, np.sin(x - 0.3))

        locations = [r.location for r in find_roots(spline)]

        assert len(locations) == 2
        np.testing.assert_allclose(locations, [0.3, 0.3 + np.pi], atol=0.01)
        assert locations == sorted(locations)

    def test_zero_at_first_sample(self):
        """Test a root on the left end of the data."""
        spline = Spline([0.0, 1.0, 2.0], [0.0, 1.0, 4.0])

        roots = find_roots(spline)

        assert len(roots) == 1
        assert abs(roots[0].location) < 1e-12
        assert roots[0].first_derivative > 0

    def test_wave_through_samples(self):
        """Test that zeros on the sample grid are all found."""
        x = np.linspace(0, 2 * np.pi, 13)
        spline = Spline(x, np.sin(x))

        locations = [r.location for r in find_roots(spline)]

        np.testing.assert_allclose(locations, [0.0, np.pi], atol=1e-10)

    def test_zero_at_interior_sample(self):
        """Test that a zero on a knot between quadratic pieces is reported once."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        y = np.array([3.0, 1.0, 0.0, -0.5, -0.7])
        spline = Spline(x, y)

        roots = find_roots(spline)

        assert len(roots) == 1
        assert abs(roots[0].location - 2.0) < 1e-10
        assert abs(roots[0].first_derivative - spline(2.0, derivative_order=1)) < 1e-10

        both = find_roots(spline, RootTolerances(duplicate=0.0))
        assert len(both) == 2

    def test_zero_at_last_sample(self):
        """Test that a zero ending the final piece needs a boundary row."""
        x = [0.0, 1.0, 2.0]
        y = [4.0, 1.0, 0.0]

        curve = Spline(x, y)
        assert abs(curve(2.0)) < 1e-12
        assert find_roots(curve) == []

        roots = find_roots(Spline(x, y, extrapolation="linear"))
        assert len(roots) == 1
        assert abs(roots[0].location - 2.0) < 1e-10
        assert roots[0].first_derivative < 0

    def test_fields_are_floats(self):
        """Test that roots hold plain floats."""
        spline = Spline([0.0, 1.0, 2.0, 3.0, 4.0], [3.0, 1.0, 0.0, -0.5, -0.7])

        for root in find_roots(spline) + find_roots(spline - 0.5):
            assert all(type(value) is float for value in root)

    def test_no_roots(self):
        """Test a strictly positive spline."""
        x = np.linspace(1, 6, 11)
        spline = Spline(x, np.log(x) + np.sqrt(x))

        assert find_roots(spline) == []

    def test_single_piece(self):
        """Test that a single piece has no neighbour to compare against."""
        assert find_roots(Spline([5.0], [2.0])) == []
        assert find_roots(Spline([0.0, 1.0], [-1.0, 1.0])) == []

    def test_constant_piece_skipped(self):
        """Test that a flat piece next to a sign change does not divide by zero."""
        spline = Spline.from_table(
            [0.0, 1.0], [1.0, 2.0], [[0.0, 0.0, -1.0], [0.0, 1.0, 1.0]]
        )

        assert find_roots(spline) == []


class TestFindOptima:
    """Tests for optimum location and classification."""

    def test_single_maximum(self):
        """Test the peak of a concave parabola."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        spline = Spline(x, -(x - 2)**2)

        optima = find_optima(spline)

        assert len(optima) == 1
        assert abs(optima[0].location - 2.0) < 1e-8
        assert optima[0].kind is OptimumKind.MAXIMUM

    def test_each_optimum_classified(self):
        """Test that a maximum followed by a minimum keeps both kinds."""
        # Kinds are stored per optimum; a maximum must not relabel later entries
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        y = np.array([0.0, 1.0, 0.0, -1.0, 0.0])
        spline = Spline(x, y)

        optima = spline.optima()

        assert [o.kind for o in optima] == [OptimumKind.MAXIMUM, OptimumKind.MINIMUM]
        np.testing.assert_allclose([o.location for o in optima], [1.0, 3.0], atol=1e-8)

    def test_minimum_then_maximum(self):
        """Test the reverse ordering of kinds."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        y = np.array([0.0, -1.0, 0.0, 1.0, 0.0])

        optima = find_optima(Spline(x, y))

        assert [kind for _, kind in optima] == [OptimumKind.MINIMUM, OptimumKind.MAXIMUM]

    def test_saddle_point(self):
        """Test that vanishing curvature is classified as a saddle point."""
        # Derivative spline crosses zero at x = 1 with slope 1e-16
        spline = Spline.from_table(
            [0.0, 1.0], [1.0, 2.0], [[5e-17, -1e-16, 0.0], [0.0, 1.0, 0.0]]
        )

        optima = find_optima(spline)

        assert len(optima) == 1
        assert abs(optima[0].location - 1.0) < 1e-12
        assert optima[0].kind is OptimumKind.SADDLE_POINT

        strict = find_optima(spline, RootTolerances(classification=0.0))
        assert strict[0].kind is OptimumKind.MINIMUM

    def test_monotone_has_no_optima(self):
        """Test that monotonic data has no interior optima."""
        x = np.linspace(1, 6, 11)
        spline = Spline(x, np.log(x) + np.sqrt(x))

        assert find_optima(spline) == []


class TestRootTolerances:
    """Tests for tolerance configuration."""

    def test_defaults(self):
        tolerances = RootTolerances()
        assert tolerances.quadratic == 1e-13
        assert tolerances.duplicate == 1e-5
        assert tolerances.classification == 1e-15

    def test_frozen(self):
        with pytest.raises(AttributeError):
            RootTolerances().duplicate = 1.0

    def test_duplicate_tolerance_zero_keeps_knot_roots(self):
        """Test that disabling deduplication reports the knot root twice."""
        spline = Spline([0, 1, 2], [-1, 0, 1], extrapolation="linear")

        roots = find_roots(spline, RootTolerances(duplicate=0.0))

        assert len(roots) == 2
        np.testing.assert_allclose([r.location for r in roots], [1.0, 1.0])
