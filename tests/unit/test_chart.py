"""Unit tests for the chart stencil and finite-difference gradient."""

import pytest
import numpy as np
from auto_constraint.core.chart import Chart
from auto_constraint.variables import RealVariable, VectorVariable


class TestSampleAround:
    """Forward-difference stencil construction"""

    def test_one_sample_per_axis(self):
        """Should produce exactly `dimension` samples"""
        chart = VectorVariable([0.0, 0.0, 0.0])
        samples = chart.sample_around(np.array([1.0, 2.0, 3.0]), 0.5)
        assert len(samples) == 3

    def test_samples_offset_along_single_axis(self):
        """Sample i should equal center + distance * e_i"""
        chart = VectorVariable([0.0, 0.0, 0.0])
        center = np.array([1.0, 2.0, 3.0])
        samples = chart.sample_around(center, 0.5)

        for i, sample in enumerate(samples):
            expected = center.copy()
            expected[i] += 0.5
            np.testing.assert_allclose(sample, expected)

    def test_preserves_dimension(self):
        """Every sample should have the center's dimension"""
        chart = RealVariable(0.0)
        samples = chart.sample_around(np.array([4.0]), 0.1)
        assert [s.shape for s in samples] == [(1,)]

    def test_does_not_mutate_center(self):
        chart = VectorVariable([0.0, 0.0])
        center = np.array([1.0, 1.0])
        chart.sample_around(center, 2.0)
        np.testing.assert_array_equal(center, [1.0, 1.0])


class TestGradientAt:
    """Gradient estimation against known cost functions"""

    def test_scalar_quadratic(self):
        """(v - 3)^2 at 0 with distance 0.1: -(8.41 - 9) = 0.59"""
        chart = RealVariable(0.0)
        gradient = chart.gradient_at(np.array([0.0]), 0.1, lambda v: (v - 3) ** 2)
        np.testing.assert_allclose(gradient, [0.59])

    def test_two_dimensional_quadratic(self):
        """Each component should use its own axis sample"""
        chart = VectorVariable([0.0, 0.0])

        def cost(v):
            return (v[0] - 1) ** 2 + (v[1] + 2) ** 2

        gradient = chart.gradient_at(np.array([0.0, 0.0]), 0.1, cost)
        np.testing.assert_allclose(gradient, [0.19, -0.41])

    def test_offset_descends(self):
        """Adding the result to the center should lower the cost"""
        chart = VectorVariable([0.0, 0.0])

        def cost(v):
            return (v[0] - 1) ** 2 + (v[1] + 2) ** 2

        center = np.array([0.0, 0.0])
        gradient = chart.gradient_at(center, 0.1, cost)
        assert cost(center + gradient) < cost(center)

    def test_linear_cost_scale(self):
        """For a linear cost the offset equals minus the slope times distance"""
        chart = RealVariable(0.0)
        gradient = chart.gradient_at(np.array([5.0]), 2.0, lambda v: 3 * v)
        np.testing.assert_allclose(gradient, [-6.0])

    def test_constant_cost_has_zero_gradient(self):
        chart = VectorVariable([0.0, 0.0])
        gradient = chart.gradient_at(np.array([1.0, -1.0]), 0.5, lambda v: 5.0)
        np.testing.assert_array_equal(gradient, [0.0, 0.0])

    def test_cost_receives_values_not_coordinates(self):
        """Cost should be evaluated on from_vector() of each point"""

        class OffsetChart(Chart):
            def to_vector(self, value):
                return np.array([value - 100.0])

            def from_vector(self, vector):
                return float(vector[0]) + 100.0

        seen = []

        def cost(value):
            seen.append(value)
            return 0.0

        OffsetChart().gradient_at(np.array([1.0]), 0.5, cost)
        assert seen == [101.0, 101.5]


def test_cannot_instantiate_abstract_chart():
    with pytest.raises(TypeError):
        Chart()
