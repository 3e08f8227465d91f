"""Integration test: Kelvin / Celsius / Fahrenheit conversion network."""

import pytest
from auto_constraint import (
    AutomaticConstraintCluster,
    ConvergenceWarning,
    PropagatorConfig,
    RealVariable,
)


def fahrenheit_celsius(f, c):
    return abs(1.8 * c + 32 - f)


def kelvin_celsius(k, c):
    return abs(k - 273 - c)


def build_temperature_cluster():
    """Helper: kelvin - celsius - fahrenheit, all starting at 0"""
    cluster = AutomaticConstraintCluster()

    for name in ('kelvin', 'celsius', 'fahrenheit'):
        cluster.add_variable(name, RealVariable(0))

    assert cluster.add_constraint('fahrenheit', 'celsius', fahrenheit_celsius)
    assert cluster.add_constraint('kelvin', 'celsius', kelvin_celsius)
    return cluster


@pytest.fixture
def temperatures():
    return build_temperature_cluster()


def test_freezing_point_from_fahrenheit(temperatures):
    """Setting 32F should give 0C and 273K"""
    result = temperatures.set_value('fahrenheit', 32)

    assert result
    assert result.visited == ['fahrenheit', 'celsius', 'kelvin']
    assert result.steps[('fahrenheit', 'celsius')] == 0
    assert temperatures.get_value('fahrenheit') == 32
    assert temperatures.get_value('celsius') == pytest.approx(0, abs=0.01)
    assert temperatures.get_value('kelvin') == pytest.approx(273, abs=0.01)


def test_boiling_point_from_celsius():
    """32F then 100C on the two-node graph should give 212F"""
    cluster = AutomaticConstraintCluster()
    cluster.add_variable('fahrenheit', RealVariable(0))
    cluster.add_variable('celsius', RealVariable(0))
    cluster.add_constraint('fahrenheit', 'celsius', fahrenheit_celsius)

    assert cluster.set_value('fahrenheit', 32)
    assert cluster.set_value('celsius', 100)

    assert cluster.get_value('fahrenheit') == pytest.approx(212, abs=0.01)


def test_kelvin_drives_both_scales(temperatures):
    result = temperatures.set_value('kelvin', 373)

    assert result
    assert result.visited == ['kelvin', 'celsius', 'fahrenheit']
    assert temperatures.get_value('celsius') == pytest.approx(100, abs=0.01)
    # Two hops: celsius error is amplified by 1.8 on the way to fahrenheit
    assert temperatures.get_value('fahrenheit') == pytest.approx(212, abs=0.05)


def test_constraints_hold_after_each_assignment(temperatures):
    for name, value in [('fahrenheit', 50), ('celsius', -40), ('kelvin', 300)]:
        assert temperatures.set_value(name, value)

        k = temperatures.get_value('kelvin')
        c = temperatures.get_value('celsius')
        f = temperatures.get_value('fahrenheit')
        assert fahrenheit_celsius(f, c) < 0.01
        assert kelvin_celsius(k, c) < 0.01


def test_tight_budget_fails(temperatures):
    """A 273 degree gap cannot close in 5 steps"""
    with pytest.warns(ConvergenceWarning):
        result = temperatures.set_value(
            'fahrenheit', 32, config=PropagatorConfig(max_step_count=5)
        )

    assert not result
    assert result.failed_edge == ('celsius', 'kelvin')
    assert result.visited == ['fahrenheit', 'celsius']


def test_unsatisfiable_constant_cost():
    """Constant cost 5 fails after the full default budget"""
    cluster = AutomaticConstraintCluster()
    cluster.add_variable('x', RealVariable(0))
    cluster.add_variable('y', RealVariable(0))
    cluster.add_constraint('x', 'y', lambda x, y: 5)

    with pytest.warns(ConvergenceWarning, match="within 1000 steps"):
        result = cluster.set_value('x', 1)

    assert not result
    assert result.steps[('x', 'y')] == 1000
