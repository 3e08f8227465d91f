"""Variable types with their charts."""

from auto_constraint.variables.real import RealVariable
from auto_constraint.variables.vector import VectorVariable
from auto_constraint.variables.angle import AngleVariable, AngleChart, wrap_angle
from auto_constraint.variables.rotation import RotationVariable, RotationChart

__all__ = [
    'RealVariable',
    'VectorVariable',
    'AngleVariable',
    'AngleChart',
    'wrap_angle',
    'RotationVariable',
    'RotationChart',
]
