"""One-way constraint networks driven by numerical gradient descent."""

from auto_constraint.core import (
    AutomaticConstraintCluster,
    Chart,
    ConstraintError,
    ConvergenceWarning,
    PropagatorConfig,
    Variable,
)
from auto_constraint.variables import (
    AngleVariable,
    RealVariable,
    RotationVariable,
    VectorVariable,
)

__version__ = '0.1.0'

__all__ = [
    'AutomaticConstraintCluster',
    'Chart',
    'ConstraintError',
    'ConvergenceWarning',
    'PropagatorConfig',
    'Variable',
    'AngleVariable',
    'RealVariable',
    'RotationVariable',
    'VectorVariable',
]
