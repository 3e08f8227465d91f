"""Core abstractions for the constraint propagation engine."""

from auto_constraint.core.chart import Chart
from auto_constraint.core.variable import Variable
from auto_constraint.core.config import PropagatorConfig, DEFAULT_CONFIG
from auto_constraint.core.errors import (
    ConstraintError,
    ConvergenceWarning,
    AddVariableResult,
    ConstraintResult,
    PropagationResult,
)
from auto_constraint.core.propagator import Propagator, VariableNode, descend
from auto_constraint.core.cluster import AutomaticConstraintCluster

__all__ = [
    'Chart',
    'Variable',
    'PropagatorConfig',
    'DEFAULT_CONFIG',
    'ConstraintError',
    'ConvergenceWarning',
    'AddVariableResult',
    'ConstraintResult',
    'PropagationResult',
    'Propagator',
    'VariableNode',
    'descend',
    'AutomaticConstraintCluster',
]
