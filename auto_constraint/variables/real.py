"""
RealVariable: a scalar that serves as its own chart.
"""

import numpy as np
from auto_constraint.core.chart import Chart
from auto_constraint.core.variable import Variable


class RealVariable(Variable, Chart):
    """
    Real-valued scalar variable.

    The chart is the identity on R^1:
        to_vector(v) = [v]
        from_vector(x) = x[0]

    Example:
        >>> celsius = RealVariable(0.0)
        >>> cluster.add_variable('celsius', celsius)
    """

    def __init__(self, value: float = 0.0):
        super().__init__(float(value))

    def to_vector(self, value: float) -> np.ndarray:
        return np.array([value], dtype=float)

    def from_vector(self, vector: np.ndarray) -> float:
        return float(vector[0])

    def create_chart(self) -> Chart:
        return self
