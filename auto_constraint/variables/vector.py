"""
VectorVariable: a point in R^n with the identity chart.
"""

import numpy as np
from auto_constraint.core.chart import Chart
from auto_constraint.core.variable import Variable


class VectorVariable(Variable, Chart):
    """
    Fixed-dimension real vector variable (e.g. positions, RGB colours).

    Values are 1D float arrays. Assignment and the chart both copy, so a
    stored value never aliases a caller's array.

    Example:
        >>> position = VectorVariable([0.0, 0.0])
        >>> position.create_chart().to_vector(position.value)
        array([0., 0.])
    """

    @property
    def value(self) -> np.ndarray:
        return self._value

    @value.setter
    def value(self, value):
        value = np.array(value, dtype=float)
        if value.ndim != 1 or value.shape[0] == 0:
            raise ValueError("VectorVariable value must be a non-empty 1D array")
        self._value = value

    @property
    def dimension(self) -> int:
        return self.value.shape[0]

    def to_vector(self, value) -> np.ndarray:
        return np.array(value, dtype=float)

    def from_vector(self, vector: np.ndarray) -> np.ndarray:
        return np.array(vector, dtype=float)

    def create_chart(self) -> Chart:
        return self
