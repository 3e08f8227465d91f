"""
AngleVariable: a point on the circle, charted locally.

Angles have no global chart that is continuous everywhere, so each chart
is centred on the angle it was created at and measures the wrapped offset
from it. Cost functions then see a smooth coordinate across the -pi/pi seam.
"""

import math
import numpy as np
from auto_constraint.core.chart import Chart
from auto_constraint.core.variable import Variable


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians to [-pi, pi)"""
    return (angle + math.pi) % (2 * math.pi) - math.pi


class AngleChart(Chart):
    """
    Local chart on the circle.

    Attributes:
        base: Angle at which the chart is centred (coordinate 0)

    Round-trip holds for angles within pi of the base.
    """

    def __init__(self, base: float):
        self.base = wrap_angle(base)

    def to_vector(self, value: float) -> np.ndarray:
        return np.array([wrap_angle(value - self.base)])

    def from_vector(self, vector: np.ndarray) -> float:
        return wrap_angle(self.base + float(vector[0]))


class AngleVariable(Variable):
    """
    Angle in radians, stored wrapped to [-pi, pi).

    Example:
        >>> heading = AngleVariable(math.radians(350))
        >>> round(math.degrees(heading.value))
        -10
    """

    def __init__(self, value: float = 0.0):
        super().__init__(value)

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float):
        self._value = wrap_angle(value)

    def create_chart(self) -> Chart:
        return AngleChart(self.value)
