"""
RotationVariable: a 3D orientation, charted by rotation vectors.

Uses scipy.spatial.transform.Rotation for the group operations. The chart
at a base rotation R0 maps R to the rotation vector of R * R0^-1, i.e. the
axis-angle of the rotation that carries R0 to R.
"""

from typing import Optional

import numpy as np
from scipy.spatial.transform import Rotation
from auto_constraint.core.chart import Chart
from auto_constraint.core.variable import Variable


class RotationChart(Chart):
    """
    Exponential-map chart centred on `base`.

    Round-trip holds for rotations less than pi away from the base.
    """

    def __init__(self, base: Rotation):
        self.base = base
        self._base_inv = base.inv()

    def to_vector(self, value: Rotation) -> np.ndarray:
        return (value * self._base_inv).as_rotvec()

    def from_vector(self, vector: np.ndarray) -> Rotation:
        return Rotation.from_rotvec(np.asarray(vector, dtype=float)) * self.base


class RotationVariable(Variable):
    """
    Orientation variable holding a single scipy Rotation.

    Example:
        >>> camera = RotationVariable(Rotation.from_euler('z', 90, degrees=True))
        >>> rig = RotationVariable()
        >>> cluster.add_constraint('camera', 'rig',
        ...                        lambda a, b: (a * b.inv()).magnitude())
    """

    def __init__(self, value: Optional[Rotation] = None):
        if value is None:
            value = Rotation.identity()
        super().__init__(value)

    @property
    def value(self) -> Rotation:
        return self._value

    @value.setter
    def value(self, value: Rotation):
        if not value.single:
            raise ValueError("RotationVariable holds a single rotation")
        self._value = value

    def create_chart(self) -> Chart:
        return RotationChart(self.value)
