"""
Charts: local coordinate maps between a value domain and R^n.

A chart linearizes a value type around some point so that an arbitrary
scalar cost over that type can be differentiated numerically. Charts are
transient: a variable creates a fresh one for every descent step, so the
coordinates always describe a neighbourhood of the current value.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List
import numpy as np


class Chart(ABC):
    """
    Base class for all charts.

    Subclasses must implement:
        - to_vector(): value -> point in R^n
        - from_vector(): point in R^n -> value

    The two maps must be mutual inverses on the values the chart covers:
        from_vector(to_vector(v)) == v
    (within floating tolerance for continuous types).
    """

    @abstractmethod
    def to_vector(self, value: Any) -> np.ndarray:
        """Map a value to its coordinates (1D float array)"""
        pass

    @abstractmethod
    def from_vector(self, vector: np.ndarray) -> Any:
        """Map coordinates back to a value"""
        pass

    def sample_around(self, center: np.ndarray, distance: float) -> List[np.ndarray]:
        """
        Forward-difference stencil around a point.

        Args:
            center: Point in chart coordinates
            distance: Offset applied along each axis

        Returns:
            One sample per axis, in axis order 0..n-1. Sample i equals
            center + distance * e_i.
        """
        center = np.asarray(center, dtype=float)
        dimension = center.shape[0]
        samples = []
        for i in range(dimension):
            offset = np.zeros(dimension)
            offset[i] = distance
            samples.append(center + offset)
        return samples

    def gradient_at(self,
                    center: np.ndarray,
                    distance: float,
                    cost: Callable[[Any], float]) -> np.ndarray:
        """
        Estimate a descent offset for `cost` at `center`.

        For each axis sample s the weight is cost(s) - cost(center), and the
        result is -sum((s - center) * weight) / distance. Adding the result
        to `center` moves downhill, with a step proportional to the local
        slope.

        Args:
            center: Point in chart coordinates
            distance: Finite-difference step (must be nonzero)
            cost: Scalar cost over values (not coordinates)

        Returns:
            Offset vector with the same dimension as `center`.
        """
        center = np.asarray(center, dtype=float)
        samples = self.sample_around(center, distance)
        gradient = np.zeros(center.shape[0])
        center_cost = cost(self.from_vector(center))

        for sample in samples:
            weight = cost(self.from_vector(sample)) - center_cost
            gradient -= (sample - center) * weight

        return gradient / distance
