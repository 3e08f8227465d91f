"""
Variable: a mutable value holder that can parameterize itself.
"""

from abc import ABC, abstractmethod
from typing import Any

from auto_constraint.core.chart import Chart


class Variable(ABC):
    """
    Abstract base class for constrained variables.

    Subclasses must implement create_chart(), returning a chart that covers
    a neighbourhood of the current value.

    Attributes:
        value: Current value. Written by client code before registration,
            afterwards only by the cluster (directly for the assigned
            variable, by gradient descent for its neighbours).
    """

    def __init__(self, value: Any):
        self.value = value

    @abstractmethod
    def create_chart(self) -> Chart:
        """
        Create a chart around the current value.

        Called once per descent step, so charts may depend on self.value.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
