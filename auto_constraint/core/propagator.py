"""
Graph nodes, directed propagators and the per-edge descent loop.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

from auto_constraint.core.config import PropagatorConfig
from auto_constraint.core.variable import Variable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Propagator:
    """
    Directed edge pulling `target` toward satisfying a pairwise constraint.

    The cost is stored as the binary function cost(a, b) together
    with which side the target occupies. The source value is read from the
    live variable when the edge is processed, see bind().

    Attributes:
        source: Arena index of the node whose value is held fixed
        target: Arena index of the node being adjusted
        cost: Binary cost function cost(a, b) -> float >= 0
        target_is_second: True when the target plays `b` in cost(a, b)
        config: Descent tuning for this edge
    """
    source: int
    target: int
    cost: Callable[[Any, Any], float] = field(compare=False)
    target_is_second: bool = True
    config: PropagatorConfig = field(default_factory=PropagatorConfig)

    def bind(self, source_value: Any) -> Callable[[Any], float]:
        """Fix the source side, leaving a unary cost over target values"""
        if self.target_is_second:
            return lambda value: self.cost(source_value, value)
        return lambda value: self.cost(value, source_value)


@dataclass
class VariableNode:
    """
    A named variable inside a cluster.

    Attributes:
        name: Unique name within the owning cluster
        index: Position in the cluster's node arena
        variable: The wrapped variable (owned by client code)
        propagators: Outbound edges keyed by target index, in insertion order
    """
    name: str
    index: int
    variable: Variable = field(repr=False)
    propagators: Dict[int, Propagator] = field(default_factory=dict, repr=False)

    @property
    def value(self) -> Any:
        return self.variable.value

    def connect(self, propagator: Propagator) -> bool:
        """
        Register an outbound propagator.

        Returns:
            False (and leaves the node unchanged) when the propagator starts
            elsewhere, points back at this node, or duplicates an existing
            edge to the same target.
        """
        if propagator.source != self.index or propagator.target == self.index:
            return False
        if propagator.target in self.propagators:
            return False
        self.propagators[propagator.target] = propagator
        return True


def descend(variable: Variable,
            cost: Callable[[Any], float],
            config: PropagatorConfig) -> Tuple[bool, int, float]:
    """
    Bounded gradient descent on one variable.

    Each step re-creates the variable's chart at its current value and
    moves by the chart's finite-difference offset, using a sample distance
    of config.alpha * cost. Larger error means larger steps; there is no
    line search, so divergence shows up as an exhausted budget.

    Args:
        variable: Variable to adjust in place
        cost: Unary cost over the variable's values
        config: Step scale, tolerance and iteration budget

    Returns:
        (converged, steps, last_cost) where steps counts mutating steps and
        last_cost is the most recent cost evaluated before returning.
    """
    for step in range(config.max_step_count):
        current_cost = cost(variable.value)
        if current_cost < config.max_error:
            return True, step, current_cost

        chart = variable.create_chart()
        coordinates = chart.to_vector(variable.value)
        offset = chart.gradient_at(coordinates, config.alpha * current_cost, cost)
        variable.value = chart.from_vector(coordinates + offset)

    logger.debug("Descent exhausted %d steps at cost %g",
                 config.max_step_count, current_cost)
    return False, config.max_step_count, current_cost
