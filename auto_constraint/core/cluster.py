"""
AutomaticConstraintCluster: graph container and propagation driver.

The cluster is responsible for:
  - Storing variables under unique names
  - Building symmetric propagator pairs for each constraint
  - Assigning values and relaxing the rest of the graph breadth-first
"""

import logging
import warnings
from collections import deque
from typing import Any, Callable, Dict, Iterator, List, Optional

from auto_constraint.core.config import DEFAULT_CONFIG, PropagatorConfig
from auto_constraint.core.errors import (
    AddVariableResult,
    ConstraintError,
    ConstraintResult,
    ConvergenceWarning,
    Edge,
    PropagationResult,
)
from auto_constraint.core.propagator import Propagator, VariableNode, descend
from auto_constraint.core.variable import Variable

logger = logging.getLogger(__name__)


class AutomaticConstraintCluster:
    """
    Manages a network of soft pairwise constraints.

    Usage:
        cluster = AutomaticConstraintCluster()
        cluster.add_variable('celsius', RealVariable(0))
        cluster.add_variable('fahrenheit', RealVariable(0))
        cluster.add_constraint('fahrenheit', 'celsius',
                               lambda f, c: abs(1.8 * c + 32 - f))
        if cluster.set_value('celsius', 100):
            print(cluster.get_value('fahrenheit'))  # ~212

    Names are the handles for every operation. Internally nodes live in an
    arena list and propagators refer to them by index.

    Not thread-safe: callers must serialize access to a cluster.
    """

    def __init__(self, default_config: PropagatorConfig = DEFAULT_CONFIG):
        self.default_config = default_config
        self._nodes: List[VariableNode] = []
        self._index: Dict[str, int] = {}

    def add_variable(self, name: str, variable: Variable) -> AddVariableResult:
        """
        Register a variable under a unique name.

        Args:
            name: Identifier used by all other operations
            variable: Variable instance (stays owned by the caller)

        Returns:
            Truthy result holding the new node, or a DUPLICATE_NAME failure
            that leaves the cluster unchanged.
        """
        if name in self._index:
            return AddVariableResult(False, error=ConstraintError.DUPLICATE_NAME)

        node = VariableNode(name, len(self._nodes), variable)
        self._nodes.append(node)
        self._index[name] = node.index
        return AddVariableResult(True, node=node)

    def add_constraint(self,
                       a: str,
                       b: str,
                       cost: Callable[[Any, Any], float],
                       config_ab: Optional[PropagatorConfig] = None,
                       config_ba: Optional[PropagatorConfig] = None) -> ConstraintResult:
        """
        Register a soft constraint cost(a_value, b_value) between two variables.

        Creates two propagators: a->b adjusts b against a's value at the time
        it runs, b->a adjusts a against b's value.

        Args:
            a: Name of the variable passed as cost's first argument
            b: Name of the variable passed as cost's second argument
            cost: Non-negative violation measure, 0 when satisfied
            config_ab: Tuning for the a->b propagator (default_config if None)
            config_ba: Tuning for the b->a propagator (default_config if None)

        Returns:
            Truthy result when both edges were inserted. Insertion is not
            atomic: if the second edge is a duplicate, the first one stays
            and is reported in `edges`.
        """
        if a == b:
            return ConstraintResult(False, error=ConstraintError.SELF_CONSTRAINT)
        if a not in self._index or b not in self._index:
            return ConstraintResult(False, error=ConstraintError.UNKNOWN_VARIABLE)

        a_node = self._nodes[self._index[a]]
        b_node = self._nodes[self._index[b]]
        forward = Propagator(a_node.index, b_node.index, cost,
                             target_is_second=True,
                             config=config_ab or self.default_config)
        backward = Propagator(b_node.index, a_node.index, cost,
                              target_is_second=False,
                              config=config_ba or self.default_config)

        edges: List[Edge] = []
        if not a_node.connect(forward):
            return ConstraintResult(False, edges, ConstraintError.DUPLICATE_EDGE)
        edges.append((a, b))
        if not b_node.connect(backward):
            return ConstraintResult(False, edges, ConstraintError.DUPLICATE_EDGE)
        edges.append((b, a))

        return ConstraintResult(True, edges)

    def set_value(self,
                  name: str,
                  value: Any,
                  config: Optional[PropagatorConfig] = None) -> PropagationResult:
        """
        Assign a value and propagate it through the graph.

        The named variable is written directly. Its outbound propagators
        seed a FIFO frontier; each one runs bounded gradient descent on its
        target, and once a target converges it is settled and its own
        outbound edges to unsettled nodes are queued. Every reachable node is
        settled at most once per call, so constraints between nodes settled
        earlier are not re-checked.

        Args:
            name: Variable to assign
            value: New value (taken as authoritative)
            config: Overrides every propagator's config for this call only

        Returns:
            Truthy result on success. On UNKNOWN_VARIABLE nothing is changed.
            On CONVERGENCE_FAILURE propagation stops at the failing edge and
            values written so far are kept (no rollback).
        """
        index = self._index.get(name)
        if index is None:
            return PropagationResult(
                False,
                error=ConstraintError.UNKNOWN_VARIABLE,
                message=f"Unknown variable '{name}'",
            )

        origin = self._nodes[index]
        origin.variable.value = value

        settled = {index}
        visited = [name]
        steps: Dict[Edge, int] = {}
        frontier = deque(origin.propagators.values())

        while frontier:
            propagator = frontier.popleft()
            # Queued before its target was settled through another edge
            if propagator.target in settled:
                continue

            source = self._nodes[propagator.source]
            target = self._nodes[propagator.target]
            edge = (source.name, target.name)
            edge_config = config or propagator.config

            converged, count, last_cost = descend(
                target.variable, propagator.bind(source.value), edge_config
            )
            steps[edge] = count

            if not converged:
                message = (
                    f"Propagation {source.name} -> {target.name} did not converge "
                    f"within {edge_config.max_step_count} steps "
                    f"(cost {last_cost:g}, max_error {edge_config.max_error:g})"
                )
                warnings.warn(message, ConvergenceWarning, stacklevel=2)
                return PropagationResult(
                    False,
                    visited=visited,
                    steps=steps,
                    failed_edge=edge,
                    error=ConstraintError.CONVERGENCE_FAILURE,
                    message=message,
                )

            logger.debug("Settled %s from %s in %d steps (cost %g)",
                         target.name, source.name, count, last_cost)
            settled.add(target.index)
            visited.append(target.name)
            frontier.extend(
                p for p in target.propagators.values() if p.target not in settled
            )

        return PropagationResult(
            True,
            visited=visited,
            steps=steps,
            message=f"Settled {len(visited)} variable(s)",
        )

    def node(self, name: str) -> Optional[VariableNode]:
        """Look up a node handle by name (None if absent)"""
        index = self._index.get(name)
        return None if index is None else self._nodes[index]

    def get_value(self, name: str) -> Any:
        """
        Current value of a variable.

        Raises:
            KeyError: If no variable has this name
        """
        if name not in self._index:
            raise KeyError(f"Unknown variable '{name}'")
        return self._nodes[self._index[name]].value

    def propagator(self, source: str, target: str) -> Optional[Propagator]:
        """Directed edge source -> target, or None"""
        if source not in self._index or target not in self._index:
            return None
        node = self._nodes[self._index[source]]
        return node.propagators.get(self._index[target])

    def neighbors(self, name: str) -> List[str]:
        """
        Names reachable over one outbound edge, in edge insertion order.

        Raises:
            KeyError: If no variable has this name
        """
        if name not in self._index:
            raise KeyError(f"Unknown variable '{name}'")
        node = self._nodes[self._index[name]]
        return [self._nodes[target].name for target in node.propagators]

    def constraints(self) -> Iterator[Edge]:
        """All directed edges as (source, target) name pairs"""
        for node in self._nodes:
            for target in node.propagators:
                yield node.name, self._nodes[target].name

    @property
    def names(self) -> List[str]:
        return [node.name for node in self._nodes]

    def __contains__(self, name: str) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        edge_count = sum(len(node.propagators) for node in self._nodes)
        return (f"AutomaticConstraintCluster({len(self._nodes)} variables, "
                f"{edge_count} propagators)")
