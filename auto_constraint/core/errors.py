"""
Error taxonomy and result objects for cluster operations.

Cluster operations never raise for constraint outcomes. They return one of
the result objects below, which are truthy on success and carry a
ConstraintError on failure.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ConstraintError(Enum):
    """Why a cluster operation failed"""
    DUPLICATE_NAME = 'duplicate_name'
    UNKNOWN_VARIABLE = 'unknown_variable'
    SELF_CONSTRAINT = 'self_constraint'
    DUPLICATE_EDGE = 'duplicate_edge'
    CONVERGENCE_FAILURE = 'convergence_failure'


class ConvergenceWarning(UserWarning):
    """Emitted when a propagation pass aborts on a non-converging edge"""


Edge = Tuple[str, str]


@dataclass
class AddVariableResult:
    """
    Outcome of add_variable().

    Attributes:
        success: Whether the variable was registered
        node: Handle of the new node (None on failure)
        error: Failure reason (None on success)
    """
    success: bool
    node: Optional[object] = None
    error: Optional[ConstraintError] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass
class ConstraintResult:
    """
    Outcome of add_constraint().

    Attributes:
        success: Whether both directed edges were inserted
        edges: Directed edges actually inserted by this call. Registration
            is not atomic, so this can be non-empty on failure.
        error: Failure reason (None on success)
    """
    success: bool
    edges: List[Edge] = field(default_factory=list)
    error: Optional[ConstraintError] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass
class PropagationResult:
    """
    Outcome of set_value().

    Attributes:
        success: Whether every reached constraint converged
        visited: Node names in the order they were settled (the assigned
            variable first)
        steps: Mutating descent steps taken per processed edge
        failed_edge: Edge whose descent ran out of budget, if any
        error: Failure reason (None on success)
        message: Human-readable status
    """
    success: bool
    visited: List[str] = field(default_factory=list)
    steps: Dict[Edge, int] = field(default_factory=dict)
    failed_edge: Optional[Edge] = None
    error: Optional[ConstraintError] = None
    message: str = ''

    def __bool__(self) -> bool:
        return self.success
