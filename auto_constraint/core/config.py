"""
Propagator configuration.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PropagatorConfig:
    """
    Tuning for the bounded gradient descent run by one propagator.

    Attributes:
        alpha: Step scale. Each descent step uses a finite-difference
            distance of alpha * current_cost.
        max_error: Tolerance. The constraint counts as satisfied once the
            cost drops strictly below this value.
        max_step_count: Iteration budget for one descent.
    """
    alpha: float = 0.1
    max_error: float = 0.01
    max_step_count: int = 1000

    def __post_init__(self):
        if self.alpha <= 0:
            raise ValueError("alpha must be positive")
        if self.max_error <= 0:
            raise ValueError("max_error must be positive")
        if self.max_step_count < 1:
            raise ValueError("max_step_count must be at least 1")

    def replace(self, **changes) -> 'PropagatorConfig':
        """Return a copy with the given fields changed"""
        return replace(self, **changes)


DEFAULT_CONFIG = PropagatorConfig()
