"""
Fixed-point loop around the Guttman step.

The loop stops as soon as the relative stress improvement
``(old - new) / old`` drops to ``tol`` or below. A step that *raises* the
stress has a negative improvement and therefore also stops the loop, and
the worse configuration is the one returned. Callers that care can
compare ``stress_history[-2:]``.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

import numpy as np
from loguru import logger

from constrained_mds.config import DEFAULT_MAX_ITER, DEFAULT_TOL
from constrained_mds.constraints import Unconstrained
from constrained_mds.distances import row_weight_sums
from constrained_mds.guttman import guttman_update
from constrained_mds.stress import stress


class Status(Enum):
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"


@dataclass
class MajorizationResult:
    """
    Outcome of one solve.

    Attributes:
        configuration  - final n x d configuration
        stress         - stress of ``configuration``
        n_iter         - Guttman updates computed (0 when ``max_iter`` is 0)
        status         - CONVERGED if the tolerance test fired, else EXHAUSTED
        stress_history - starting stress, then the stress after each update
    """
    configuration: np.ndarray
    stress: float
    n_iter: int
    status: Status
    stress_history: List[float] = field(default_factory=list)

    @property
    def converged(self)->bool:
        return self.status is Status.CONVERGED


class MajorizationEngine:
    """Holds the fixed inputs of one solve; ``run`` does the iteration."""

    def __init__(self, weights, target_distances, constraint=None,
                 max_iter:int = DEFAULT_MAX_ITER, tol:float = DEFAULT_TOL):
        self.weights = np.asarray(weights, dtype=float)
        self.target_distances = np.asarray(target_distances, dtype=float)
        self.constraint = constraint if constraint is not None else Unconstrained()
        self.max_iter = max_iter
        self.tol = tol
        self.wsum = row_weight_sums(self.weights)

    def _stress(self, configuration:np.ndarray)->float:
        return float(stress(configuration, self.weights, self.target_distances))

    def run(self, initial)->MajorizationResult:
        # private copy; the caller's array is never written or aliased
        initial = np.array(initial, dtype=float)
        configuration = initial.copy()
        old_stress = self._stress(configuration)
        history = [old_stress]
        logger.info(f"Starting Stress: {old_stress} ({initial.shape[0]} points, {self.constraint})")

        if initial.shape[0] < 2:
            return MajorizationResult(configuration, old_stress, 0, Status.EXHAUSTED, history)

        for iteration in range(self.max_iter):
            new_configuration = guttman_update(configuration, initial, self.weights,
                                               self.target_distances, self.wsum, self.constraint)
            new_stress = self._stress(new_configuration)
            history.append(new_stress)
            with np.errstate(divide="ignore", invalid="ignore"):
                improvement = np.divide(old_stress - new_stress, old_stress)
            logger.debug(f"iteration {iteration}: stress {new_stress}, relative improvement {improvement}")

            if improvement <= self.tol:
                if new_stress > old_stress:
                    logger.debug(f"stress went up from {old_stress} to {new_stress}; stopping")
                logger.info(f"Converged after {iteration + 1} iterations, stress: {new_stress}")
                return MajorizationResult(new_configuration, new_stress, iteration + 1,
                                          Status.CONVERGED, history)
            old_stress = new_stress
            configuration = new_configuration

        logger.info(f"Iteration budget of {self.max_iter} used up, stress: {old_stress}")
        return MajorizationResult(configuration, old_stress, self.max_iter, Status.EXHAUSTED, history)


def majorize(initial, weights, target_distances, constraint=None,
             max_iter:int = DEFAULT_MAX_ITER, tol:float = DEFAULT_TOL)->MajorizationResult:
    return MajorizationEngine(weights, target_distances, constraint, max_iter, tol).run(initial)
