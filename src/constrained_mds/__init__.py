from loguru import logger

from constrained_mds.config import DEFAULT_MAX_ITER, DEFAULT_TOL, EPSILON, enable_logging
from constrained_mds.constraints import FREE, AxisFixed, Fixed, PerEntryFixed, Unconstrained
from constrained_mds.engine import MajorizationEngine, MajorizationResult, Status, majorize
from constrained_mds.exceptions import InvalidProblemError
from constrained_mds.guttman import guttman_update
from constrained_mds.solvers import (
    evaluate_stress,
    solve_axis_fixed,
    solve_fully_constrained,
    solve_unconstrained,
)
from constrained_mds.stress import normalized_stress, stress, stress_gradient
from constrained_mds.validation import validate_problem

## quiet inside host applications until enable_logging() is called
logger.disable("constrained_mds")

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOL",
    "EPSILON",
    "FREE",
    "AxisFixed",
    "Fixed",
    "InvalidProblemError",
    "MajorizationEngine",
    "MajorizationResult",
    "PerEntryFixed",
    "Status",
    "Unconstrained",
    "enable_logging",
    "evaluate_stress",
    "guttman_update",
    "majorize",
    "normalized_stress",
    "solve_axis_fixed",
    "solve_fully_constrained",
    "solve_unconstrained",
    "stress",
    "stress_gradient",
    "validate_problem",
]
