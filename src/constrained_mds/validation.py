"""
Opt-in checks for solve inputs.

The solvers themselves trust their inputs and let bad numbers propagate;
run ``validate_problem`` first when the inputs come from outside.
"""
import numpy as np

from constrained_mds.config import SUPPORTED_DIMS
from constrained_mds.constraints import AxisFixed, PerEntryFixed
from constrained_mds.distances import row_weight_sums
from constrained_mds.exceptions import InvalidProblemError


def _check_square(name:str, matrix:np.ndarray, n_points:int)->None:
    if matrix.shape != (n_points, n_points):
        raise InvalidProblemError(f"{name} must have shape ({n_points}, {n_points}), got {matrix.shape}")
    if not np.allclose(matrix, matrix.T, equal_nan=True):
        raise InvalidProblemError(f"{name} must be symmetric")
    off_diagonal = matrix[~np.eye(n_points, dtype=bool)]
    if np.any(off_diagonal < 0):
        raise InvalidProblemError(f"{name} must be nonnegative")


def validate_problem(configuration, weights, target_distances, constraint=None)->None:
    configuration = np.asarray(configuration, dtype=float)
    weights = np.asarray(weights, dtype=float)
    target_distances = np.asarray(target_distances, dtype=float)

    if configuration.ndim != 2:
        raise InvalidProblemError(f"configuration must be 2-D, got shape {configuration.shape}")
    n_points, n_dims = configuration.shape
    if n_points < 1:
        raise InvalidProblemError("configuration has no points")
    if n_dims not in SUPPORTED_DIMS:
        raise InvalidProblemError(f"configuration must have {SUPPORTED_DIMS} columns, got {n_dims}")
    _check_square("weights", weights, n_points)
    _check_square("target distances", target_distances, n_points)

    if isinstance(constraint, AxisFixed) and constraint.axis >= n_dims:
        raise InvalidProblemError(f"fixed axis {constraint.axis + 1} out of range for {n_dims} dimensions")
    if isinstance(constraint, PerEntryFixed) and constraint.shape != configuration.shape:
        raise InvalidProblemError(
            f"fixed-coordinate matrix shape {constraint.shape} does not match configuration {configuration.shape}")

    if n_points > 1:
        free = constraint.free_mask(configuration.shape) if constraint is not None \
            else np.ones(configuration.shape, dtype=bool)
        starved = np.flatnonzero(free.any(axis=1) & ~(row_weight_sums(weights) > 0))
        if starved.size:
            raise InvalidProblemError(f"points {starved.tolist()} have free coordinates but zero total weight")
