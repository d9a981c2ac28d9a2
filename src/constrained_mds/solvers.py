"""
Public solve entry points.

All of them copy the starting configuration, run the majorization loop and
hand back either the final n x d array or, with ``return_result=True``, the
full ``MajorizationResult`` (iterations used, stop reason, stress trace).
"""
from numbers import Real

import numpy as np

from constrained_mds.config import DEFAULT_MAX_ITER, DEFAULT_TOL
from constrained_mds.constraints import AxisFixed, PerEntryFixed, Unconstrained
from constrained_mds.engine import majorize
from constrained_mds.stress import stress
from constrained_mds.validation import validate_problem


def evaluate_stress(configuration, weights, target_distances)->float:
    return float(stress(np.asarray(configuration, dtype=float),
                        np.asarray(weights, dtype=float),
                        np.asarray(target_distances, dtype=float)))


def _is_numeric(fixed_coordinates)->bool:
    if isinstance(fixed_coordinates, np.ndarray):
        return fixed_coordinates.dtype != object
    ## a flat list of numbers counts as numeric so that from_matrix rejects it
    return all(isinstance(entry, Real)
               for row in fixed_coordinates
               for entry in (row if np.iterable(row) else [row]))


def _solve(initial, constraint, weights, target_distances, max_iter, tol, return_result, check_input):
    if check_input:
        validate_problem(initial, weights, target_distances, constraint)
    result = majorize(initial, weights, target_distances, constraint, max_iter, tol)
    return result if return_result else result.configuration


def solve_unconstrained(initial, weights, target_distances, max_iter:int = DEFAULT_MAX_ITER,
                        tol:float = DEFAULT_TOL, *, return_result:bool = False, check_input:bool = False):
    return _solve(initial, Unconstrained(), weights, target_distances,
                  max_iter, tol, return_result, check_input)


def solve_axis_fixed(initial, fixed_axis:int, weights, target_distances, max_iter:int = DEFAULT_MAX_ITER,
                     tol:float = DEFAULT_TOL, *, return_result:bool = False, check_input:bool = False):
    """
    Majorize with one axis held at its starting value.

    ``fixed_axis`` is 1-based: 1 pins the first column of ``initial``, 2 the
    second, 3 the third (3-D only). The pinned column of the output equals
    the starting column exactly.
    """
    return _solve(initial, AxisFixed.from_one_based(fixed_axis), weights, target_distances,
                  max_iter, tol, return_result, check_input)


def solve_fully_constrained(initial, fixed_coordinates, weights, target_distances,
                            max_iter:int = DEFAULT_MAX_ITER, tol:float = DEFAULT_TOL, *,
                            return_result:bool = False, check_input:bool = False):
    """
    Majorize with an arbitrary set of coordinates pinned.

    ``fixed_coordinates`` has the shape of ``initial`` and is either a
    ``PerEntryFixed``, a grid of ``Fixed(value)`` / ``FREE`` entries, or a
    purely numeric matrix with NaN meaning free. Pinned entries take their given
    value on every iteration; free ones are recomputed.
    """
    if isinstance(fixed_coordinates, PerEntryFixed):
        constraint = fixed_coordinates
    elif _is_numeric(fixed_coordinates):
        constraint = PerEntryFixed.from_matrix(fixed_coordinates)
    else:
        constraint = PerEntryFixed(fixed_coordinates)
    return _solve(initial, constraint, weights, target_distances, max_iter, tol, return_result, check_input)
