"""
Weighted raw stress and its derivatives.

Written against ``autograd.numpy`` so that the objective minimized by the
majorization loop can also be differentiated directly.
"""
import autograd.numpy as np
from autograd import grad


def _pair_indices(n_points:int):
    return np.triu_indices(n_points, k=1)


def stress(configuration, weights, target_distances):
    """Sum over pairs i < j of ``W[i, j] * (dist(x_i, x_j) - D[i, j])**2``; needs two or more points."""
    rows, cols = _pair_indices(configuration.shape[0])
    diffs = configuration[rows] - configuration[cols]
    realized = np.sqrt(np.sum(diffs**2, axis=1))
    return np.sum(weights[rows, cols] * (realized - target_distances[rows, cols])**2)


## d(stress)/dX; NaN rows appear when two points coincide
stress_gradient = grad(stress, 0)


def normalized_stress(configuration, weights, target_distances):
    # Kruskal-style: raw stress over the weighted sum of squared targets
    rows, cols = _pair_indices(configuration.shape[0])
    Tstar = np.sum(weights[rows, cols] * target_distances[rows, cols]**2)
    if Tstar == 0:
        return 0.0
    Sstar = stress(configuration, weights, target_distances)
    return np.sqrt(Sstar / Tstar)
