"""
One majorization (Guttman transform) step under a coordinate constraint.

Each point moves to the weighted average of the positions its neighbours
imply for it given the target distances. Pairs that currently sit closer
than ``EPSILON`` are left out of the average instead of dividing by a
near-zero distance. The step reads only the previous configuration and
writes a fresh array, so points can be processed in any order.
"""
import numpy as np

from constrained_mds.config import EPSILON


def majorize_point(index:int, previous:np.ndarray, weights:np.ndarray, target_distances:np.ndarray)->np.ndarray:
    """Unnormalized Guttman accumulator for one point, over every axis."""
    point = previous[index]
    denom = np.sqrt(np.sum((point - previous)**2, axis=1))
    neighbours = np.flatnonzero((np.arange(previous.shape[0]) != index) & (denom > EPSILON))
    others = previous[neighbours]
    ratio = target_distances[index, neighbours] / denom[neighbours]
    contributions = weights[index, neighbours, np.newaxis] * (others + ratio[:, np.newaxis] * (point - others))
    return np.sum(contributions, axis=0)


def guttman_update(previous:np.ndarray, initial:np.ndarray, weights:np.ndarray,
                   target_distances:np.ndarray, wsum:np.ndarray, constraint)->np.ndarray:
    """
    Build the next configuration from ``previous``.

    Free entries get ``accumulator / wsum[i]``; fixed entries are copied in by
    ``constraint.pin`` (from ``initial`` for an axis constraint, from the
    constraint's own values for a per-entry one). A zero ``wsum[i]`` for a
    point with a free entry gives inf / NaN, without a warning.
    """
    free = constraint.free_mask(previous.shape)
    updated = np.zeros_like(previous)
    constraint.pin(updated, initial)
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(previous.shape[0]):
            if not free[i].any():
                continue
            accumulator = majorize_point(i, previous, weights, target_distances)
            updated[i, free[i]] = accumulator[free[i]] / wsum[i]
    return updated
