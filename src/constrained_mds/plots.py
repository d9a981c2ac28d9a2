"""Diagnostic figures; callers decide whether to show or save them."""
import matplotlib.pyplot as plt
import numpy as np

from constrained_mds.distances import get_pairwise_distances, upper_triangle


def _axes(ax, figsize):
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    return ax


def shepard_diagram(configuration, target_distances, ax=None):
    """Scatter realized pairwise distances against the targets."""
    ax = _axes(ax, (8, 8))
    realized = get_pairwise_distances(np.asarray(configuration, dtype=float))
    targets = upper_triangle(np.asarray(target_distances, dtype=float))
    ax.scatter(targets, realized, s=12)
    top = max(float(np.max(targets, initial=0.0)), float(np.max(realized, initial=0.0)))
    ax.plot([0, top], [0, top], color="grey", linestyle="--", linewidth=1)
    ax.set_xlabel("target distance")
    ax.set_ylabel("configuration distance")
    ax.set_title("Shepard Diagram")
    return ax


def plot_stress_history(result, ax=None):
    ax = _axes(ax, (16, 9))
    history = result.stress_history
    ax.plot(list(range(len(history))), history, marker="o")
    ax.set_xlabel("iteration")
    ax.set_ylabel("stress")
    ax.set_title(f"STRESS ({result.status.value} after {result.n_iter} iterations)")
    return ax
