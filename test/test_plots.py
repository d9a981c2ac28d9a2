import matplotlib.pyplot as plt
import numpy as np

from constrained_mds.distances import distance_matrix
from constrained_mds.engine import majorize
from constrained_mds.plots import plot_stress_history, shepard_diagram


def test_shepard_diagram(three_four_five_2d):
    D = distance_matrix(three_four_five_2d)
    ax = shepard_diagram(three_four_five_2d, D)
    offsets = ax.collections[0].get_offsets()
    assert len(offsets) == 3
    # perfect reproduction sits on the identity line
    assert np.allclose(offsets[:, 0], offsets[:, 1])
    plt.close(ax.figure)


def test_plot_stress_history(equilateral_targets):
    W, D = equilateral_targets
    start = 2*np.array([[0., 0.], [1., 0.], [0.5, np.sqrt(3)/2]])
    result = majorize(start, W, D, max_iter=3, tol=1e-6)
    fig, ax = plt.subplots()
    returned = plot_stress_history(result, ax=ax)
    assert returned is ax
    assert len(ax.lines[0].get_ydata()) == len(result.stress_history)
    assert "exhausted" in ax.get_title()
    plt.close(fig)
