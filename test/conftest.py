import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from constrained_mds.distances import distance_matrix


@pytest.fixture
def three_four_five_2d():
    three_four_five = np.array([[0.,0.], [0.,4.,], [3.,4.]])
    return three_four_five


@pytest.fixture
def equilateral_targets():
    D = np.ones((3, 3)) - np.eye(3)
    W = np.ones((3, 3)) - np.eye(3)
    return W, D


@pytest.fixture
def zigzag_problem():
    ## four points, targets from a zigzag layout with y = 0, 1, 2, 3
    target_layout = np.array([[0., 0.], [1., 1.], [0., 2.], [1., 3.]])
    D = distance_matrix(target_layout)
    W = np.ones((4, 4)) - np.eye(4)
    start = np.array([[0.2, 0.], [0.8, 1.], [0.2, 2.], [0.8, 3.]])
    return start, W, D


@pytest.fixture
def random_problem():
    rng = np.random.default_rng(2024)
    layout = rng.normal(size=(8, 2))
    D = distance_matrix(layout)
    W = np.ones((8, 8)) - np.eye(8)
    start = rng.normal(size=(8, 2))
    return start, W, D
