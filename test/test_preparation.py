import numpy as np
import pytest

from constrained_mds.preparation import generate_starting_configuration, inverse_power_weights


@pytest.mark.parametrize("dim", [2, 3])
def test_random_start_shape_and_norm(dim):
    config = generate_starting_configuration(10, dim=dim, random_state=0)
    assert config.shape == (10, dim)
    assert np.linalg.norm(config) == pytest.approx(1.0)


def test_random_start_reproducible():
    assert np.array_equal(generate_starting_configuration(6, random_state=42),
                          generate_starting_configuration(6, random_state=42))


def test_diagonal_start():
    config = generate_starting_configuration(5, dim=2, random=False)
    expected = np.array([[1., 0.], [0., 1.], [2., 0.], [0., 2.], [3., 0.]])
    assert np.allclose(config, expected/np.linalg.norm(expected))


def test_diagonal_start_3d_has_distinct_points():
    config = generate_starting_configuration(7, dim=3, random=False)
    assert len({tuple(row) for row in config}) == 7


def test_inverse_power_weights():
    D = np.array([[0., 2., 0.], [2., 0., 4.], [0., 4., 0.]])
    W = inverse_power_weights(D)
    assert np.allclose(W, [[0., 0.25, 0.], [0.25, 0., 1/16], [0., 1/16, 0.]])
    assert np.allclose(inverse_power_weights(D, power=1)[0, 1], 0.5)
