import numpy as np

from constrained_mds.config import SUPPORTED_DIMS


def generate_starting_configuration(n_points:int, dim:int = 2, random:bool = True, random_state=None)->np.ndarray:
    ## Kruskal-style starting configuration, scaled to unit Frobenius norm
    assert dim in SUPPORTED_DIMS
    assert n_points > 0

    if random:
        rng = np.random.default_rng(random_state)
        starting_config = rng.uniform(size=(n_points, dim))
    else:
        # stack j * I_dim for j = 1, 2, ... and keep the first n_points rows,
        # e.g. 5 points in 2-d: (1,0) (0,1) (2,0) (0,2) (3,0)
        max_multiplier = n_points//dim + 2
        starting_config = np.vstack([np.diag(j*np.ones(dim)) for j in range(1, max_multiplier)])
    config_out = np.array(starting_config[:n_points, :])
    config_out /= np.linalg.norm(config_out)
    return config_out


def inverse_power_weights(target_distances, power:float = 2)->np.ndarray:
    """W[i, j] = D[i, j] ** -power, zero on the diagonal and wherever D is zero."""
    target_distances = np.asarray(target_distances, dtype=float)
    weights = np.zeros_like(target_distances)
    positive = (target_distances > 0) & ~np.eye(target_distances.shape[0], dtype=bool)
    weights[positive] = target_distances[positive]**(-power)
    return weights
