import numpy as np


def distance_matrix(configuration:np.ndarray)->np.ndarray:
    # n x n x d array of row differences, then collapse the axis dimension
    diffs = configuration[:, np.newaxis, :] - configuration[np.newaxis, :, :]
    return np.sqrt(np.sum(diffs**2, axis=-1))


def upper_triangle(matrix:np.ndarray)->np.ndarray:
    ## entries (i, j) with i < j, row-major
    rows, cols = np.triu_indices(matrix.shape[0], k=1)
    return matrix[rows, cols]


def get_pairwise_distances(configuration:np.ndarray)->np.ndarray:
    return upper_triangle(distance_matrix(configuration))


def row_weight_sums(weights:np.ndarray)->np.ndarray:
    return np.sum(weights, axis=1)
