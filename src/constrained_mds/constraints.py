"""
Which coordinates the majorization step may move.

Three policies are supported: nothing fixed, one axis fixed for every
point, or an arbitrary grid of fixed / free entries. Each exposes the
same two operations used by the update step: ``free_mask`` tells which
entries get recomputed, ``pin`` writes the fixed values into the next
configuration.
"""
from dataclasses import dataclass
from numbers import Integral, Real

import numpy as np

from constrained_mds.exceptions import InvalidProblemError


class _Free:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "FREE"


## marker for a coordinate left to the solver
FREE = _Free()


@dataclass(frozen=True)
class Fixed:
    value: float


class Unconstrained:
    def free_mask(self, shape:tuple)->np.ndarray:
        return np.ones(shape, dtype=bool)

    def pin(self, next_configuration:np.ndarray, initial:np.ndarray)->None:
        return

    def __repr__(self):
        return "Unconstrained()"


@dataclass(frozen=True)
class AxisFixed:
    """Hold one (0-based) axis at its starting value for every point."""
    axis: int

    def __post_init__(self):
        if isinstance(self.axis, bool) or not isinstance(self.axis, Integral) or self.axis < 0:
            raise InvalidProblemError(f"axis must be a non-negative integer, got {self.axis!r}")

    @classmethod
    def from_one_based(cls, axis:int)->"AxisFixed":
        if isinstance(axis, bool) or not isinstance(axis, Integral) or axis < 1:
            raise InvalidProblemError(f"fixed axis is 1-based, got {axis!r}")
        return cls(int(axis) - 1)

    def _check_axis(self, n_dims:int)->None:
        if self.axis >= n_dims:
            raise InvalidProblemError(f"axis {self.axis} out of range for {n_dims} dimensions")

    def free_mask(self, shape:tuple)->np.ndarray:
        self._check_axis(shape[1])
        mask = np.ones(shape, dtype=bool)
        mask[:, self.axis] = False
        return mask

    def pin(self, next_configuration:np.ndarray, initial:np.ndarray)->None:
        # always the solve's starting values, never a previous iterate
        self._check_axis(next_configuration.shape[1])
        next_configuration[:, self.axis] = initial[:, self.axis]


class PerEntryFixed:
    """
    Grid of ``Fixed(value)`` / ``FREE`` entries, one per coordinate.

    Plain real numbers in ``entries`` are read as ``Fixed``; fixed values
    must be finite. Use ``from_matrix`` for numeric input where a marker
    value (NaN by default) stands for "free".
    """

    def __init__(self, entries):
        entries = list(entries)
        if not all(np.iterable(row) for row in entries):
            raise InvalidProblemError("fixed-coordinate entries must be a grid of rows")
        rows = [list(row) for row in entries]
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise InvalidProblemError("fixed-coordinate entries must form a non-empty rectangular grid")
        self.free = np.zeros((len(rows), len(rows[0])), dtype=bool)
        self.values = np.zeros(self.free.shape, dtype=float)
        for i, row in enumerate(rows):
            for a, entry in enumerate(row):
                if entry is FREE:
                    self.free[i, a] = True
                    continue
                if isinstance(entry, Fixed):
                    value = entry.value
                elif isinstance(entry, Real):
                    value = entry
                else:
                    raise InvalidProblemError(f"entry ({i}, {a}) is neither Fixed nor FREE: {entry!r}")
                if not isinstance(value, Real) or not np.isfinite(value):
                    raise InvalidProblemError(f"entry ({i}, {a}) is fixed to a non-finite value {value!r}")
                self.values[i, a] = value

    @classmethod
    def from_matrix(cls, matrix, free_marker=np.nan)->"PerEntryFixed":
        matrix = np.asarray(matrix, dtype=float)
        if matrix.ndim != 2:
            raise InvalidProblemError(f"fixed-coordinate matrix must be 2-D, got shape {matrix.shape}")
        if np.isnan(free_marker):
            free = np.isnan(matrix)
        else:
            free = matrix == free_marker
        return cls([[FREE if free[i, a] else Fixed(float(matrix[i, a]))
                     for a in range(matrix.shape[1])]
                    for i in range(matrix.shape[0])])

    @property
    def shape(self)->tuple:
        return self.free.shape

    def entry(self, point:int, axis:int):
        return FREE if self.free[point, axis] else Fixed(float(self.values[point, axis]))

    def free_mask(self, shape:tuple)->np.ndarray:
        return self.free.copy()

    def pin(self, next_configuration:np.ndarray, initial:np.ndarray)->None:
        fixed = ~self.free
        next_configuration[fixed] = self.values[fixed]

    def __repr__(self):
        return f"PerEntryFixed(shape={self.shape}, n_free={int(self.free.sum())})"
