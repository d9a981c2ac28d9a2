import io

import numpy as np
from loguru import logger

from constrained_mds import enable_logging, solve_unconstrained


def test_silent_by_default(equilateral_targets):
    W, D = equilateral_targets
    sink = io.StringIO()
    handler = logger.add(sink, level="DEBUG")
    try:
        solve_unconstrained(np.array([[0., 0.], [2., 0.], [1., 1.5]]), W, D, 3, 1e-6)
    finally:
        logger.remove(handler)
    assert sink.getvalue() == ""


def test_enable_logging(equilateral_targets):
    W, D = equilateral_targets
    sink = io.StringIO()
    handler = enable_logging("DEBUG", sink)
    try:
        solve_unconstrained(np.array([[0., 0.], [2., 0.], [1., 1.5]]), W, D, 3, 1e-6)
    finally:
        logger.remove(handler)
        logger.disable("constrained_mds")
    output = sink.getvalue()
    assert "Starting Stress" in output
    assert "iteration 0" in output
