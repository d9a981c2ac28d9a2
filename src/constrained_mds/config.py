## Defaults shared by the solvers; callers override per call.
import sys

from loguru import logger

# pairs closer than this contribute nothing to the Guttman update
EPSILON = 1e-5

DEFAULT_MAX_ITER = 500
DEFAULT_TOL = 1e-4

SUPPORTED_DIMS = (2, 3)

LOG_FORMAT = " {time} {level} {name}:{function} {message}"


def enable_logging(level:str = "INFO", sink=sys.stderr)->int:
    """Turn on the package logger and attach a sink; returns the loguru handler id."""
    logger.enable("constrained_mds")
    return logger.add(sink, format=LOG_FORMAT, filter="constrained_mds", level=level)
