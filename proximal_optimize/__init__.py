"""proximal_optimize - hill climbing and proximal gradient optimization on float vectors.

Example
-------
>>> import numpy as np
>>> from proximal_optimize import gradient_step, pgm
>>> res = pgm(np.array([-1.0, -1.0]), gradient_step(lambda x: 2 * (x - [1.0, 0.5])),
...           step_f=np.array([0.05, 0.05]), e_rel=1e-9, max_iter=5000)
>>> bool(res.converged)
True
"""

__version__ = "0.1.0"

from . import core, hill_climb, nesterov, operators, vector
from .core import (
    DEFAULT_COMPRESSION_RATIO,
    DEFAULT_EXPANSION_RATIO,
    DEFAULT_INITIAL_STEP_SIZE,
    DEFAULT_NUM_ITERATIONS,
    HillClimbConfig,
    Ordering,
    ParameterLengthMismatch,
    PGMResult,
    ProximalOptimizeError,
    SolutionNoBetter,
    StartUnorderable,
)
from .hill_climb import DimensionParameters, HillClimbOptimizer, compare_fitness
from .logging import configure_logging, get_logger, set_log_level
from .nesterov import NesterovStepper
from .operators import (
    forward_backward,
    gradient_step,
    prox_box,
    prox_id,
    prox_plus,
    prox_soft,
)
from .pgm import pgm
from .vector import (
    add,
    inner_product,
    l2sq,
    max_scalar,
    mul,
    mul_scalar,
    sub,
    sub_scalar,
    sum_of_squares,
)

__all__ = [
    "__version__",
    # Submodules
    "core",
    "hill_climb",
    "nesterov",
    "operators",
    "vector",
    # Core types
    "DEFAULT_COMPRESSION_RATIO",
    "DEFAULT_EXPANSION_RATIO",
    "DEFAULT_INITIAL_STEP_SIZE",
    "DEFAULT_NUM_ITERATIONS",
    "HillClimbConfig",
    "Ordering",
    "PGMResult",
    # Errors
    "ProximalOptimizeError",
    "ParameterLengthMismatch",
    "StartUnorderable",
    "SolutionNoBetter",
    # Algorithms
    "DimensionParameters",
    "HillClimbOptimizer",
    "NesterovStepper",
    "compare_fitness",
    "pgm",
    # Proximal operators
    "forward_backward",
    "gradient_step",
    "prox_box",
    "prox_id",
    "prox_plus",
    "prox_soft",
    # Vector arithmetic
    "add",
    "inner_product",
    "l2sq",
    "max_scalar",
    "mul",
    "mul_scalar",
    "sub",
    "sub_scalar",
    "sum_of_squares",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
]
