"""SR1 quasi-Newton minimization.

Example
-------
>>> import numpy as np
>>> from sr1opt.optimize import reference_problem, sr1
>>> res = sr1(reference_problem(), np.zeros(2), tol=1e-6, maxiter=100)
>>> res.success
True
>>> np.allclose(res.x, [2.0, -2.0])
True
"""

from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    OptimizeResult,
    Problem,
    Status,
    check_convergence,
)
from .line_search import backtracking_armijo
from .objectives import (
    REFERENCE_A,
    REFERENCE_B,
    REFERENCE_MINIMIZER,
    quadratic,
    reference_problem,
    rosenbrock,
    rosenbrock_grad,
    rosenbrock_problem,
)
from .quasi_newton import minimize, sr1, sr1_update
from .utils import approx_grad, check_grad

__all__ = [
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "OptimizeResult",
    "Problem",
    "REFERENCE_A",
    "REFERENCE_B",
    "REFERENCE_MINIMIZER",
    "Status",
    "approx_grad",
    "backtracking_armijo",
    "check_convergence",
    "check_grad",
    "minimize",
    "quadratic",
    "reference_problem",
    "rosenbrock",
    "rosenbrock_grad",
    "rosenbrock_problem",
    "sr1",
    "sr1_update",
]
