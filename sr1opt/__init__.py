"""sr1opt - symmetric rank-one quasi-Newton minimization on NumPy arrays."""

__version__ = "0.1.0"

from .logging import configure_logging, get_logger, set_log_level
from .optimize import (
    OptimizeResult,
    Problem,
    Status,
    backtracking_armijo,
    check_grad,
    minimize,
    quadratic,
    reference_problem,
    sr1,
    sr1_update,
)

__all__ = [
    "OptimizeResult",
    "Problem",
    "Status",
    "__version__",
    "backtracking_armijo",
    "check_grad",
    "configure_logging",
    "get_logger",
    "minimize",
    "quadratic",
    "reference_problem",
    "set_log_level",
    "sr1",
    "sr1_update",
]
