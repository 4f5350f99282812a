"""Core interfaces shared by the SR1 optimizer and its helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]

DEFAULT_TOL = 1e-6
DEFAULT_MAXITER = 100


class Status(Enum):
    """Exit status of the optimization loop."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"


@dataclass(frozen=True)
class Problem:
    """Objective/gradient pair describing an unconstrained problem.

    ``dim`` is optional; when set, starting points must have that length.
    """

    fun: Objective
    grad: Gradient
    dim: Optional[int] = None


@dataclass
class OptimizeResult:
    """Result object returned by :func:`sr1opt.optimize.sr1`.

    Attributes:
        x: Final point.
        fun: Objective value at ``x``.
        nit: Iteration index at which the loop stopped.
        status: ``Status.CONVERGED`` or ``Status.MAX_ITER``.
        message: Human-readable description of ``status``.
        grad_norm: Euclidean norm of the gradient at ``x``.
        nfev: Number of objective evaluations.
        njev: Number of gradient evaluations.
        nskip: Number of SR1 updates skipped by the denominator guard.
        inv_hessian: Final inverse-Hessian approximation.
        history: Iterates visited, starting with ``x0`` (only when requested).
    """

    x: Array
    fun: float
    nit: int
    status: Status
    message: str
    grad_norm: float
    nfev: int
    njev: int
    nskip: int
    inv_hessian: Array
    history: List[Array] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is Status.CONVERGED


def check_convergence(grad_norm: float, tol: float) -> bool:
    """Return True if the gradient norm is strictly below ``tol``."""
    return grad_norm < tol


__all__ = [
    "Array",
    "Objective",
    "Gradient",
    "DEFAULT_MAXITER",
    "DEFAULT_TOL",
    "Problem",
    "OptimizeResult",
    "Status",
    "check_convergence",
]
