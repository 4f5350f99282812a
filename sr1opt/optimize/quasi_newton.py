"""Symmetric rank-one (SR1) quasi-Newton minimization."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ..logging import get_logger
from .core import (
    DEFAULT_MAXITER,
    DEFAULT_TOL,
    Array,
    OptimizeResult,
    Problem,
    Status,
    check_convergence,
)

logger = get_logger(__name__)

LineSearch = Callable[..., tuple[float, int]]
Callback = Callable[[Array, Array], None]


def sr1_update(
    inv_hessian: Array, s: Array, y: Array, eps: Optional[float] = None
) -> tuple[Array, bool]:
    """Apply the guarded SR1 correction to an inverse-Hessian approximation.

    With ``v = s - H y`` the update is ``H + v v^T / (v^T y)``. When
    ``|v^T y|`` does not exceed ``eps`` (machine epsilon of ``H``'s dtype by
    default) the update is skipped and ``H`` is returned unchanged.

    Returns:
        The new approximation and whether the update was applied.
    """
    if eps is None:
        eps = float(np.finfo(inv_hessian.dtype).eps)
    v = s - inv_hessian @ y
    denom = float(np.dot(v, y))
    if abs(denom) <= eps:
        return inv_hessian, False
    return inv_hessian + np.outer(v, v) / denom, True


def _validate_inputs(problem: Problem, x0: Array, tol: float, maxiter: int) -> Array:
    if not np.isfinite(tol) or tol <= 0:
        raise ValueError(f"tol must be a positive finite number, got {tol!r}.")
    if isinstance(maxiter, bool) or not isinstance(maxiter, (int, np.integer)):
        raise ValueError(f"maxiter must be an integer, got {maxiter!r}.")
    if maxiter < 0:
        raise ValueError(f"maxiter must be non-negative, got {maxiter}.")
    x = np.array(x0, dtype=float)
    if x.ndim != 1 or x.size == 0:
        raise ValueError(f"x0 must be a non-empty 1-D vector, got shape {x.shape}.")
    if not np.all(np.isfinite(x)):
        raise ValueError("x0 must contain only finite values.")
    if problem.dim is not None and x.size != problem.dim:
        raise ValueError(
            f"x0 has dimension {x.size} but the problem expects {problem.dim}."
        )
    return x


def _compute_gradient(problem: Problem, x: Array) -> Array:
    grad = np.asarray(problem.grad(x), dtype=float)
    if grad.shape != x.shape:
        raise ValueError(
            f"Gradient has shape {grad.shape}, expected {x.shape}."
        )
    return grad


def sr1(
    problem: Problem,
    x0: Array,
    tol: float = DEFAULT_TOL,
    maxiter: int = DEFAULT_MAXITER,
    line_search: Optional[LineSearch] = None,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> OptimizeResult:
    """Minimize ``problem.fun`` with the SR1 quasi-Newton method.

    The inverse-Hessian approximation starts at the identity. Each iteration
    checks ``||g|| < tol`` before stepping along ``d = -H g`` with a unit
    step, or with the step length chosen by ``line_search`` when given
    (same signature as :func:`backtracking_armijo`). No safeguard against
    divergence is applied: a non-convex objective or an overshooting unit
    step simply ends with ``Status.MAX_ITER``.

    Args:
        problem: Objective/gradient pair.
        x0: Starting point; its length fixes the dimension ``n``.
        tol: Gradient-norm tolerance (strict inequality).
        maxiter: Iteration budget. ``0`` returns ``x0`` unchanged.
        line_search: Optional step-length rule.
        callback: Called as ``callback(x, g)`` after every step.
        history: Record every iterate, including ``x0``.

    Raises:
        ValueError: On invalid ``tol``, ``maxiter`` or ``x0``, or when the
            gradient does not have the shape of ``x0``.
    """
    x = _validate_inputs(problem, x0, tol, maxiter)
    n = x.size
    inv_hessian = np.eye(n)
    hist: list[Array] = []
    if history:
        hist.append(x.copy())
    nfev = 0
    njev = 0
    nskip = 0
    nit = 0
    grad = _compute_gradient(problem, x)
    njev += 1
    status = Status.MAX_ITER
    message = "Reached max iterations."

    while nit < maxiter:
        grad_norm = float(np.linalg.norm(grad))
        logger.debug("iteration %d: |g| = %.3e", nit, grad_norm)
        if check_convergence(grad_norm, tol):
            status = Status.CONVERGED
            message = f"Converged in {nit} iterations."
            break
        direction = -inv_hessian @ grad
        if line_search is None:
            s = direction
        else:
            alpha, ls_evals = line_search(problem.fun, x, direction, grad)
            nfev += int(ls_evals)
            s = alpha * direction
        x_new = x + s
        grad_new = _compute_gradient(problem, x_new)
        njev += 1
        y = grad_new - grad
        inv_hessian, updated = sr1_update(inv_hessian, s, y)
        if not updated:
            nskip += 1
            logger.debug("iteration %d: SR1 denominator too small, update skipped", nit)
        x = x_new
        grad = grad_new
        if callback is not None:
            callback(x.copy(), grad.copy())
        if history:
            hist.append(x.copy())
        nit += 1

    fx = float(problem.fun(x))
    nfev += 1
    logger.info("%s", message)
    result = OptimizeResult(
        x=x,
        fun=fx,
        nit=nit,
        status=status,
        message=message,
        grad_norm=float(np.linalg.norm(grad)),
        nfev=nfev,
        njev=njev,
        nskip=nskip,
        inv_hessian=inv_hessian,
        history=hist,
    )
    return result


minimize = sr1


__all__ = ["minimize", "sr1", "sr1_update"]
