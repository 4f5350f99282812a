"""Finite-difference helpers for checking user-supplied gradients.

The optimizer itself never calls these; they exist so that callers can
verify an objective/gradient pair before handing it to :func:`sr1`.
"""

from __future__ import annotations

import numpy as np

from .core import Array, Objective, Problem


def approx_grad(
    fun: Objective, x: Array, eps: float = 1e-6, return_evals: bool = False
) -> Array | tuple[Array, int]:
    """Compute a central-difference gradient approximation.

    Parameters
    ----------
    fun:
        Objective function returning a scalar given x.
    x:
        Point where the gradient is approximated.
    eps:
        Perturbation size for finite differences.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float).copy()
    grad = np.zeros_like(x, dtype=float)
    evals = 0
    for i in range(x.size):
        ei = np.zeros_like(x)
        ei[i] = eps
        fx_plus = fun(x + ei)
        fx_minus = fun(x - ei)
        evals += 2
        grad[i] = (fx_plus - fx_minus) / (2.0 * eps)
    if return_evals:
        return grad, evals
    return grad


def check_grad(problem: Problem, x: Array, eps: float = 1e-6) -> float:
    """Return the largest absolute gap between ``problem.grad`` and finite differences."""
    x = np.asarray(x, dtype=float)
    supplied = np.asarray(problem.grad(x), dtype=float)
    if supplied.shape != x.shape:
        raise ValueError(
            f"Gradient has shape {supplied.shape}, expected {x.shape}."
        )
    numeric = approx_grad(problem.fun, x, eps=eps)
    return float(np.max(np.abs(supplied - numeric)))


__all__ = ["approx_grad", "check_grad"]
